"""
Observation parser for SDMX-ML generic data messages.

Input structure (one message, any number of series):

  <generic:Series>
    <generic:SeriesKey>   <generic:Value id="FREQ" value="D"/> ...
    <generic:Attributes>  <generic:Value id="TITLE" value="..."/> ...
    <generic:Obs>
      <generic:ObsDimension value="2021-01-04"/>
      <generic:ObsValue value="1.2296"/>
    </generic:Obs>
    ...

Key transformation:
  Each series is read into a ``SeriesData`` (key, attributes, observations),
  then flattened so every observation becomes one record that repeats the
  series' fields. Series returned by one query may expose different
  attribute sets, so the output columns are the fixed columns
  ``date, key, value, title, description`` plus the fields common to
  *every* series; fields missing from some series are dropped rather than
  null-filled.

Observations without an ``ObsValue`` are skipped entirely.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from lxml import etree

from ecb_sdmx.exceptions import DataParseError
from ecb_sdmx.parsers.base import NAMESPACES, Document, read_id_values, root_of
from ecb_sdmx.parsers.frequency import coerce_period, frequency_label

logger = logging.getLogger(__name__)

FIXED_COLUMNS: tuple[str, ...] = ("date", "key", "value", "title", "description")

# Attribute ids renamed on the way out (after lower-casing)
_ATTRIBUTE_RENAMES = {"title_compl": "description"}


@dataclass
class Observation:
    """One dated value of a series."""
    date: date | int | str
    value: float


@dataclass
class SeriesData:
    """A single series as found in the message, before flattening.

    Attributes:
        key: Dimension id (lower-cased) -> code, in document order.
        attributes: Series attribute id (lower-cased) -> value, with
            ``title_compl`` renamed to ``description``.
        observations: Observations carrying a value, in document order.
    """
    key: dict[str, str]
    attributes: dict[str, str] = field(default_factory=dict)
    observations: list[Observation] = field(default_factory=list)

    @property
    def key_string(self) -> str:
        """Series key codes joined with ``.``, e.g. ``D.USD.EUR.SP00.A``."""
        return ".".join(self.key.values())

    @property
    def frequency(self) -> str | None:
        """Canonical frequency label, or ``None`` without a FREQ dimension."""
        return frequency_label(self.key.get("freq"))

    def fields(self) -> dict[str, Any]:
        """Series-level fields shared by all of its records."""
        fields: dict[str, Any] = {**self.key, **self.attributes}
        fields["key"] = self.key_string
        if "freq" in self.key:
            fields["frequency"] = self.frequency
        return fields


def _read_observation(
    obs: etree._Element,
    label: str | None,
    key_string: str,
) -> Observation | None:
    """Read one ``generic:Obs``; ``None`` when it carries no value."""
    value_el = obs.find("generic:ObsValue", NAMESPACES)
    if value_el is None:
        return None

    dimension = obs.find("generic:ObsDimension", NAMESPACES)
    period = dimension.get("value") if dimension is not None else None
    if period is None:
        raise DataParseError(
            f"Observation without ObsDimension period in series {key_string} "
            f"(line {obs.sourceline})"
        )

    raw_value = value_el.get("value")
    if raw_value is None:
        raise DataParseError(
            f"ObsValue without value attribute in series {key_string} at {period}"
        )

    try:
        coerced = coerce_period(label, period)
    except DataParseError as exc:
        raise DataParseError(f"Series {key_string}: {exc}") from exc

    try:
        value = float(raw_value)
    except ValueError as exc:
        raise DataParseError(
            f"Non-numeric observation value {raw_value!r} in series "
            f"{key_string} at {period}"
        ) from exc

    return Observation(date=coerced, value=value)


def _read_series(series: etree._Element) -> SeriesData:
    key_block = series.find("generic:SeriesKey", NAMESPACES)
    if key_block is None:
        raise DataParseError(
            f"Series element without SeriesKey (line {series.sourceline})"
        )
    key = read_id_values(key_block, context=f" (line {series.sourceline})")
    data = SeriesData(key=key)
    data.attributes = read_id_values(
        series.find("generic:Attributes", NAMESPACES),
        rename=_ATTRIBUTE_RENAMES,
        context=f" of series {data.key_string}",
    )

    label = data.frequency
    for obs in series.iterfind("generic:Obs", NAMESPACES):
        observation = _read_observation(obs, label, data.key_string)
        if observation is not None:
            data.observations.append(observation)

    logger.debug(
        "Series %s: %d observations with values",
        data.key_string,
        len(data.observations),
    )
    return data


def iter_series(document: Document) -> Iterator[SeriesData]:
    """Yield every series of a generic data message in document order.

    Raises:
        DataParseError: If a series or observation is malformed.
    """
    root = root_of(document)
    for series in root.iterfind(".//generic:Series", NAMESPACES):
        yield _read_series(series)


def output_columns(field_sets: list[list[str]]) -> list[str]:
    """Compute the output column list for a set of series.

    Returns the fixed columns followed by the fields present in every
    series, in the order they first appear.
    """
    columns = list(FIXED_COLUMNS)
    if not field_sets:
        return columns
    common = set(field_sets[0]).intersection(*field_sets[1:])
    # Common fields appear in the first series, so its order is first-seen order
    columns.extend(
        name for name in field_sets[0]
        if name in common and name not in FIXED_COLUMNS
    )
    return columns


def parse_observations(document: Document) -> list[dict[str, Any]]:
    """Flatten a generic data message into one record per observation.

    Every record has exactly the keys returned by ``output_columns()`` for
    the message's series, in that order. ``date`` holds the coerced period
    and ``value`` a float.

    Args:
        document: Parsed generic data message (or raw bytes/str).

    Returns:
        Records in series-then-observation order. Empty for a message
        without series.

    Raises:
        DataParseError: If the message is malformed. No partial result is
            returned.
    """
    all_series = list(iter_series(document))
    series_fields = [s.fields() for s in all_series]
    columns = output_columns([list(f) for f in series_fields])

    records: list[dict[str, Any]] = []
    for fields, series in zip(series_fields, all_series):
        for obs in series.observations:
            row = {**fields, "date": obs.date, "value": obs.value}
            records.append({name: row.get(name) for name in columns})

    logger.info(
        "Parsed %d series into %d records (%d columns)",
        len(all_series),
        len(records),
        len(columns),
    )
    return records
