"""
Parsers sub-package for ecb-sdmx.

Turns SDMX-ML documents returned by the service into flat records.
Parsers never perform I/O; they receive an lxml tree (or raw bytes)
and return new Python objects.

- base.py holds namespaces, hardened document loading and the
  ``id``/``value`` block reader shared by both parsers.
- frequency.py maps FREQ codes to labels and coerces periods.
- observations.py flattens generic data messages (one record per
  observation).
- metadata.py extracts ``(agency, id, name)`` entries from structure
  messages.
"""

from ecb_sdmx.parsers.frequency import Frequency, coerce_period, frequency_label
from ecb_sdmx.parsers.metadata import MetadataEntry, parse_metadata
from ecb_sdmx.parsers.observations import (
    FIXED_COLUMNS,
    SeriesData,
    iter_series,
    parse_observations,
)

__all__ = [
    "FIXED_COLUMNS",
    "Frequency",
    "MetadataEntry",
    "SeriesData",
    "coerce_period",
    "frequency_label",
    "iter_series",
    "parse_metadata",
    "parse_observations",
]
