"""
pandas conversion for parser output.

Parsers return plain Python records so they stay free of any tabular
container; these helpers materialize them as DataFrames for analysis.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Iterable

import pandas as pd

from ecb_sdmx.parsers.metadata import MetadataEntry
from ecb_sdmx.parsers.observations import FIXED_COLUMNS

METADATA_COLUMNS = ["agency", "id", "name"]


def records_to_frame(records: list[dict[str, Any]]) -> pd.DataFrame:
    """Build a DataFrame from observation records.

    Column order follows the records. An empty record list gives an empty
    frame with the fixed columns. ``date`` keeps the coerced Python values
    (``datetime.date``, ``int`` or ``str``); ``value`` is float64.
    """
    if not records:
        return pd.DataFrame(columns=list(FIXED_COLUMNS))
    df = pd.DataFrame.from_records(records, columns=list(records[0]))
    df["value"] = df["value"].astype("float64")
    return df


def entries_to_frame(entries: Iterable[MetadataEntry]) -> pd.DataFrame:
    """Build an ``agency, id, name`` DataFrame from metadata entries."""
    rows = [asdict(entry) for entry in entries]
    return pd.DataFrame(rows, columns=METADATA_COLUMNS)
