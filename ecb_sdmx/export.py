"""
Exporter for ecb-sdmx.

Writes a fetched table (observations or metadata entries, already turned
into a DataFrame by ``ecb_sdmx.frames``) to disk as CSV or Parquet.

Parquet is the default: it keeps column dtypes, so dates and values do
not need re-parsing on load. CSV is there for tools without Parquet
support.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from ecb_sdmx.exceptions import ExportError

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _prepare_for_parquet(df: pd.DataFrame) -> pd.DataFrame:
    # A date column mixing date/int/str cannot be stored by pyarrow
    if "date" in df.columns and df["date"].map(type).nunique() > 1:
        df = df.copy()
        df["date"] = df["date"].astype(str)
    return df


def export_frame(
    df: pd.DataFrame,
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> str:
    """Write a DataFrame to *path*.

    Parent directories are created as needed. The file extension of
    *path* is not checked against *output_format*.

    Args:
        df: The table to write.
        path: Destination file.
        output_format: ``"csv"`` or ``"parquet"``.

    Returns:
        The written path as a string.

    Raises:
        ExportError: If *output_format* is unsupported or the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8")
        else:  # parquet
            _prepare_for_parquet(df).to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc

    logger.info(
        "Exported %s (%d rows, %d cols)",
        path,
        len(df),
        len(df.columns),
    )
    return str(path)
