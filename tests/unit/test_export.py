"""
Unit tests for the exporter (ecb_sdmx.export).

Tests CSV and Parquet export, directory creation and error handling
using pytest's tmp_path fixture.
"""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from ecb_sdmx.exceptions import ExportError
from ecb_sdmx.export import export_frame


def _make_frame() -> pd.DataFrame:
    """Build a small observation table for testing."""
    return pd.DataFrame({
        "date": [date(2021, 1, 4), date(2021, 1, 5)],
        "key": ["D.USD.EUR.SP00.A"] * 2,
        "value": [1.2296, 1.2271],
        "title": ["US dollar/Euro"] * 2,
        "description": ["ECB reference exchange rate"] * 2,
    })


class TestExportCSV:
    """Tests for CSV export."""

    def test_csv_written(self, tmp_path):
        path = export_frame(_make_frame(), tmp_path / "exr.csv", output_format="csv")
        assert path.endswith("exr.csv")
        loaded = pd.read_csv(path)
        assert list(loaded.columns) == ["date", "key", "value", "title", "description"]
        assert loaded["value"].iloc[0] == pytest.approx(1.2296)
        assert loaded["date"].iloc[0] == "2021-01-04"

    def test_creates_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "exr.csv"
        export_frame(_make_frame(), target, output_format="csv")
        assert target.exists()


class TestExportParquet:
    """Tests for Parquet export."""

    def test_parquet_round_trip(self, tmp_path):
        path = export_frame(_make_frame(), tmp_path / "exr.parquet")
        loaded = pd.read_parquet(path)
        assert len(loaded) == 2
        assert loaded["key"].iloc[1] == "D.USD.EUR.SP00.A"

    def test_mixed_date_types(self, tmp_path):
        df = pd.DataFrame({"date": [2021, "2021-Q1"], "value": [1.0, 2.0]})
        path = export_frame(df, tmp_path / "mixed.parquet")
        assert pd.read_parquet(path)["date"].tolist() == ["2021", "2021-Q1"]


class TestExportErrors:
    """Tests for error handling."""

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_frame(_make_frame(), tmp_path / "exr.xlsx", output_format="xlsx")

    def test_write_failure_wrapped(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(ExportError):
            export_frame(_make_frame(), blocker / "exr.csv", output_format="csv")
