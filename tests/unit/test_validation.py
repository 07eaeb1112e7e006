"""
Unit tests for query validation (ecb_sdmx.validation).
"""

from __future__ import annotations

import pytest

from ecb_sdmx.exceptions import ValidationError
from ecb_sdmx.validation import (
    MetadataQuery,
    SeriesQuery,
    validate_metadata_query,
    validate_series_query,
)


class TestSeriesQuery:
    """Tests for validate_series_query()."""

    def test_minimal(self):
        query = validate_series_query(flow="EXR")
        assert isinstance(query, SeriesQuery)
        assert query.key is None
        assert query.query_params() == {
            "startPeriod": None,
            "endPeriod": None,
            "firstNObservations": None,
            "lastNObservations": None,
        }

    def test_full(self):
        query = validate_series_query(
            flow="EXR",
            key="D.USD.EUR.SP00.A",
            start_period="2021-01-04",
            end_period="2021-01-06",
            first_n=2,
            last_n=1,
        )
        assert query.query_params() == {
            "startPeriod": "2021-01-04",
            "endPeriod": "2021-01-06",
            "firstNObservations": 2,
            "lastNObservations": 1,
        }

    @pytest.mark.parametrize(
        "period", ["2019", "2019-S1", "2019-Q4", "2019-01", "2019-W01", "2019-W53", "2019-01-01"]
    )
    def test_supported_period_formats(self, period):
        assert validate_series_query(flow="EXR", start_period=period).start_period == period

    @pytest.mark.parametrize("period", ["19", "2019-S3", "2019-Q5", "2019-13", "2019-W54", "01/01/2019"])
    def test_unsupported_period_formats(self, period):
        with pytest.raises(ValidationError, match="start_period"):
            validate_series_query(flow="EXR", start_period=period)

    @pytest.mark.parametrize("flow", ["", "   ", None, 1, ["EXR"]])
    def test_bad_flow(self, flow):
        with pytest.raises(ValidationError, match="flow"):
            validate_series_query(flow=flow)

    def test_empty_key(self):
        with pytest.raises(ValidationError, match="key"):
            validate_series_query(flow="EXR", key="")

    @pytest.mark.parametrize("count", [0, -1, 1.5, "5", True])
    def test_bad_counts(self, count):
        with pytest.raises(ValidationError, match="first_n"):
            validate_series_query(flow="EXR", first_n=count)
        with pytest.raises(ValidationError, match="last_n"):
            validate_series_query(flow="EXR", last_n=count)

    def test_non_string_period(self):
        with pytest.raises(ValidationError, match="end_period"):
            validate_series_query(flow="EXR", end_period=2021)

    def test_message_lists_every_problem(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_series_query(flow="", first_n=0)
        message = str(excinfo.value)
        assert "flow" in message
        assert "first_n" in message


class TestMetadataQuery:
    """Tests for validate_metadata_query()."""

    def test_defaults(self):
        query = validate_metadata_query()
        assert isinstance(query, MetadataQuery)
        assert query.agency is None
        assert query.id is None

    def test_values(self):
        query = validate_metadata_query(agency="ECB", id="ECB_EXR1")
        assert (query.agency, query.id) == ("ECB", "ECB_EXR1")

    @pytest.mark.parametrize("field", ["agency", "id"])
    @pytest.mark.parametrize("value", ["", 3])
    def test_bad_values(self, field, value):
        with pytest.raises(ValidationError, match=field):
            validate_metadata_query(**{field: value})
