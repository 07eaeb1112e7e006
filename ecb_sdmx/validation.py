"""
Input validation for caller-facing queries.

The query arguments are validated by strict Pydantic models before any
request is built: wrong types are rejected rather than coerced (``"5"``
is not a count, ``True`` is not a count), strings must be non-blank and
counts positive. Pydantic's errors are re-raised as
``ecb_sdmx.exceptions.ValidationError`` so callers only deal with the
library's own hierarchy.

Period strings must use one of the formats the service accepts:

  YYYY          annual        2019
  YYYY-S[1-2]   semi-annual   2019-S1
  YYYY-Q[1-4]   quarterly     2019-Q1
  YYYY-MM       monthly       2019-01
  YYYY-W[01-53] weekly        2019-W01
  YYYY-MM-DD    daily         2019-01-01
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ecb_sdmx.exceptions import ValidationError

PERIOD_PATTERN = (
    r"^\d{4}(-(S[12]|Q[1-4]|W(0[1-9]|[1-4]\d|5[0-3])|(0[1-9]|1[0-2])(-\d{2})?))?$"
)


class _Query(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, str_strip_whitespace=True)


class SeriesQuery(_Query):
    """Arguments of a data query."""

    flow: str = Field(..., min_length=1)
    key: str | None = Field(None, min_length=1)
    start_period: str | None = Field(None, pattern=PERIOD_PATTERN)
    end_period: str | None = Field(None, pattern=PERIOD_PATTERN)
    first_n: int | None = Field(None, gt=0)
    last_n: int | None = Field(None, gt=0)

    def query_params(self) -> dict[str, Any]:
        """Query string parameters, absent values included as ``None``."""
        return {
            "startPeriod": self.start_period,
            "endPeriod": self.end_period,
            "firstNObservations": self.first_n,
            "lastNObservations": self.last_n,
        }


class MetadataQuery(_Query):
    """Arguments of a structure query."""

    agency: str | None = Field(None, min_length=1)
    id: str | None = Field(None, min_length=1)


def _describe(exc: PydanticValidationError) -> str:
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "query"
        lines.append(f"  {location}: {error['msg']} (got {error.get('input')!r})")
    return "Invalid query arguments:\n" + "\n".join(lines)


def validate_series_query(**arguments: Any) -> SeriesQuery:
    """Build a ``SeriesQuery``, raising ``ValidationError`` on bad input."""
    try:
        return SeriesQuery(**arguments)
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc)) from exc


def validate_metadata_query(**arguments: Any) -> MetadataQuery:
    """Build a ``MetadataQuery``, raising ``ValidationError`` on bad input."""
    try:
        return MetadataQuery(**arguments)
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc)) from exc
