"""
Frequency codes and period coercion.

SDMX series carry their frequency as the ``FREQ`` dimension. The code
decides how observation periods are turned into Python values:

  daily / business  "2021-01-04"  -> datetime.date(2021, 1, 4)
  monthly           "2021-01"     -> datetime.date(2021, 1, 1)
  annual            "2021"        -> 2021
  anything else     "2021-Q1"     -> "2021-Q1" (passed through)
"""

from __future__ import annotations

import re
from datetime import date
from enum import Enum

from ecb_sdmx.exceptions import DataParseError


class Frequency(str, Enum):
    """SDMX frequency codes known to the library."""

    ANNUAL = "A"
    SEMI_ANNUAL = "S"
    QUARTERLY = "Q"
    MONTHLY = "M"
    WEEKLY = "W"
    DAILY = "D"
    BUSINESS = "B"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[Frequency, str] = {
    Frequency.ANNUAL: "annual",
    Frequency.SEMI_ANNUAL: "semi-annual",
    Frequency.QUARTERLY: "quarterly",
    Frequency.MONTHLY: "monthly",
    Frequency.WEEKLY: "weekly",
    Frequency.DAILY: "daily",
    Frequency.BUSINESS: "business",
}

_DAILY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTHLY_RE = re.compile(r"^(\d{4})-(\d{2})$")
_ANNUAL_RE = re.compile(r"^-?\d{1,4}$")


def frequency_label(code: str | None) -> str | None:
    """Map a raw frequency code to its canonical label.

    Unknown codes are returned unchanged; ``None`` stays ``None``.
    """
    if code is None:
        return None
    try:
        return Frequency(code).label
    except ValueError:
        return code


def coerce_period(label: str | None, period: str) -> date | int | str:
    """Coerce a raw period string according to a frequency label.

    Args:
        label: Canonical label as returned by ``frequency_label()``.
        period: Raw ``ObsDimension`` value.

    Returns:
        ``datetime.date`` for daily, business and monthly periods, ``int``
        for annual periods, the unchanged string otherwise.

    Raises:
        DataParseError: If a daily, monthly or annual period is malformed.
    """
    if label in ("daily", "business"):
        if not _DAILY_RE.match(period):
            raise DataParseError(f"Invalid {label} period {period!r}, expected YYYY-MM-DD")
        try:
            return date.fromisoformat(period)
        except ValueError as exc:
            raise DataParseError(f"Invalid {label} period {period!r}: {exc}") from exc

    if label == "monthly":
        match = _MONTHLY_RE.match(period)
        if not match:
            raise DataParseError(f"Invalid monthly period {period!r}, expected YYYY-MM")
        try:
            return date(int(match.group(1)), int(match.group(2)), 1)
        except ValueError as exc:
            raise DataParseError(f"Invalid monthly period {period!r}: {exc}") from exc

    if label == "annual":
        if not _ANNUAL_RE.match(period):
            raise DataParseError(f"Invalid annual period {period!r}, expected YYYY")
        return int(period)

    return period
