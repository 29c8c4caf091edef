from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def as_date(value: Any) -> Optional[date]:
    """Narrow a date-like value coming from a driver or a spreadsheet cell.

    `datetime` (and pandas.Timestamp, a datetime subclass) is truncated to its
    calendar day. ISO strings are parsed. Anything else gives None.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            return None
    return None


def format_time_of_day(value: time) -> str:
    return value.strftime("%H:%M:%S")


def format_12h(value: datetime) -> str:
    """`9:05:00 AM` style, without a leading zero on the hour."""

    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d}:{value.second:02d} {meridiem}"
