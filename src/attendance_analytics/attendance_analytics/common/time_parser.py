from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import MILLIS_PER_HOUR, MILLIS_PER_MINUTE
from ..core.exceptions import TimeParseError


@dataclass(frozen=True)
class ParsedTime:
    """Result of parsing a clock-time string.

    `millis` is only meaningful when `error` is None.
    """

    millis: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _failure(text: str, reason: str) -> ParsedTime:
    return ParsedTime(millis=0, error=f"Invalid time {text!r}: {reason}")


def parse_clock_time(text: Optional[str]) -> ParsedTime:
    """Parse `H:MM[:SS] AM/PM` or `HH:MM[:SS]` into milliseconds since midnight.

    Empty input parses to zero. Anything else that is not a well-formed clock
    time comes back as a failed result instead of raising.
    """

    if text is None:
        return ParsedTime(millis=0)
    value = str(text).strip()
    if not value:
        return ParsedTime(millis=0)

    tokens = value.split()
    if len(tokens) > 2:
        return _failure(value, "unexpected tokens")

    meridiem = tokens[1].upper() if len(tokens) == 2 else None
    if meridiem is not None and meridiem not in {"AM", "PM"}:
        return _failure(value, f"unknown meridiem {tokens[1]!r}")

    parts = tokens[0].split(":")
    if len(parts) < 2 or len(parts) > 3:
        return _failure(value, "expected hour:minute[:second]")

    # isdigit() alone would let through signs and non-ASCII digits
    if not all(part.isascii() and part.isdigit() for part in parts):
        return _failure(value, "non-numeric component")

    hour = int(parts[0])
    minute = int(parts[1])
    second = int(parts[2]) if len(parts) == 3 else 0

    if meridiem is not None and not 1 <= hour <= 12:
        return _failure(value, "hour out of range 1..12")
    if meridiem is None and not 0 <= hour <= 23:
        return _failure(value, "hour out of range 0..23")
    if not 0 <= minute <= 59 or not 0 <= second <= 59:
        return _failure(value, "minute or second out of range 0..59")

    if meridiem == "PM" and hour != 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0

    return ParsedTime(millis=(hour * 3600 + minute * 60 + second) * 1000)


def clock_time_to_millis(text: Optional[str]) -> int:
    parsed = parse_clock_time(text)
    if not parsed.ok:
        raise TimeParseError(parsed.error)
    return parsed.millis


def format_clock(millis: float) -> str:
    """Format a duration since midnight as `H:MM` (minutes floored)."""

    total = int(millis)
    hours = total // MILLIS_PER_HOUR
    minutes = (total % MILLIS_PER_HOUR) // MILLIS_PER_MINUTE
    return f"{hours}:{minutes:02d}"
