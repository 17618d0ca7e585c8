"""
Date Parser
Turns the heterogeneous date strings found in fulfillment payloads into
comparable calendar values.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from sla_monitor.utils import parse_leading_int


# Tried in order after ISO-8601 parsing fails
_FALLBACK_FORMATS = (
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%b %d %Y",
    "%a, %d %b %Y %H:%M:%S",
)


def build_calendar_value(year: int, month_index: int, day: int) -> Optional[datetime]:
    """
    Build a midnight datetime the way a JavaScript ``Date(year, month, day)``
    constructor does.

    ``month_index`` is 0-based. Out-of-range months and days roll over into
    neighbouring months and years instead of failing, and years 0-99 are
    read as 1900-1999. Returns None when the result cannot be represented.
    """
    if 0 <= year <= 99:
        year += 1900

    year += month_index // 12
    month_index %= 12

    try:
        first_of_month = datetime(year, month_index + 1, 1)
        return first_of_month + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def _parse_day_month_year(parts: list) -> Optional[datetime]:
    """Parse ``D/M/Y`` parts without range validation."""
    day = parse_leading_int(parts[0])
    month = parse_leading_int(parts[1])
    year = parse_leading_int(parts[2])

    if day is None or month is None or year is None:
        return None

    return build_calendar_value(year, month - 1, day)


def _to_naive_utc(value: datetime) -> datetime:
    """Drop timezone info so every parsed value stays mutually comparable."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _parse_generic(text: str) -> Optional[datetime]:
    """Parse ISO-8601 first, then a handful of common textual formats."""
    candidate = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text

    try:
        return _to_naive_utc(datetime.fromisoformat(candidate))
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    return None


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date string into a calendar value.

    Three-part slash-delimited text is read as day/month/year; anything else
    goes through generic parsing. Invalid input gives None, never an error.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return _to_naive_utc(value)

    text = str(value).strip()
    if not text:
        return None

    parts = text.split("/")
    if len(parts) == 3:
        return _parse_day_month_year(parts)

    return _parse_generic(text)
