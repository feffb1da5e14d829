"""
Timezone-aware datetime utilities.

This module provides utilities for working with timezone-aware datetimes,
ensuring consistent handling across the application.
"""

from datetime import date, datetime, timezone
from typing import Optional

# UTC timezone constant
UTC = timezone.utc


def now_utc() -> datetime:
    """
    Get current UTC datetime (timezone-aware).

    Replaces datetime.utcnow() which is deprecated in Python 3.12+.

    Returns:
        datetime: Current UTC time with tzinfo set to UTC
    """
    return datetime.now(UTC)


def today_utc() -> date:
    """Get today's date in UTC."""
    return now_utc().date()


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure datetime is timezone-aware and in UTC.

    SQLite returns naive datetimes; those are assumed to already be UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_calendar_date(value: object) -> object:
    """
    Coerce an ISO date or datetime string to its calendar-date part.

    Clients send either "2026-08-01" or a full timestamp such as
    "2026-08-01T00:00:00.000Z". Values that are not strings are returned
    unchanged so pydantic can validate them.

    Examples:
        >>> parse_calendar_date("2026-08-01T00:00:00.000Z")
        datetime.date(2026, 8, 1)
        >>> parse_calendar_date("2026-08-01")
        datetime.date(2026, 8, 1)
    """
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text:
        return None
    if "T" in text:
        text = text.split("T", 1)[0]
    return date.fromisoformat(text)
