"""
Timestamp helpers.

All stored timestamps are UTC, rendered as ISO 8601 with millisecond
precision and a trailing "Z" (e.g. 2026-10-19T08:15:30.123Z).
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime in the stored format.

    Examples:
        2026-10-19 08:15:30.123456+00:00 → "2026-10-19T08:15:30.123Z"
    """
    value = ensure_utc(value)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
