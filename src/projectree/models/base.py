from datetime import UTC, datetime

from sqlalchemy import DateTime


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def utc_timestamp() -> DateTime:
    """Column type for utc_now() values (TIMESTAMP WITH TIME ZONE)."""
    return DateTime(timezone=True)
