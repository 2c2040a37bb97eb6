"""Helper functions for converting database values."""

from datetime import datetime, UTC as datetime_utc


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(datetime_utc)


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse a timestamp stored by SQLite into a datetime.

    Handles ISO strings written by the application (with or without offset,
    with a trailing ``Z``) and the ``YYYY-MM-DD HH:MM:SS`` form produced by
    ``CURRENT_TIMESTAMP`` defaults. Naive values are assumed to be UTC.

    Args:
        value: Raw column value

    Returns:
        Parsed datetime or None if the column was empty
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime_utc)
    return parsed


def format_timestamp(value: datetime | None) -> str:
    """Format a datetime for storage, defaulting to the current time."""
    return (value or utc_now()).isoformat()
