"""UTC datetime helpers.

All datetimes leaving the persistence layer are timezone-aware UTC. SQLite
stores timestamps without an offset, so rows are normalized with ensure_utc
at the repository boundary.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def from_timestamp_utc(timestamp: float) -> datetime:
    """Create a UTC-aware datetime from a Unix timestamp (e.g. JWT iat/exp)."""
    return datetime.fromtimestamp(timestamp, tz=UTC)
