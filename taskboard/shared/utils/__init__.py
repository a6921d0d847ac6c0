"""Shared utilities: datetime helpers."""

from taskboard.shared.utils.datetime import ensure_utc, from_timestamp_utc, utc_now

__all__ = [
    "ensure_utc",
    "from_timestamp_utc",
    "utc_now",
]
