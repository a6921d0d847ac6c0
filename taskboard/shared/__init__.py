"""Shared enums, logging setup and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from taskboard.shared.enums import AccessDecision, Role, TaskStatus
from taskboard.shared.utils import ensure_utc, from_timestamp_utc, utc_now

__all__ = [
    "AccessDecision",
    "Role",
    "TaskStatus",
    "ensure_utc",
    "from_timestamp_utc",
    "utc_now",
]
