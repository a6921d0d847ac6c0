"""Shared enumerations for taskboard.

Role and task status are closed sets; the database enforces the same
values with CHECK constraints.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Role(_ValuesMixin, str, Enum):
    """Caller role carried in the token and stored on the user."""

    USER = "user"
    ADMIN = "admin"


class TaskStatus(_ValuesMixin, str, Enum):
    """Task lifecycle status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AccessDecision(str, Enum):
    """Outcome of an ownership check on a single task."""

    ALLOW = "allow"
    DENY = "deny"
