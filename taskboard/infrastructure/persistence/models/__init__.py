"""Persistence models: ORM entities and mixins."""

from taskboard.infrastructure.persistence.models.mixins import IntegerIdMixin, TimestampMixin
from taskboard.infrastructure.persistence.models.task import Task
from taskboard.infrastructure.persistence.models.user import User

__all__ = [
    "IntegerIdMixin",
    "Task",
    "TimestampMixin",
    "User",
]
