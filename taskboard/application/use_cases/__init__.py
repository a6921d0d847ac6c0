"""Application use cases: one service per workflow."""

from taskboard.application.use_cases.identity import IdentityService
from taskboard.application.use_cases.tasks import TaskService

__all__ = ["IdentityService", "TaskService"]
