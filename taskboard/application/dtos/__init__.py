"""Application DTOs (read-models passed between stores, workflows and routes)."""

from taskboard.application.dtos.session import SessionAssertion
from taskboard.application.dtos.task import TaskResult, TaskStats
from taskboard.application.dtos.user import AuthResult, UserCredentials, UserResult

__all__ = [
    "AuthResult",
    "SessionAssertion",
    "TaskResult",
    "TaskStats",
    "UserCredentials",
    "UserResult",
]
