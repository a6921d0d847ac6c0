"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Each method issues a single statement against the store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskboard.application.dtos.task import TaskResult
    from taskboard.application.dtos.user import UserCredentials, UserResult
    from taskboard.shared.enums import Role, TaskStatus


class IUserRepository(Protocol):
    """Protocol for the credential store."""

    async def create_user(
        self, email: str, password_hash: str, role: Role
    ) -> UserResult:
        """Insert a user; raise DuplicateEmailException on unique email violation."""

    async def get_by_email(self, email: str) -> UserCredentials | None:
        """Return the user row including password_hash, or None."""

    async def get_by_id(self, user_id: int) -> UserResult | None:
        """Return user by ID (no password_hash)."""

    async def list_users(self) -> list[UserResult]:
        """Return all users in creation order (no password_hash)."""


class ITaskRepository(Protocol):
    """Protocol for the task store."""

    async def create_task(
        self,
        title: str,
        description: str | None,
        status: TaskStatus,
        created_by: int,
    ) -> TaskResult:
        """Insert a task owned by created_by and return it."""

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        """Return task by ID with creator_email joined, or None."""

    async def list_tasks(self, owner_id: int | None = None) -> list[TaskResult]:
        """Return tasks newest first; all tasks when owner_id is None."""

    async def update_task(
        self,
        task_id: int,
        title: str,
        description: str | None,
        status: TaskStatus,
    ) -> int:
        """Rewrite title, description and status; return rows changed."""

    async def delete_task(self, task_id: int) -> int:
        """Delete task; return rows deleted."""
