"""Task operations: create, list, get, update, delete, stats (delegate to ITaskRepository).

Single-task operations follow fetch -> authorize -> write. A concurrent
delete between the read and the write surfaces as UpdateFailedException /
DeleteFailedException rather than corrupting state.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from taskboard.application.dtos.session import SessionAssertion
from taskboard.application.dtos.task import TaskResult, TaskStats
from taskboard.application.interfaces.repositories import ITaskRepository
from taskboard.application.services.authorization_gate import require_task_access
from taskboard.domain.exceptions import (
    DeleteFailedException,
    ResourceNotFoundException,
    UpdateFailedException,
)
from taskboard.shared.enums import TaskStatus

logger = logging.getLogger(__name__)


class TaskService:
    """Ownership-scoped task CRUD. Admins see and modify every task."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def create(
        self,
        assertion: SessionAssertion,
        title: str,
        description: str | None = None,
        status: TaskStatus | str | None = None,
    ) -> TaskResult:
        """Create a task owned by the caller; status defaults to pending."""
        task = await self.task_repo.create_task(
            title=title,
            description=description,
            status=TaskStatus(status) if status else TaskStatus.PENDING,
            created_by=assertion.user_id,
        )
        logger.info("Task %s created by user %s", task.id, assertion.user_id)
        return task

    async def list(self, assertion: SessionAssertion) -> list[TaskResult]:
        """All tasks for admins, own tasks otherwise; newest first."""
        owner_id = None if assertion.is_admin else assertion.user_id
        return await self.task_repo.list_tasks(owner_id=owner_id)

    async def _fetch(self, task_id: int) -> TaskResult:
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("Task", task_id)
        return task

    async def get_by_id(self, assertion: SessionAssertion, task_id: int) -> TaskResult:
        """Return task; ResourceNotFoundException if missing, ForbiddenException if not allowed."""
        task = await self._fetch(task_id)
        require_task_access(assertion, task, "view")
        return task

    async def update(
        self,
        assertion: SessionAssertion,
        task_id: int,
        fields: dict[str, Any],
    ) -> TaskResult:
        """Partial update: omitted fields keep their stored values.

        All three columns are rewritten with the merged values. An explicit
        empty description replaces the stored one.
        """
        task = await self._fetch(task_id)
        require_task_access(assertion, task, "update")

        title = fields.get("title") or task.title
        description = (
            fields["description"] if fields.get("description") is not None else task.description
        )
        status = TaskStatus(fields["status"]) if fields.get("status") else task.status

        changed = await self.task_repo.update_task(
            task_id, title=title, description=description, status=status
        )
        if changed == 0:
            raise UpdateFailedException(task_id)
        logger.info("Task %s updated by user %s", task_id, assertion.user_id)
        updated = await self.task_repo.get_by_id(task_id)
        if updated is None:
            raise UpdateFailedException(task_id)
        return updated

    async def delete(self, assertion: SessionAssertion, task_id: int) -> None:
        """Delete task; ResourceNotFoundException / ForbiddenException / DeleteFailedException."""
        task = await self._fetch(task_id)
        require_task_access(assertion, task, "delete")
        deleted = await self.task_repo.delete_task(task_id)
        if deleted == 0:
            raise DeleteFailedException(task_id)
        logger.info("Task %s deleted by user %s", task_id, assertion.user_id)

    async def stats(self, assertion: SessionAssertion) -> TaskStats:
        """Counts per status over exactly what list() returns for this caller."""
        tasks = await self.list(assertion)
        counts = Counter(task.status for task in tasks)
        return TaskStats(
            total=len(tasks),
            pending=counts[TaskStatus.PENDING],
            in_progress=counts[TaskStatus.IN_PROGRESS],
            completed=counts[TaskStatus.COMPLETED],
        )
