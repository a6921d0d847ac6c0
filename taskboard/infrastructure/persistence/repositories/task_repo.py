"""Task repository (task store). Every method issues one statement."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.application.dtos.task import TaskResult
from taskboard.infrastructure.persistence.models.task import Task
from taskboard.infrastructure.persistence.models.user import User
from taskboard.infrastructure.persistence.repositories.base import BaseRepository
from taskboard.shared.enums import TaskStatus
from taskboard.shared.utils.datetime import ensure_utc


def _to_result(t: Task, creator_email: str | None = None) -> TaskResult:
    """Map Task ORM (plus joined owner email) to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description,
        status=TaskStatus(t.status),
        created_by=t.created_by,
        creator_email=creator_email,
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


def _joined() -> Any:
    """SELECT tasks with the owner's email (LEFT OUTER JOIN users).

    populate_existing refreshes Task instances already in the session, so a
    read after update_task returns the new values.
    """
    return (
        select(Task, User.email)
        .outerjoin(User, Task.created_by == User.id)
        .execution_options(populate_existing=True)
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def create_task(
        self,
        title: str,
        description: str | None,
        status: TaskStatus,
        created_by: int,
    ) -> TaskResult:
        """Create a task and return the result DTO (owner email not loaded)."""
        task = Task(
            title=title,
            description=description,
            status=TaskStatus(status).value,
            created_by=created_by,
        )
        created = await self.add(task)
        return _to_result(created)

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        result = await self.db.execute(_joined().where(Task.id == task_id))
        row = result.first()
        if row is None:
            return None
        task, email = row
        return _to_result(task, email)

    async def list_tasks(self, owner_id: int | None = None) -> list[TaskResult]:
        """Return tasks newest first; only owner_id's tasks when given."""
        stmt = _joined()
        if owner_id is not None:
            stmt = stmt.where(Task.created_by == owner_id)
        stmt = stmt.order_by(Task.created_at.desc(), Task.id.desc())
        result = await self.db.execute(stmt)
        return [_to_result(task, email) for task, email in result.all()]

    async def update_task(
        self,
        task_id: int,
        title: str,
        description: str | None,
        status: TaskStatus,
    ) -> int:
        """Rewrite title, description and status in one UPDATE; return rows changed."""
        result = await self.db.execute(
            update(Task)
            .where(Task.id == task_id)
            .values(
                title=title,
                description=description,
                status=TaskStatus(status).value,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def delete_task(self, task_id: int) -> int:
        return await self.delete_by_id(task_id)

    async def count_by_owner(self, owner_id: int) -> int:
        return await self.count(Task.created_by == owner_id)
