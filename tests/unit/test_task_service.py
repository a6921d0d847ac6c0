"""Unit tests for TaskService with an AsyncMock task repository."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from taskboard.application.dtos.session import SessionAssertion
from taskboard.application.dtos.task import TaskResult
from taskboard.application.use_cases.tasks import TaskService
from taskboard.domain.exceptions import (
    DeleteFailedException,
    ForbiddenException,
    ResourceNotFoundException,
    UpdateFailedException,
)
from taskboard.shared.enums import Role, TaskStatus

_EXP = datetime(2100, 1, 1, tzinfo=timezone.utc)
OWNER = SessionAssertion(user_id=1, email="owner@example.com", role=Role.USER, issued_at=None, expires_at=_EXP)
OTHER = SessionAssertion(user_id=2, email="other@example.com", role=Role.USER, issued_at=None, expires_at=_EXP)
ADMIN = SessionAssertion(user_id=3, email="admin@example.com", role=Role.ADMIN, issued_at=None, expires_at=_EXP)


def _task(
    task_id: int = 10,
    owner_id: int = 1,
    status: TaskStatus = TaskStatus.PENDING,
    title: str = "Write report",
    description: str | None = "Quarterly numbers",
) -> TaskResult:
    return TaskResult(
        id=task_id,
        title=title,
        description=description,
        status=status,
        created_by=owner_id,
        creator_email="owner@example.com",
    )


@pytest.fixture
def repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(repo: AsyncMock) -> TaskService:
    return TaskService(repo)


async def test_create_sets_owner_and_default_status(service: TaskService, repo: AsyncMock) -> None:
    repo.create_task.return_value = _task()
    await service.create(OWNER, title="Write report")
    repo.create_task.assert_awaited_once_with(
        title="Write report", description=None, status=TaskStatus.PENDING, created_by=1
    )


async def test_create_keeps_given_status(service: TaskService, repo: AsyncMock) -> None:
    repo.create_task.return_value = _task(status=TaskStatus.COMPLETED)
    await service.create(OWNER, title="Write report", description="", status="completed")
    assert repo.create_task.await_args.kwargs["status"] is TaskStatus.COMPLETED
    assert repo.create_task.await_args.kwargs["description"] == ""


async def test_list_filters_by_owner_for_users(service: TaskService, repo: AsyncMock) -> None:
    repo.list_tasks.return_value = []
    await service.list(OWNER)
    repo.list_tasks.assert_awaited_once_with(owner_id=1)


async def test_list_unfiltered_for_admin(service: TaskService, repo: AsyncMock) -> None:
    repo.list_tasks.return_value = []
    await service.list(ADMIN)
    repo.list_tasks.assert_awaited_once_with(owner_id=None)


async def test_get_missing_raises_not_found(service: TaskService, repo: AsyncMock) -> None:
    repo.get_by_id.return_value = None
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await service.get_by_id(OWNER, 99)
    assert exc_info.value.message == "Task not found"


async def test_get_foreign_task_forbidden(service: TaskService, repo: AsyncMock) -> None:
    repo.get_by_id.return_value = _task(owner_id=1)
    with pytest.raises(ForbiddenException):
        await service.get_by_id(OTHER, 10)


async def test_admin_reads_any_task(service: TaskService, repo: AsyncMock) -> None:
    repo.get_by_id.return_value = _task(owner_id=1)
    assert (await service.get_by_id(ADMIN, 10)).id == 10


async def test_update_merges_omitted_fields(service: TaskService, repo: AsyncMock) -> None:
    """Only status sent: title and description are rewritten with stored values."""
    stored = _task()
    updated = _task(status=TaskStatus.COMPLETED)
    repo.get_by_id.side_effect = [stored, updated]
    repo.update_task.return_value = 1

    result = await service.update(OWNER, 10, {"status": "completed"})

    repo.update_task.assert_awaited_once_with(
        10, title="Write report", description="Quarterly numbers", status=TaskStatus.COMPLETED
    )
    assert result is updated


async def test_update_empty_description_is_explicit(service: TaskService, repo: AsyncMock) -> None:
    repo.get_by_id.side_effect = [_task(), _task(description="")]
    repo.update_task.return_value = 1
    await service.update(OWNER, 10, {"description": ""})
    assert repo.update_task.await_args.kwargs["description"] == ""


async def test_update_forbidden_does_not_write(service: TaskService, repo: AsyncMock) -> None:
    repo.get_by_id.return_value = _task(owner_id=1)
    with pytest.raises(ForbiddenException) as exc_info:
        await service.update(OTHER, 10, {"title": "Hijacked"})
    assert exc_info.value.message == "Not authorized to update this task"
    repo.update_task.assert_not_awaited()


async def test_update_zero_rows_raises(service: TaskService, repo: AsyncMock) -> None:
    """Task deleted between read and write."""
    repo.get_by_id.return_value = _task()
    repo.update_task.return_value = 0
    with pytest.raises(UpdateFailedException):
        await service.update(OWNER, 10, {"title": "New title"})


async def test_delete(service: TaskService, repo: AsyncMock) -> None:
    repo.get_by_id.return_value = _task()
    repo.delete_task.return_value = 1
    await service.delete(OWNER, 10)
    repo.delete_task.assert_awaited_once_with(10)


async def test_delete_zero_rows_raises(service: TaskService, repo: AsyncMock) -> None:
    repo.get_by_id.return_value = _task()
    repo.delete_task.return_value = 0
    with pytest.raises(DeleteFailedException):
        await service.delete(OWNER, 10)


async def test_delete_foreign_task_forbidden(service: TaskService, repo: AsyncMock) -> None:
    repo.get_by_id.return_value = _task(owner_id=1)
    with pytest.raises(ForbiddenException):
        await service.delete(OTHER, 10)
    repo.delete_task.assert_not_awaited()


async def test_stats_counts_visible_tasks(service: TaskService, repo: AsyncMock) -> None:
    repo.list_tasks.return_value = [
        _task(1, status=TaskStatus.PENDING),
        _task(2, status=TaskStatus.PENDING),
        _task(3, status=TaskStatus.IN_PROGRESS),
        _task(4, status=TaskStatus.COMPLETED),
    ]
    stats = await service.stats(OWNER)
    assert (stats.total, stats.pending, stats.in_progress, stats.completed) == (4, 2, 1, 1)
    assert stats.total == stats.pending + stats.in_progress + stats.completed
    repo.list_tasks.assert_awaited_once_with(owner_id=1)


async def test_store_errors_propagate(service: TaskService, repo: AsyncMock) -> None:
    """Workflows do not swallow store failures."""
    repo.list_tasks.side_effect = RuntimeError("disk I/O error")
    with pytest.raises(RuntimeError):
        await service.list(OWNER)
