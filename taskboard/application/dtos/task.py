"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskboard.shared.enums import TaskStatus


@dataclass(frozen=True)
class TaskResult:
    """Task read-model. creator_email is joined from users, not persisted on the task."""

    id: int
    title: str
    description: str | None
    status: TaskStatus
    created_by: int
    creator_email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class TaskStats:
    """Per-status counts over the tasks visible to one caller."""

    total: int
    pending: int
    in_progress: int
    completed: int
