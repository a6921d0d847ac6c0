"""Tasks API: ownership-scoped CRUD and per-status statistics.

Every route requires a bearer token. Users see and change their own tasks;
admins see and change all of them.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from taskboard.api.v1.dependencies import (
    CurrentAssertion,
    get_task_service,
    get_task_service_for_write,
    validated_body,
)
from taskboard.application.use_cases.tasks import TaskService
from taskboard.schemas.envelope import Envelope
from taskboard.schemas.task import StatsData, StatsOut, TaskData, TaskOut, TasksData
from taskboard.schemas.validation import ValidationSchema

router = APIRouter()

TaskEnvelope = Envelope[TaskData]


@router.post("", response_model=TaskEnvelope, response_model_exclude_unset=True, status_code=201)
async def create_task(
    assertion: CurrentAssertion,
    body: Annotated[dict[str, Any], Depends(validated_body(ValidationSchema.CREATE_TASK))],
    tasks: Annotated[TaskService, Depends(get_task_service_for_write)],
) -> TaskEnvelope:
    """Create a task owned by the caller."""
    task = await tasks.create(
        assertion,
        title=body["title"],
        description=body.get("description"),
        status=body.get("status"),
    )
    return Envelope.ok(
        message="Task created successfully",
        data=TaskData(task=TaskOut.model_validate(task)),
    )


@router.get("", response_model=Envelope[TasksData], response_model_exclude_unset=True)
async def list_tasks(
    assertion: CurrentAssertion,
    tasks: Annotated[TaskService, Depends(get_task_service)],
) -> Envelope[TasksData]:
    """Own tasks for users, all tasks for admins; newest first."""
    items = await tasks.list(assertion)
    return Envelope.ok(
        count=len(items),
        data=TasksData(tasks=[TaskOut.model_validate(t) for t in items]),
    )


# Declared before /{task_id} so "stats" is never parsed as an id.
@router.get("/stats/summary", response_model=Envelope[StatsData], response_model_exclude_unset=True)
async def task_stats(
    assertion: CurrentAssertion,
    tasks: Annotated[TaskService, Depends(get_task_service)],
) -> Envelope[StatsData]:
    """Counts per status over the tasks the caller can see."""
    stats = await tasks.stats(assertion)
    return Envelope.ok(data=StatsData(stats=StatsOut.model_validate(stats)))


@router.get("/{task_id}", response_model=TaskEnvelope, response_model_exclude_unset=True)
async def get_task(
    task_id: int,
    assertion: CurrentAssertion,
    tasks: Annotated[TaskService, Depends(get_task_service)],
) -> TaskEnvelope:
    task = await tasks.get_by_id(assertion, task_id)
    return Envelope.ok(data=TaskData(task=TaskOut.model_validate(task)))


@router.put("/{task_id}", response_model=TaskEnvelope, response_model_exclude_unset=True)
async def update_task(
    task_id: int,
    assertion: CurrentAssertion,
    body: Annotated[dict[str, Any], Depends(validated_body(ValidationSchema.UPDATE_TASK))],
    tasks: Annotated[TaskService, Depends(get_task_service_for_write)],
) -> TaskEnvelope:
    """Partial update; omitted fields keep their values."""
    task = await tasks.update(assertion, task_id, body)
    return Envelope.ok(
        message="Task updated successfully",
        data=TaskData(task=TaskOut.model_validate(task)),
    )


@router.delete("/{task_id}", response_model=Envelope[None], response_model_exclude_unset=True)
async def delete_task(
    task_id: int,
    assertion: CurrentAssertion,
    tasks: Annotated[TaskService, Depends(get_task_service_for_write)],
) -> Envelope[None]:
    await tasks.delete(assertion, task_id)
    return Envelope.ok(message="Task deleted successfully", data=None)
