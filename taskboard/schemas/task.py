"""Task API schemas: create/update payloads and task/stats responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic_core import PydanticCustomError

from taskboard.shared.enums import TaskStatus

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


def _check_title(v: str) -> str:
    if len(v) < TITLE_MIN_LENGTH:
        raise PydanticCustomError(
            "string_too_short", "Title must be at least 3 characters long"
        )
    if len(v) > TITLE_MAX_LENGTH:
        raise PydanticCustomError(
            "string_too_long", "Title cannot exceed 200 characters"
        )
    return v


def _check_description(v: str) -> str:
    if len(v) > DESCRIPTION_MAX_LENGTH:
        raise PydanticCustomError(
            "string_too_long", "Description cannot exceed 1000 characters"
        )
    return v


def _check_status(v: str) -> str:
    if v not in TaskStatus.values():
        raise PydanticCustomError(
            "enum", "Status must be one of: pending, in_progress, completed"
        )
    return v


def _reject_null(v: Any) -> Any:
    """Optional fields may be omitted but not sent as null."""
    if v is None:
        raise PydanticCustomError("string_type", "Input should be a valid string")
    return v


class TaskCreateRequest(BaseModel):
    """Request body for POST /tasks. description may be empty; status defaults to pending."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str | None = None
    status: str = TaskStatus.PENDING.value

    @field_validator("description", mode="before")
    @classmethod
    def description_not_null(cls, v: Any) -> Any:
        return _reject_null(v)

    @field_validator("title")
    @classmethod
    def title_length(cls, v: str) -> str:
        return _check_title(v)

    @field_validator("description")
    @classmethod
    def description_length(cls, v: str) -> str:
        return _check_description(v)

    @field_validator("status")
    @classmethod
    def status_is_known(cls, v: str) -> str:
        return _check_status(v)


class TaskUpdateRequest(BaseModel):
    """Request body for PUT /tasks/{id}: partial update, at least one field."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    status: str | None = None

    @field_validator("title", "description", "status", mode="before")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        return _reject_null(v)

    @field_validator("title")
    @classmethod
    def title_length(cls, v: str) -> str:
        return _check_title(v)

    @field_validator("description")
    @classmethod
    def description_length(cls, v: str) -> str:
        return _check_description(v)

    @field_validator("status")
    @classmethod
    def status_is_known(cls, v: str) -> str:
        return _check_status(v)

    @model_validator(mode="after")
    def at_least_one_field(self) -> "TaskUpdateRequest":
        if not self.model_fields_set:
            raise PydanticCustomError(
                "too_few_fields", "At least one field must be provided"
            )
        return self


class TaskOut(BaseModel):
    """Task representation; creator_email is the owner's email (joined)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    status: TaskStatus
    created_by: int
    creator_email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskData(BaseModel):
    task: TaskOut


class TasksData(BaseModel):
    tasks: list[TaskOut]


class StatsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    pending: int
    in_progress: int
    completed: int


class StatsData(BaseModel):
    stats: StatsOut
