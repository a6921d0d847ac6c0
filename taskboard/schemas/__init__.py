"""Pydantic request/response schemas for the API and the request validator."""

from taskboard.schemas.auth import AuthData, LoginRequest, RegisterRequest
from taskboard.schemas.envelope import Envelope, ErrorDetail
from taskboard.schemas.health import HealthResponse, WelcomeData
from taskboard.schemas.task import (
    StatsData,
    StatsOut,
    TaskCreateRequest,
    TaskData,
    TaskOut,
    TasksData,
    TaskUpdateRequest,
)
from taskboard.schemas.user import UserData, UserOut, UsersData
from taskboard.schemas.validation import ValidationSchema, validate

__all__ = [
    "AuthData",
    "Envelope",
    "ErrorDetail",
    "HealthResponse",
    "WelcomeData",
    "LoginRequest",
    "RegisterRequest",
    "StatsData",
    "StatsOut",
    "TaskCreateRequest",
    "TaskData",
    "TaskOut",
    "TasksData",
    "TaskUpdateRequest",
    "UserData",
    "UserOut",
    "UsersData",
    "ValidationSchema",
    "validate",
]
