"""Request validator: check a payload against one of the fixed request schemas.

All violations are collected and reported together as {field, message}
pairs; unknown fields are dropped. Routes receive bodies through
validated_body(schema) in api.v1.dependencies.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from taskboard.domain.exceptions import ValidationFailedException
from taskboard.schemas.auth import LoginRequest, RegisterRequest
from taskboard.schemas.task import TaskCreateRequest, TaskUpdateRequest

_BODY_FIELD = "body"


class ValidationSchema(Enum):
    """The four request shapes accepted by the API."""

    REGISTER = "register"
    LOGIN = "login"
    CREATE_TASK = "create_task"
    UPDATE_TASK = "update_task"

    @property
    def model(self) -> type[BaseModel]:
        return _MODELS[self]

    @property
    def partial(self) -> bool:
        """Partial schemas return only the fields the caller sent."""
        return self is ValidationSchema.UPDATE_TASK


_MODELS: dict[ValidationSchema, type[BaseModel]] = {
    ValidationSchema.REGISTER: RegisterRequest,
    ValidationSchema.LOGIN: LoginRequest,
    ValidationSchema.CREATE_TASK: TaskCreateRequest,
    ValidationSchema.UPDATE_TASK: TaskUpdateRequest,
}


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or _BODY_FIELD


def _message(field: str, error: dict[str, Any]) -> str:
    """Human message for one pydantic error; built-in type errors get a uniform wording."""
    label = field.split(".")[-1].replace("_", " ").capitalize()
    error_type = error.get("type", "")
    if error_type == "missing":
        return f"{label} is required"
    if error_type.endswith("_type") and field != _BODY_FIELD:
        return f"{label} must be a string"
    return str(error.get("msg", "Invalid value"))


def to_error_details(exc: ValidationError) -> list[dict[str, str]]:
    """Flatten a pydantic ValidationError into {field, message} pairs, one per field."""
    details: list[dict[str, str]] = []
    seen: set[str] = set()
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())))
        if field in seen:
            continue
        seen.add(field)
        details.append({"field": field, "message": _message(field, error)})
    return details


def validate(schema: ValidationSchema, payload: Any) -> dict[str, Any]:
    """Validate payload against schema and return the sanitized fields.

    Defaults are filled for full schemas (role=user, status=pending);
    partial schemas return only provided fields.

    Raises:
        ValidationFailedException: With every violation when the payload is invalid.
    """
    if not isinstance(payload, dict):
        raise ValidationFailedException(
            [{"field": _BODY_FIELD, "message": "Request body must be a JSON object"}]
        )
    try:
        model = schema.model.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailedException(to_error_details(exc)) from None
    return model.model_dump(exclude_unset=schema.partial)
