"""Application services: authorization gate and access decisions."""

from taskboard.application.services.authorization_gate import (
    AuthorizationGate,
    decide_task_access,
    extract_bearer_token,
    require_role,
    require_task_access,
)

__all__ = [
    "AuthorizationGate",
    "decide_task_access",
    "extract_bearer_token",
    "require_role",
    "require_task_access",
]
