"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, security
collaborators and workflows. Routes depend only on these, not on
infrastructure directly.
"""

from taskboard.api.v1.dependencies.auth import (
    AdminAssertion,
    CurrentAssertion,
    get_authorization_gate,
    get_current_assertion,
    get_password_hasher,
    get_token_service,
    require_admin,
)
from taskboard.api.v1.dependencies.body import validated_body
from taskboard.api.v1.dependencies.db import (
    get_task_repo,
    get_task_repo_for_write,
    get_user_repo,
    get_user_repo_for_write,
)
from taskboard.api.v1.dependencies.services import (
    get_identity_service,
    get_identity_service_for_write,
    get_task_service,
    get_task_service_for_write,
)

__all__ = [
    "AdminAssertion",
    "CurrentAssertion",
    "get_authorization_gate",
    "get_current_assertion",
    "get_identity_service",
    "get_identity_service_for_write",
    "get_password_hasher",
    "get_task_repo",
    "get_task_repo_for_write",
    "get_task_service",
    "get_task_service_for_write",
    "get_token_service",
    "get_user_repo",
    "get_user_repo_for_write",
    "require_admin",
    "validated_body",
]
