"""Workflow dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from taskboard.api.v1.dependencies.auth import get_password_hasher, get_token_service
from taskboard.api.v1.dependencies.db import (
    get_task_repo,
    get_task_repo_for_write,
    get_user_repo,
    get_user_repo_for_write,
)
from taskboard.application.interfaces.repositories import ITaskRepository, IUserRepository
from taskboard.application.interfaces.services import IPasswordHasher, ITokenService
from taskboard.application.use_cases.identity import IdentityService
from taskboard.application.use_cases.tasks import TaskService


def get_task_service(
    task_repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> TaskService:
    """TaskService for read routes (list, get, stats)."""
    return TaskService(task_repo)


def get_task_service_for_write(
    task_repo: Annotated[ITaskRepository, Depends(get_task_repo_for_write)],
) -> TaskService:
    """TaskService whose writes commit with the request (create, update, delete)."""
    return TaskService(task_repo)


def get_identity_service(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
    token_service: Annotated[ITokenService, Depends(get_token_service)],
    password_hasher: Annotated[IPasswordHasher, Depends(get_password_hasher)],
) -> IdentityService:
    """IdentityService for login, me and the user listing."""
    return IdentityService(user_repo, token_service, password_hasher)


def get_identity_service_for_write(
    user_repo: Annotated[IUserRepository, Depends(get_user_repo_for_write)],
    token_service: Annotated[ITokenService, Depends(get_token_service)],
    password_hasher: Annotated[IPasswordHasher, Depends(get_password_hasher)],
) -> IdentityService:
    """IdentityService for registration (user insert commits with the request)."""
    return IdentityService(user_repo, token_service, password_hasher)
