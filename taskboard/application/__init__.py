"""Application layer: DTOs, interfaces, authorization gate, workflows.

Depends only on domain and protocol definitions. Infrastructure implements
the interfaces (repositories, token service, password hasher).
"""

from taskboard.application.interfaces import (
    IPasswordHasher,
    ITaskRepository,
    ITokenService,
    IUserRepository,
)
from taskboard.application.services import AuthorizationGate
from taskboard.application.use_cases import IdentityService, TaskService

__all__ = [
    "AuthorizationGate",
    "IPasswordHasher",
    "ITaskRepository",
    "ITokenService",
    "IUserRepository",
    "IdentityService",
    "TaskService",
]
