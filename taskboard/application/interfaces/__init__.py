"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from taskboard.infrastructure or taskboard.api.
"""

from taskboard.application.interfaces.repositories import (
    ITaskRepository,
    IUserRepository,
)
from taskboard.application.interfaces.services import IPasswordHasher, ITokenService

__all__ = [
    "IPasswordHasher",
    "ITaskRepository",
    "ITokenService",
    "IUserRepository",
]
