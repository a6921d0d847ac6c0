"""Domain layer: the error taxonomy shared by every other layer.

No dependencies on infrastructure or presentation.
"""

from taskboard.domain.exceptions import (
    AuthenticationException,
    DeleteFailedException,
    DuplicateEmailException,
    ForbiddenException,
    InvalidCredentialsException,
    InvalidTokenException,
    MissingCredentialsException,
    ResourceNotFoundException,
    TaskboardException,
    TokenExpiredException,
    UpdateFailedException,
    ValidationFailedException,
)

__all__ = [
    "AuthenticationException",
    "DeleteFailedException",
    "DuplicateEmailException",
    "ForbiddenException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "MissingCredentialsException",
    "ResourceNotFoundException",
    "TaskboardException",
    "TokenExpiredException",
    "UpdateFailedException",
    "ValidationFailedException",
]
