"""Domain exceptions for taskboard.

Defines the error taxonomy raised by workflows, the authorization gate and
the stores. These exceptions are independent of HTTP; the presentation
layer maps error_code to a status code in core.exception_handlers.
"""

from typing import Any


class TaskboardException(Exception):
    """Base exception for all taskboard errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationFailedException(TaskboardException):
    """Raised when a request payload violates its schema.

    Carries every violation at once as a list of {field, message} pairs.
    """

    def __init__(
        self,
        errors: list[dict[str, str]],
        message: str = "Validation error",
    ) -> None:
        self.errors = errors
        super().__init__(message, "VALIDATION_ERROR", {"errors": errors})


class DuplicateEmailException(TaskboardException):
    """Raised when registering an email that is already stored."""

    def __init__(self) -> None:
        super().__init__("Email already registered", "DUPLICATE_EMAIL")


class InvalidCredentialsException(TaskboardException):
    """Raised on login failure. Same message for unknown email and wrong password."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password", "INVALID_CREDENTIALS")


class AuthenticationException(TaskboardException):
    """Raised when the caller cannot be authenticated (unauthenticated)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: str = "AUTHENTICATION_ERROR",
    ) -> None:
        super().__init__(message, error_code)


class MissingCredentialsException(AuthenticationException):
    """Raised when the Authorization header or its token segment is absent."""

    def __init__(self, message: str = "No authorization header provided") -> None:
        super().__init__(message, "MISSING_CREDENTIALS")


class TokenExpiredException(AuthenticationException):
    """Raised when a bearer token is past its expiry."""

    def __init__(self) -> None:
        super().__init__("Token has expired", "TOKEN_EXPIRED")


class InvalidTokenException(AuthenticationException):
    """Raised when a bearer token fails signature or structure checks."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message, "INVALID_TOKEN")


class ForbiddenException(TaskboardException):
    """Raised when an authenticated caller may not act on a resource."""

    def __init__(
        self,
        message: str = "Forbidden",
        resource: str | None = None,
        action: str | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "FORBIDDEN", details)


class ResourceNotFoundException(TaskboardException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: int | str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'Task', 'User').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UpdateFailedException(TaskboardException):
    """Raised when the store changed zero rows for an update of an existing task."""

    def __init__(self, task_id: int) -> None:
        super().__init__("Failed to update task", "UPDATE_FAILED", {"task_id": task_id})


class DeleteFailedException(TaskboardException):
    """Raised when the store deleted zero rows for an existing task."""

    def __init__(self, task_id: int) -> None:
        super().__init__("Failed to delete task", "DELETE_FAILED", {"task_id": task_id})
