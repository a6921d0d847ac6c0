"""Authorization gate: resolve the caller from a bearer token and enforce ownership/role rules.

decide_task_access is a pure function over (assertion, owner id); the
require_* helpers turn a DENY into ForbiddenException. List operations do
not use the gate per row; TaskService filters them by owner instead.
"""

from __future__ import annotations

from taskboard.application.dtos.session import SessionAssertion
from taskboard.application.dtos.task import TaskResult
from taskboard.application.interfaces.services import ITokenService
from taskboard.domain.exceptions import ForbiddenException, MissingCredentialsException
from taskboard.shared.enums import AccessDecision, Role


def decide_task_access(assertion: SessionAssertion, owner_id: int) -> AccessDecision:
    """ALLOW iff the caller is an admin or owns the task."""
    if assertion.role is Role.ADMIN or assertion.user_id == owner_id:
        return AccessDecision.ALLOW
    return AccessDecision.DENY


def require_task_access(
    assertion: SessionAssertion, task: TaskResult, action: str = "access"
) -> None:
    """Raise ForbiddenException unless decide_task_access allows it."""
    if decide_task_access(assertion, task.created_by) is AccessDecision.DENY:
        raise ForbiddenException(
            f"Not authorized to {action} this task", resource="task", action=action
        )


def require_role(assertion: SessionAssertion, role: Role) -> None:
    """Raise ForbiddenException unless the caller has role."""
    if assertion.role is not role:
        raise ForbiddenException(
            f"Access denied. {role.value.capitalize()} privileges required"
        )


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token segment of an Authorization header.

    Raises:
        MissingCredentialsException: header absent, or no token after the scheme.
    """
    if not authorization or not authorization.strip():
        raise MissingCredentialsException("No authorization header provided")
    parts = authorization.strip().split(None, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise MissingCredentialsException("No token provided")
    return parts[1].strip()


class AuthorizationGate:
    """Authenticate requests against the token service."""

    def __init__(self, token_service: ITokenService) -> None:
        self.token_service = token_service

    def authenticate(self, authorization: str | None) -> SessionAssertion:
        """Return the verified assertion for an Authorization header value.

        Raises:
            MissingCredentialsException: header or token missing.
            TokenExpiredException / InvalidTokenException: verification failed.
        """
        token = extract_bearer_token(authorization)
        return self.token_service.verify(token)
