"""Auth dependencies (composition root): token service, hasher, gate, current caller."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header

from taskboard.application.dtos.session import SessionAssertion
from taskboard.application.interfaces.services import IPasswordHasher, ITokenService
from taskboard.application.services.authorization_gate import AuthorizationGate, require_role
from taskboard.infrastructure.security import BcryptPasswordHasher, JWTTokenService
from taskboard.shared.enums import Role


def get_token_service() -> ITokenService:
    """JWT issue/verify (composition root)."""
    return JWTTokenService()


def get_password_hasher() -> IPasswordHasher:
    """bcrypt password hashing (composition root)."""
    return BcryptPasswordHasher()


def get_authorization_gate(
    token_service: Annotated[ITokenService, Depends(get_token_service)],
) -> AuthorizationGate:
    return AuthorizationGate(token_service)


def get_current_assertion(
    gate: Annotated[AuthorizationGate, Depends(get_authorization_gate)],
    authorization: Annotated[str | None, Header()] = None,
) -> SessionAssertion:
    """Verified caller identity from the Authorization: Bearer header.

    Missing, expired or invalid tokens raise AuthenticationException
    subclasses, which the exception handlers turn into 401.
    """
    return gate.authenticate(authorization)


def require_admin(
    assertion: Annotated[SessionAssertion, Depends(get_current_assertion)],
) -> SessionAssertion:
    """Current caller, who must hold the admin role (403 otherwise)."""
    require_role(assertion, Role.ADMIN)
    return assertion


CurrentAssertion = Annotated[SessionAssertion, Depends(get_current_assertion)]
AdminAssertion = Annotated[SessionAssertion, Depends(require_admin)]
