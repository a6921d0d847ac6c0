"""JWT token creation and verification (token service).

Uses taskboard.core.config for secret, algorithm and lifetime. Tokens carry
the user's id (also as sub), email and role plus iat/exp; nothing is stored
server-side.
"""

from datetime import timedelta
from typing import Any, cast

from jose import ExpiredSignatureError, JWTError, jwt

from taskboard.application.dtos.session import SessionAssertion
from taskboard.application.dtos.user import UserResult
from taskboard.core.config import get_settings
from taskboard.domain.exceptions import InvalidTokenException, TokenExpiredException
from taskboard.shared.enums import Role
from taskboard.shared.utils.datetime import from_timestamp_utc, utc_now


def create_access_token(
    user: UserResult,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed access token for user.

    Args:
        user: The authenticated user (id, email, role are encoded).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    issued_at = utc_now()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = {
        "sub": str(user.id),
        "id": user.id,
        "email": user.email,
        "role": Role(user.role).value,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def _assertion_from_claims(payload: dict[str, Any]) -> SessionAssertion:
    """Build a SessionAssertion; raise InvalidTokenException on missing or ill-typed claims."""
    user_id = payload.get("id")
    email = payload.get("email")
    role = payload.get("role")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise InvalidTokenException()
    if str(user_id) != payload.get("sub"):
        raise InvalidTokenException()
    if not isinstance(email, str) or not email:
        raise InvalidTokenException()
    if role not in Role.values():
        raise InvalidTokenException()
    iat = payload.get("iat")
    return SessionAssertion(
        user_id=user_id,
        email=email,
        role=Role(role),
        issued_at=from_timestamp_utc(iat) if isinstance(iat, (int, float)) else None,
        expires_at=from_timestamp_utc(payload["exp"]),
    )


def verify_token(token: str) -> SessionAssertion:
    """Verify and decode a JWT into a SessionAssertion.

    Args:
        token: JWT string (e.g. from Authorization header).

    Returns:
        The verified session assertion.

    Raises:
        TokenExpiredException: If the token is past its exp.
        InvalidTokenException: If signature, structure or claims are invalid.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredException() from e
    except JWTError as e:
        raise InvalidTokenException() from e
    return _assertion_from_claims(payload)


class JWTTokenService:
    """ITokenService backed by create_access_token / verify_token."""

    def issue(self, user: UserResult) -> str:
        return create_access_token(user)

    def verify(self, token: str) -> SessionAssertion:
        return verify_token(token)
