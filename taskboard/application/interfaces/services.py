"""Service interfaces (ports): token issuance and password hashing.

Workflows depend on these protocols; infrastructure.security provides the
implementations and api.v1.dependencies wires them (composition root).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskboard.application.dtos.session import SessionAssertion
    from taskboard.application.dtos.user import UserResult


class ITokenService(Protocol):
    """Issue and verify signed, time-limited identity assertions."""

    def issue(self, user: UserResult) -> str:
        """Return a signed token carrying id, email and role."""

    def verify(self, token: str) -> SessionAssertion:
        """Decode token; raise TokenExpiredException or InvalidTokenException."""


class IPasswordHasher(Protocol):
    """One-way password hashing."""

    def hash(self, password: str) -> str:
        """Return a salted hash of password."""

    def check(self, password: str, password_hash: str) -> bool:
        """Return True if password matches password_hash."""

    def dummy_hash(self) -> str:
        """Return a valid hash to compare against when no user matched."""
