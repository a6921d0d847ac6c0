"""DTOs for identity use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskboard.shared.enums import Role


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, list_users). No password."""

    id: int
    email: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class UserCredentials:
    """User row including password_hash. Only returned by the credential store for login."""

    id: int
    email: str
    role: Role
    password_hash: str

    def to_result(self) -> UserResult:
        return UserResult(id=self.id, email=self.email, role=self.role)


@dataclass(frozen=True)
class AuthResult:
    """Outcome of register/login: the user and a freshly issued token."""

    user: UserResult
    token: str
