"""Session assertion: verified identity claims decoded from a bearer token."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskboard.shared.enums import Role


@dataclass(frozen=True)
class SessionAssertion:
    """Identity of the caller for the duration of one request. Never persisted."""

    user_id: int
    email: str
    role: Role
    issued_at: datetime | None
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
