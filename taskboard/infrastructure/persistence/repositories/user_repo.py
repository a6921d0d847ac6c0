"""User repository (credential store). Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.application.dtos.user import UserCredentials, UserResult
from taskboard.domain.exceptions import DuplicateEmailException
from taskboard.infrastructure.persistence.models.user import User
from taskboard.infrastructure.persistence.repositories.base import BaseRepository
from taskboard.shared.enums import Role
from taskboard.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        email=u.email,
        role=Role(u.role),
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
    )


class UserRepository(BaseRepository[User]):
    """User repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def create_user(
        self, email: str, password_hash: str, role: Role = Role.USER
    ) -> UserResult:
        """Create user; raise DuplicateEmailException on unique constraint violation."""
        user = User(email=email, password_hash=password_hash, role=Role(role).value)
        try:
            created = await self.add(user)
        except IntegrityError:
            raise DuplicateEmailException() from None
        return _user_to_result(created)

    async def get_by_email(self, email: str) -> UserCredentials | None:
        result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        if user is None:
            return None
        return UserCredentials(
            id=user.id,
            email=user.email,
            role=Role(user.role),
            password_hash=user.password_hash,
        )

    async def get_by_id(self, user_id: int) -> UserResult | None:
        user = await self.get_row(user_id)
        return _user_to_result(user) if user else None

    async def list_users(self) -> list[UserResult]:
        result = await self.db.execute(select(User).order_by(User.id))
        return [_user_to_result(u) for u in result.scalars().all()]

    async def count_users(self) -> int:
        return await self.count()

    async def update_role(self, user_id: int, role: Role) -> int:
        """Set a user's role; return rows changed. Not exposed over HTTP."""
        result = await self.db.execute(
            update(User).where(User.id == user_id).values(role=Role(role).value)
        )
        return result.rowcount or 0

    async def delete_user(self, user_id: int) -> int:
        """Delete a user (tasks cascade); return rows deleted. Not exposed over HTTP."""
        return await self.delete_by_id(user_id)
