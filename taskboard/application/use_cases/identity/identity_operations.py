"""Identity operations: register, login, current user, list users.

Passwords are hashed in a worker thread (bcrypt is CPU-bound) and never
logged or returned.
"""

from __future__ import annotations

import asyncio
import logging

from taskboard.application.dtos.session import SessionAssertion
from taskboard.application.dtos.user import AuthResult, UserResult
from taskboard.application.interfaces.repositories import IUserRepository
from taskboard.application.interfaces.services import IPasswordHasher, ITokenService
from taskboard.domain.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    ResourceNotFoundException,
)
from taskboard.shared.enums import Role

logger = logging.getLogger(__name__)


class IdentityService:
    """Registration and login against the credential store; tokens from ITokenService."""

    def __init__(
        self,
        user_repo: IUserRepository,
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_repo = user_repo
        self.token_service = token_service
        self.password_hasher = password_hasher

    async def register(
        self, email: str, password: str, role: Role | str = Role.USER
    ) -> AuthResult:
        """Create a user and issue a token. DuplicateEmailException if the email exists."""
        if await self.user_repo.get_by_email(email) is not None:
            raise DuplicateEmailException()
        password_hash = await asyncio.to_thread(self.password_hasher.hash, password)
        user = await self.user_repo.create_user(
            email=email, password_hash=password_hash, role=Role(role)
        )
        logger.info("Registered user %s with role %s", user.id, user.role.value)
        return AuthResult(user=user, token=self.token_service.issue(user))

    async def login(self, email: str, password: str) -> AuthResult:
        """Verify credentials and issue a token.

        Unknown email and wrong password raise the same InvalidCredentialsException
        and both run one hash comparison.
        """
        credentials = await self.user_repo.get_by_email(email)
        if credentials is None:
            await asyncio.to_thread(
                lambda: self.password_hasher.check(password, self.password_hasher.dummy_hash())
            )
            logger.warning("Failed login attempt")
            raise InvalidCredentialsException()
        matches = await asyncio.to_thread(
            self.password_hasher.check, password, credentials.password_hash
        )
        if not matches:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsException()
        user = credentials.to_result()
        return AuthResult(user=user, token=self.token_service.issue(user))

    async def get_current_user(self, assertion: SessionAssertion) -> UserResult:
        """Return the caller's stored user; ResourceNotFoundException if deleted since issuance."""
        user = await self.user_repo.get_by_id(assertion.user_id)
        if user is None:
            raise ResourceNotFoundException("User", assertion.user_id)
        return user

    async def list_users(self) -> list[UserResult]:
        """All users without password hashes. Admin check is done by the route."""
        return await self.user_repo.list_users()
