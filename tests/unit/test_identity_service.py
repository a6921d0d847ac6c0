"""Unit tests for IdentityService with mocked store, token service and hasher."""

import threading
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from taskboard.application.dtos.session import SessionAssertion
from taskboard.application.dtos.user import UserCredentials, UserResult
from taskboard.application.use_cases.identity import IdentityService
from taskboard.domain.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    ResourceNotFoundException,
)
from taskboard.shared.enums import Role

USER = UserResult(id=1, email="ada@example.com", role=Role.USER)
CREDENTIALS = UserCredentials(id=1, email="ada@example.com", role=Role.USER, password_hash="stored-hash")


@pytest.fixture
def user_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def token_service() -> MagicMock:
    service = MagicMock()
    service.issue.return_value = "signed-token"
    return service


@pytest.fixture
def hasher() -> MagicMock:
    hasher = MagicMock()
    hasher.hash.return_value = "hashed"
    hasher.dummy_hash.return_value = "dummy-hash"
    return hasher


@pytest.fixture
def service(user_repo: AsyncMock, token_service: MagicMock, hasher: MagicMock) -> IdentityService:
    return IdentityService(user_repo, token_service, hasher)


async def test_register_hashes_and_issues_token(
    service: IdentityService, user_repo: AsyncMock, hasher: MagicMock
) -> None:
    user_repo.get_by_email.return_value = None
    user_repo.create_user.return_value = USER
    result = await service.register("ada@example.com", "secret123")
    hasher.hash.assert_called_once_with("secret123")
    user_repo.create_user.assert_awaited_once_with(
        email="ada@example.com", password_hash="hashed", role=Role.USER
    )
    assert result.user == USER
    assert result.token == "signed-token"


async def test_register_duplicate_email(service: IdentityService, user_repo: AsyncMock) -> None:
    user_repo.get_by_email.return_value = CREDENTIALS
    with pytest.raises(DuplicateEmailException):
        await service.register("ada@example.com", "secret123")
    user_repo.create_user.assert_not_awaited()


async def test_register_admin_role(service: IdentityService, user_repo: AsyncMock) -> None:
    user_repo.get_by_email.return_value = None
    user_repo.create_user.return_value = UserResult(id=2, email="root@example.com", role=Role.ADMIN)
    await service.register("root@example.com", "secret123", "admin")
    assert user_repo.create_user.await_args.kwargs["role"] is Role.ADMIN


async def test_login_success(service: IdentityService, user_repo: AsyncMock, hasher: MagicMock) -> None:
    user_repo.get_by_email.return_value = CREDENTIALS
    hasher.check.return_value = True
    result = await service.login("ada@example.com", "secret123")
    hasher.check.assert_called_once_with("secret123", "stored-hash")
    assert result.user == USER
    assert result.token == "signed-token"


async def test_login_wrong_password(service: IdentityService, user_repo: AsyncMock, hasher: MagicMock) -> None:
    user_repo.get_by_email.return_value = CREDENTIALS
    hasher.check.return_value = False
    with pytest.raises(InvalidCredentialsException) as exc_info:
        await service.login("ada@example.com", "wrong")
    assert exc_info.value.message == "Invalid email or password"


async def test_login_unknown_email_same_error_and_one_hash_check(
    service: IdentityService, user_repo: AsyncMock, hasher: MagicMock
) -> None:
    user_repo.get_by_email.return_value = None
    hasher.check.return_value = False
    with pytest.raises(InvalidCredentialsException) as exc_info:
        await service.login("ghost@example.com", "whatever")
    assert exc_info.value.message == "Invalid email or password"
    hasher.check.assert_called_once_with("whatever", "dummy-hash")


async def test_login_unknown_email_hashes_off_the_event_loop(
    service: IdentityService, user_repo: AsyncMock, hasher: MagicMock
) -> None:
    loop_thread = threading.get_ident()
    hash_threads: list[int] = []

    def dummy_hash() -> str:
        hash_threads.append(threading.get_ident())
        return "dummy-hash"

    hasher.dummy_hash.side_effect = dummy_hash
    user_repo.get_by_email.return_value = None
    hasher.check.return_value = False
    with pytest.raises(InvalidCredentialsException):
        await service.login("ghost@example.com", "whatever")
    assert len(hash_threads) == 1
    assert hash_threads[0] != loop_thread


async def test_get_current_user_missing(service: IdentityService, user_repo: AsyncMock) -> None:
    user_repo.get_by_id.return_value = None
    assertion = SessionAssertion(
        user_id=5,
        email="gone@example.com",
        role=Role.USER,
        issued_at=None,
        expires_at=datetime(2100, 1, 1, tzinfo=timezone.utc),
    )
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await service.get_current_user(assertion)
    assert exc_info.value.message == "User not found"


async def test_list_users(service: IdentityService, user_repo: AsyncMock) -> None:
    user_repo.list_users.return_value = [USER]
    assert await service.list_users() == [USER]
