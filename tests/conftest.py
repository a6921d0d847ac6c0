"""Pytest configuration and fixtures for taskboard.

Test settings come from the environment (set below, before the app is
imported): a fixed signing secret and an in-memory SQLite store. Each test
that touches the store gets a fresh schema; the engine is disposed
afterwards so the next test starts from an empty database.
"""

import os
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from taskboard.core.config import get_settings  # noqa: E402
from taskboard.infrastructure.persistence import database  # noqa: E402
from taskboard.main import create_app  # noqa: E402

get_settings.cache_clear()

TEST_PASSWORD = "secret123"

RegisterFn = Callable[..., Awaitable[dict]]


@pytest.fixture
async def store() -> AsyncIterator[None]:
    """Fresh schema in a new in-memory database; disposed after the test."""
    await database.init_models()
    yield
    await database.drop_models()
    await database.dispose_engine()


@pytest.fixture
async def db_session(store: None) -> AsyncIterator[AsyncSession]:
    """Session for repository tests. Not committed; rolled back on exit."""
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(store: None) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against a freshly built app (ASGI)."""
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def unique_email(prefix: str = "user") -> str:
    return f"{prefix}-{uuid.uuid4().hex[:10]}@example.com"


@pytest.fixture
def register(client: AsyncClient) -> RegisterFn:
    """Register through the API; return the response data ({user, token})."""

    async def _register(
        email: str | None = None,
        password: str = TEST_PASSWORD,
        role: str = "user",
    ) -> dict:
        response = await client.post(
            "/api/v1/auth/register",
            json={"email": email or unique_email(role), "password": password, "role": role},
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _register


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def user_headers(register: RegisterFn) -> dict[str, str]:
    """Authorization header for a freshly registered regular user."""
    data = await register()
    return bearer(data["token"])


@pytest.fixture
async def admin_headers(register: RegisterFn) -> dict[str, str]:
    """Authorization header for a freshly registered admin."""
    data = await register(role="admin")
    return bearer(data["token"])
