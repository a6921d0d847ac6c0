"""Tests for /api/v1/auth (register, login, me, users)."""

from httpx import AsyncClient

from tests.conftest import TEST_PASSWORD, bearer, unique_email


async def test_register_returns_user_and_token(client: AsyncClient) -> None:
    """POST /auth/register returns 201 with {user:{id,email,role}, token}."""
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "ada@example.com", "password": TEST_PASSWORD},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User registered successfully"
    assert set(body["data"]["user"]) == {"id", "email", "role"}
    assert body["data"]["user"]["email"] == "ada@example.com"
    assert body["data"]["user"]["role"] == "user"
    assert body["data"]["token"]
    assert "password" not in response.text


async def test_register_validation_errors(client: AsyncClient) -> None:
    """All violations come back at once with 400."""
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "nope", "password": "123", "role": "owner"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert {e["field"] for e in body["errors"]} == {"email", "password", "role"}


async def test_register_empty_body(client: AsyncClient) -> None:
    response = await client.post("/api/v1/auth/register")
    assert response.status_code == 400
    assert {e["field"] for e in response.json()["errors"]} == {"email", "password"}


async def test_register_malformed_json(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "body", "message": "Request body must be valid JSON"}]


async def test_register_duplicate_email(client: AsyncClient, register) -> None:
    email = unique_email()
    await register(email=email)
    response = await client.post("/api/v1/auth/register", json={"email": email, "password": TEST_PASSWORD})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email already registered"}


async def test_login_success(client: AsyncClient, register) -> None:
    email = unique_email()
    registered = await register(email=email)
    response = await client.post("/api/v1/auth/login", json={"email": email, "password": TEST_PASSWORD})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["data"]["user"]["id"] == registered["user"]["id"]
    assert body["data"]["token"]


async def test_login_failures_are_indistinguishable(client: AsyncClient, register) -> None:
    """Unknown email and wrong password give the same 401 body."""
    email = unique_email()
    await register(email=email)
    wrong_password = await client.post("/api/v1/auth/login", json={"email": email, "password": "wrong-one"})
    unknown_email = await client.post(
        "/api/v1/auth/login", json={"email": unique_email("ghost"), "password": TEST_PASSWORD}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "success": False,
        "message": "Invalid email or password",
    }


async def test_me_returns_current_user(client: AsyncClient, register) -> None:
    data = await register()
    response = await client.get("/api/v1/auth/me", headers=bearer(data["token"]))
    assert response.status_code == 200
    user = response.json()["data"]["user"]
    assert user["id"] == data["user"]["id"]
    assert set(user) == {"id", "email", "role", "created_at"}


async def test_me_without_header(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "No authorization header provided"}


async def test_me_without_token_segment(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer"})
    assert response.status_code == 401
    assert response.json()["message"] == "No token provided"


async def test_me_with_invalid_token(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me", headers=bearer("garbage.token.value"))
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_users_requires_admin(client: AsyncClient, user_headers: dict) -> None:
    response = await client.get("/api/v1/auth/users", headers=user_headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Access denied. Admin privileges required"


async def test_users_lists_accounts_for_admin(client: AsyncClient, register, admin_headers: dict) -> None:
    await register()
    response = await client.get("/api/v1/auth/users", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2 == len(body["data"]["users"])
    assert all("password_hash" not in u for u in body["data"]["users"])
