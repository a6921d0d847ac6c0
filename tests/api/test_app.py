"""Smoke tests for health, welcome, unmatched routes and middleware wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /health returns 200, success and a timestamp."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Server is running"
    assert data["timestamp"]


async def test_root_lists_endpoints(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["endpoints"]["tasks"] == "/api/v1/tasks"


async def test_unknown_route_returns_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route /api/v1/nope not found"}


async def test_request_id_generated_and_forwarded(client: AsyncClient) -> None:
    generated = await client.get("/health")
    assert generated.headers.get("X-Request-ID")

    forwarded = await client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert forwarded.headers["X-Request-ID"] == "abc-123"

    unsafe = await client.get("/health", headers={"X-Request-ID": "bad id with spaces"})
    assert unsafe.headers["X-Request-ID"] != "bad id with spaces"


async def test_security_headers_present(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


async def test_unsupported_method_is_an_unmatched_route(client: AsyncClient) -> None:
    """A known path with an unsupported method answers like an unknown path."""
    patch = await client.patch("/api/v1/tasks/1")
    assert patch.status_code == 404
    assert patch.json() == {"success": False, "message": "Route /api/v1/tasks/1 not found"}
    assert "allow" not in patch.headers

    delete = await client.delete("/api/v1/tasks")
    assert delete.status_code == 404
    assert delete.json() == {"success": False, "message": "Route /api/v1/tasks not found"}


async def test_unknown_route_message_keeps_query_string(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope?page=2&sort=title")
    assert response.status_code == 404
    assert response.json()["message"] == "Route /api/v1/nope?page=2&sort=title not found"
