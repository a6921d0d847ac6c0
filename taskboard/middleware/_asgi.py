"""Small helpers over raw ASGI scopes and messages used by the middleware."""

import json
from typing import Any, Callable

Headers = list[tuple[bytes, bytes]]


def get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == want:
            return value.decode("utf-8", errors="replace")
    return None


def add_response_headers(send: Callable, extra: Headers, *, replace: bool = True) -> Callable:
    """Wrap send so http.response.start carries extra headers.

    With replace=False a header the app already set is left alone.
    """

    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", []))
            present = {key.lower() for key, _ in headers}
            for key, value in extra:
                if replace or key.lower() not in present:
                    headers.append((key, value))
            message["headers"] = headers
        await send(message)

    return send_wrapper


async def send_json(send: Callable, status: int, payload: dict[str, Any]) -> None:
    """Send a complete JSON response."""
    body = json.dumps(payload).encode()
    await send({
        "type": "http.response.start",
        "status": status,
        "headers": [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
        ],
    })
    await send({"type": "http.response.body", "body": body, "more_body": False})
