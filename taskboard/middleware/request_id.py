"""Request ID middleware.

Forwards a client X-Request-ID when it is safe to log, otherwise generates
one; the value is stored in scope["state"]["request_id"] and echoed on the
response. Raw ASGI.
"""

import re
import uuid
from typing import Callable

from taskboard.middleware._asgi import add_response_headers, get_header

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def resolve_request_id(raw: str | None) -> str:
    """Return raw (stripped) if it matches the safe pattern, else a new UUID4."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.match(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request id to each HTTP request and its response."""
    header_bytes = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        await app(
            scope,
            receive,
            add_response_headers(send, [(header_bytes, request_id.encode())]),
        )

    return asgi_app
