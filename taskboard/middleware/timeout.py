"""Request timeout middleware.

Cancels a request that runs longer than timeout_seconds and answers 504
with a failure envelope, unless the response has already started. Raw ASGI.
"""

import asyncio
import logging
from typing import Callable

from taskboard.middleware._asgi import send_json

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Bound each HTTP request to timeout_seconds."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def tracking_send(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(app(scope, receive, tracking_send), timeout=float(timeout_seconds))
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if started:
                return
            await send_json(
                send,
                504,
                {
                    "success": False,
                    "message": f"Request timed out after {timeout_seconds} seconds",
                },
            )

    return asgi_app
