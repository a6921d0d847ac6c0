"""Request body dependency running the request validator."""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable

from fastapi import Request

from taskboard.domain.exceptions import ValidationFailedException
from taskboard.schemas.validation import ValidationSchema, validate


def validated_body(schema: ValidationSchema) -> Callable[[Request], Awaitable[dict[str, Any]]]:
    """Dependency factory: parse the JSON body and validate it against schema.

    An empty body is validated as {} so that every required field is reported.
    """

    async def dependency(request: Request) -> dict[str, Any]:
        raw = await request.body()
        try:
            payload = json.loads(raw) if raw.strip() else {}
        except ValueError:
            raise ValidationFailedException(
                [{"field": "body", "message": "Request body must be valid JSON"}]
            ) from None
        return validate(schema, payload)

    return dependency
