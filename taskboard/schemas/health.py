"""Health check schema."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    success: bool = True
    message: str = Field(default="Server is running", description="Service status")
    timestamp: datetime


class WelcomeData(BaseModel):
    """Payload of GET /: version and the entry points of the API."""

    version: str
    endpoints: dict[str, str]
