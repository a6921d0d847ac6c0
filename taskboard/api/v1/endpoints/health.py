"""Health check and welcome endpoints. No dependencies; mounted at the root, not under /api/v1."""

from fastapi import APIRouter

from taskboard.core.config import get_settings
from taskboard.schemas.envelope import Envelope
from taskboard.schemas.health import HealthResponse, WelcomeData
from taskboard.shared.utils import utc_now

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return success and the current server time for liveness probes."""
    return HealthResponse(timestamp=utc_now())


@router.get(
    "/",
    response_model=Envelope[WelcomeData],
    response_model_exclude_unset=True,
)
def welcome() -> Envelope[WelcomeData]:
    """Landing envelope listing the API entry points."""
    settings = get_settings()
    return Envelope.ok(
        message=f"Welcome to {settings.app_name} API",
        data=WelcomeData(
            version=settings.app_version,
            endpoints={
                "health": "/health",
                "documentation": "/docs",
                "auth": "/api/v1/auth",
                "tasks": "/api/v1/tasks",
            },
        ),
    )
