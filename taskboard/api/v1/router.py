"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes use
dependencies from taskboard.api.v1.dependencies (no manual repo/service
construction). /health and / are mounted at the application root in main.
"""

from fastapi import APIRouter

from taskboard.api.v1.endpoints import auth, tasks

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
