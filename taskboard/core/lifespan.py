"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, schema, DB engine
dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from taskboard.core.config import get_settings
from taskboard.infrastructure.persistence.database import dispose_engine, init_models
from taskboard.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, then create_all when database_create_tables is set.
    Shutdown: SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    if settings.database_create_tables:
        await init_models()
        logger.info("Database tables ensured")
    logger.info(
        "%s %s started (environment=%s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
    )

    yield

    # ---- Shutdown ----
    await dispose_engine()
    logger.info("Database engine disposed")
