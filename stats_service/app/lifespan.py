"""Application lifespan management.

Startup configures logging and publishes application info. The stats
service holds no connections, so shutdown only flushes logs.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import TYPE_CHECKING

from stats_service.core.settings import get_app_settings, get_logging_settings
from stats_service.infra.logging.config import setup_logging, shutdown
from stats_service.infra.metrics.tracking import set_application_info

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup and shutdown around the application's lifetime."""
    settings = get_app_settings()
    setup_logging(get_logging_settings())

    set_application_info(
        version=settings.version,
        service=settings.service_name,
        environment=settings.environment,
    )
    logger.info(
        "Application starting",
        extra={
            "service": settings.service_name,
            "version": settings.version,
            "environment": settings.environment,
            "stats_path": settings.stats_path,
        },
    )

    yield

    logger.info("Application shutting down", extra={"service": settings.service_name})
    shutdown()
