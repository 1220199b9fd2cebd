"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stats_service.core.settings import get_app_settings
from stats_service.features.health.router import router as health_router
from stats_service.features.metrics.router import router as metrics_router
from stats_service.features.stats.router import router as stats_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from stats_service.core.settings.app import AppSettings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, app_settings: AppSettings | None = None) -> None:
    """Register all feature routers with the application.

    Args:
        app: FastAPI application instance.
        app_settings: Optional application settings override for the stats path.
    """
    app_settings = app_settings or get_app_settings()

    app.include_router(stats_router, prefix=app_settings.stats_path)
    app.include_router(metrics_router, tags=["observability"])
    app.include_router(health_router, tags=["health"])

    logger.info("Stats endpoint registered at %s", app_settings.stats_path)
