"""FastAPI application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI

from stats_service.app.exception_handlers import configure_exception_handlers
from stats_service.app.lifespan import lifespan
from stats_service.app.router import setup_routers
from stats_service.core.settings import get_app_settings

if TYPE_CHECKING:
    from stats_service.core.settings.app import AppSettings
    from stats_service.features.stats.registry import StatsRegistry


def create_app(
    app_settings: AppSettings | None = None,
    stats_registry: StatsRegistry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        app_settings: Optional settings override. Defaults to cached settings.
        stats_registry: Registry served by the stats endpoint. Defaults to
            the process Prometheus registry.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = app_settings or get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    if stats_registry is not None:
        app.state.stats_registry = stats_registry

    configure_exception_handlers(app)
    setup_routers(app, app_settings)

    return app


# Application instance for uvicorn
app = create_app()
