"""Stats service and dependency injection helpers.

Example:
    >>> from stats_service.features.stats.service import StatsServiceDep
    >>>
    >>> @router.get("/stats")
    >>> async def stats(service: StatsServiceDep, request: Request):
    ...     return service.handle(request.method, request.query_params)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from fastapi import Depends, Request

from stats_service.core.settings import get_app_settings, get_monitor_settings
from stats_service.features.stats.handler import StatsRequestHandler
from stats_service.features.stats.registry import PrometheusStatsRegistry, StatsRegistry
from stats_service.features.stats.schemas import MonitorConfig
from stats_service.infra.metrics.prometheus import REGISTRY

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stats_service.core.settings import AppSettings, MonitorSettings
    from stats_service.features.stats.schemas import StatsResponse

__all__ = [
    "MonitorConfigDep",
    "StatsRegistryDep",
    "StatsService",
    "StatsServiceDep",
    "build_monitor_config",
    "get_monitor_config",
    "get_stats_registry",
    "get_stats_service",
]


class StatsService:
    """Serve stats requests against one registry.

    Each call to ``handle`` uses a fresh StatsRequestHandler, so requests
    share nothing except the registry.
    """

    def __init__(
        self,
        registry: StatsRegistry,
        monitor_config: MonitorConfig,
        **formatter_options: Any,
    ) -> None:
        self.registry = registry
        self.monitor_config = monitor_config
        self._formatter_options = formatter_options

    def new_handler(self) -> StatsRequestHandler:
        return StatsRequestHandler(self.registry, self.monitor_config, **self._formatter_options)

    def handle(
        self,
        method: str,
        query_params: Mapping[str, str],
        body: bytes | None = None,
    ) -> StatsResponse:
        """Run one full request cycle and return its response."""
        handler = self.new_handler()
        handler.on_request(method, query_params)
        if body:
            handler.on_body(body)
        return handler.on_eom()


def build_monitor_config(
    monitor_settings: MonitorSettings,
    app_settings: AppSettings,
) -> MonitorConfig:
    """Build the monitor identity, falling back to the server port."""
    return MonitorConfig(
        local_ip=monitor_settings.local_ip,
        port=monitor_settings.port or app_settings.port,
        role=monitor_settings.role,
    )


# =============================================================================
# Dependency Factories
# =============================================================================


def get_stats_registry(request: Request) -> StatsRegistry:
    """Return the registry installed on the app, or the process Prometheus registry."""
    registry = getattr(request.app.state, "stats_registry", None)
    if registry is None:
        return PrometheusStatsRegistry(REGISTRY)
    return registry


def get_monitor_config() -> MonitorConfig:
    """Return the monitor identity from cached settings."""
    return build_monitor_config(get_monitor_settings(), get_app_settings())


StatsRegistryDep = Annotated[StatsRegistry, Depends(get_stats_registry)]
MonitorConfigDep = Annotated[MonitorConfig, Depends(get_monitor_config)]


def get_stats_service(registry: StatsRegistryDep, monitor_config: MonitorConfigDep) -> StatsService:
    """Factory used as a FastAPI dependency for the stats route."""
    return StatsService(registry, monitor_config)


StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
"""Type alias for StatsService dependency injection."""
