"""Stats feature: serve registry counters and gauges over HTTP.

The request pipeline is parse -> resolve -> format -> dispatch:

- ``parser.parse_request`` turns method and query parameters into a StatsQuery
- ``resolver.resolve_stats`` reads the registry, folding failures into results
- ``formatter.render`` produces plain, JSON or monitor bodies
- ``dispatcher.dispatch`` picks the status code
"""

from __future__ import annotations

from stats_service.features.stats.handler import StatsRequestHandler
from stats_service.features.stats.registry import (
    InMemoryStatsRegistry,
    PrometheusStatsRegistry,
    StatsRegistry,
)
from stats_service.features.stats.schemas import (
    MonitorConfig,
    OutputFormat,
    StatError,
    StatResult,
    StatsQuery,
    StatsResponse,
    StatValue,
    UnsupportedMethod,
)
from stats_service.features.stats.service import StatsService

__all__ = [
    "InMemoryStatsRegistry",
    "MonitorConfig",
    "OutputFormat",
    "PrometheusStatsRegistry",
    "StatError",
    "StatResult",
    "StatValue",
    "StatsQuery",
    "StatsRegistry",
    "StatsRequestHandler",
    "StatsResponse",
    "StatsService",
    "UnsupportedMethod",
]
