"""Prometheus metrics for the stats service.

The process registry defined here doubles as the default stats registry
served by ``GET /stats`` through ``PrometheusStatsRegistry``.
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Gauge

# Custom registry, kept separate from prometheus_client's global default
REGISTRY = CollectorRegistry()

stats_requests_total = Counter(
    "stats_requests_total",
    "Total stats endpoint requests",
    ["format", "status"],
    registry=REGISTRY,
)

stats_resolution_failures_total = Counter(
    "stats_resolution_failures_total",
    "Requested stats that could not be read from the registry",
    registry=REGISTRY,
)

application_info = Gauge(
    "application_info",
    "Application information",
    ["version", "service", "environment"],
    registry=REGISTRY,
)

errors_total = Counter(
    "errors_total",
    "Application errors converted to problem responses",
    ["error_type", "endpoint", "status_code"],
    registry=REGISTRY,
)
