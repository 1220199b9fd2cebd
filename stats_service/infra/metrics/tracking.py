"""Tracking helpers for stats endpoint instrumentation."""

from __future__ import annotations

import logging

from stats_service.infra.metrics.prometheus import (
    application_info,
    errors_total,
    stats_requests_total,
    stats_resolution_failures_total,
)

logger = logging.getLogger(__name__)


def track_stats_request(output_format: str, status_code: int, failures: int = 0) -> None:
    """Record one served stats request.

    Args:
        output_format: Rendered output format (plain, json, monitor, none).
        status_code: HTTP status code of the response.
        failures: Number of requested stats that failed to resolve.

    Example:
            track_stats_request("json", 200, failures=1)
    """
    stats_requests_total.labels(format=output_format, status=str(status_code)).inc()
    if failures:
        stats_resolution_failures_total.inc(failures)


def track_error(error_type: str, endpoint: str, status_code: int) -> None:
    """Track an application error turned into a problem response.

    Args:
        error_type: Error type identifier (e.g. 'stat-read-error').
        endpoint: Request path where the error occurred.
        status_code: HTTP status code returned.
    """
    errors_total.labels(
        error_type=error_type,
        endpoint=endpoint,
        status_code=str(status_code),
    ).inc()

    logger.debug(
        f"Tracked error: {error_type}",
        extra={"endpoint": endpoint, "status_code": status_code},
    )


def set_application_info(version: str, service: str, environment: str) -> None:
    """Publish application metadata as a constant gauge."""
    application_info.labels(version=version, service=service, environment=environment).set(1)
