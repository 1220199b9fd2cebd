"""Logging infrastructure.

Provides structured logging with:
- JSONL format for log aggregation
- QueueHandler + QueueListener for non-blocking I/O
- OpenTelemetry trace correlation

Basic usage:
    import logging

    from stats_service.infra.logging import setup_logging

    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Stats request served", extra={"status_code": 200})
"""

from stats_service.infra.logging.config import (
    configure_logging,
    setup_logging,
    shutdown,
)
from stats_service.infra.logging.formatters import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
    "setup_logging",
    "shutdown",
]
