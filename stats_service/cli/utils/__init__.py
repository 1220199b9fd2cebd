"""CLI utilities for formatting output."""

from stats_service.cli.utils.formatters import error, info

__all__ = [
    "error",
    "info",
]
