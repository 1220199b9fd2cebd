"""Custom exception classes for the application."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        extra: Additional context-specific information about the error.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code."""
        titles = {
            400: "Bad Request",
            404: "Not Found",
            405: "Method Not Allowed",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
            503: "Service Unavailable",
        }
        return titles.get(status_code, "Error")


class StatsReadError(AppException):
    """Raised by a stats registry when a metric cannot be read.

    The stats resolver folds this into a per-metric error outcome, so the
    message travels verbatim into the plain and JSON bodies.

    Example:
            raise StatsReadError("Stat not found: num_queries", stat_name="num_queries")
    """

    def __init__(self, detail: str, stat_name: str | None = None) -> None:
        """Initialize stats read error.

        Args:
            detail: Human-readable failure description.
            stat_name: Name of the metric that failed, if known.
        """
        super().__init__(
            status_code=404,
            detail=detail,
            type="stat-read-error",
            title="Stat Not Readable",
            extra={"stat_name": stat_name} if stat_name else None,
        )
        self.stat_name = stat_name


class HostValidationError(AppException):
    """Raised when the configured host or IP cannot be used as an endpoint."""

    def __init__(self, detail: str, host: str | None = None) -> None:
        """Initialize host validation error.

        Args:
            detail: Human-readable failure description.
            host: Offending host value.
        """
        super().__init__(
            status_code=422,
            detail=detail,
            type="host-validation-error",
            title="Invalid Host",
            extra={"host": host} if host is not None else None,
        )
        self.host = host
