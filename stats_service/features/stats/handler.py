"""Per-request stats handler.

A handler serves exactly one request in two phases. ``on_request`` only
records what was parsed, including an unsupported method; every decision
is taken in ``on_eom`` once the request body has been drained, and that
call produces the single response.

    START --on_request--> PARSED --on_eom--> RESPONDED
      |                     |
      +------on_error-------+---------------> FAILED
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from stats_service.features.stats.dispatcher import dispatch
from stats_service.features.stats.formatter import render
from stats_service.features.stats.parser import parse_request
from stats_service.features.stats.resolver import resolve_stats
from stats_service.features.stats.schemas import UnsupportedMethod

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stats_service.features.stats.registry import StatsRegistry
    from stats_service.features.stats.schemas import (
        MonitorConfig,
        ParseOutcome,
        StatResult,
        StatsQuery,
        StatsResponse,
    )

logger = logging.getLogger(__name__)


class HandlerState(StrEnum):
    START = "start"
    PARSED = "parsed"
    RESPONDED = "responded"
    FAILED = "failed"


class StatsRequestHandler:
    """Handle one stats request from headers to response.

    Args:
        registry: Registry the requested stats are read from.
        monitor_config: Process identity for the monitor format.
        **formatter_options: Injectables forwarded to the monitor formatter
            (``clock``, ``hostname_resolver``, ``host_validator``).
    """

    def __init__(
        self,
        registry: StatsRegistry,
        monitor_config: MonitorConfig,
        **formatter_options: Any,
    ) -> None:
        self._registry = registry
        self._monitor_config = monitor_config
        self._formatter_options = formatter_options
        self._parsed: ParseOutcome | None = None
        self.state = HandlerState.START
        self.results: list[StatResult] = []

    def on_request(self, method: str, query_params: Mapping[str, str]) -> None:
        """Record the parsed request. Errors are kept until on_eom."""
        if self.state is not HandlerState.START:
            msg = f"on_request called in state {self.state}"
            raise RuntimeError(msg)
        self._parsed = parse_request(method, query_params)
        self.state = HandlerState.PARSED
        if isinstance(self._parsed, UnsupportedMethod):
            logger.debug("Unsupported method for stats", extra={"method": method})

    def on_body(self, chunk: bytes) -> None:
        """Ignore request body data; only GET is served."""

    def on_eom(self) -> StatsResponse:
        """Resolve, format and dispatch the single response."""
        if self.state is not HandlerState.PARSED or self._parsed is None:
            msg = f"on_eom called in state {self.state}"
            raise RuntimeError(msg)

        response = dispatch(self._parsed, self._render)
        self.state = HandlerState.RESPONDED
        logger.debug(
            "Stats request served",
            extra={
                "status_code": response.status_code,
                "output_format": response.output_format,
                "stat_count": len(self.results),
            },
        )
        return response

    def on_error(self, description: str) -> None:
        """Abandon the request after a transport error."""
        logger.error("Stats handler got error: %s", description)
        self.state = HandlerState.FAILED

    @property
    def failures(self) -> int:
        """Number of requested stats that failed to resolve."""
        return sum(1 for r in self.results if not r.ok)

    def _render(self, query: StatsQuery) -> str:
        self.results = resolve_stats(query, self._registry)
        return render(
            self.results,
            query.output_format,
            self._monitor_config,
            **self._formatter_options,
        )
