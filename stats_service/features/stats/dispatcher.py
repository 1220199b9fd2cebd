"""Map parse outcomes to the final status code and body."""

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus
from typing import assert_never

from stats_service.features.stats.schemas import (
    OutputFormat,
    ParseOutcome,
    StatsQuery,
    StatsResponse,
    UnsupportedMethod,
)

CONTENT_TYPES = {
    OutputFormat.PLAIN: "text/plain; charset=utf-8",
    OutputFormat.JSON: "application/json",
    OutputFormat.MONITOR: "application/json",
}


def method_not_allowed() -> StatsResponse:
    """405 with an empty body."""
    return StatsResponse(
        status_code=HTTPStatus.METHOD_NOT_ALLOWED,
        reason=HTTPStatus.METHOD_NOT_ALLOWED.phrase,
        headers={"Allow": "GET"},
    )


def ok(body: str, output_format: OutputFormat) -> StatsResponse:
    """200 carrying a rendered body."""
    return StatsResponse(
        status_code=HTTPStatus.OK,
        reason=HTTPStatus.OK.phrase,
        body=body,
        output_format=output_format,
        headers={"Content-Type": CONTENT_TYPES[output_format]},
    )


def dispatch(parsed: ParseOutcome, render_body: Callable[[StatsQuery], str]) -> StatsResponse:
    """Build the response for a parse outcome.

    ``render_body`` runs only for a StatsQuery, so an unsupported method
    never reaches the registry or the formatter.
    """
    match parsed:
        case UnsupportedMethod():
            return method_not_allowed()
        case StatsQuery():
            return ok(render_body(parsed), parsed.output_format)
        case _:
            assert_never(parsed)
