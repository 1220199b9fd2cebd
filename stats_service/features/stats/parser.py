"""Turn raw request method and query parameters into a stats query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stats_service.features.stats.schemas import (
    OutputFormat,
    ParseOutcome,
    StatsQuery,
    UnsupportedMethod,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

FORMAT_PARAM = "format"
STATS_PARAM = "stats"

# Only exact matches switch away from plain text
_FORMATS = {
    "json": OutputFormat.JSON,
    "monitor": OutputFormat.MONITOR,
}


def parse_output_format(value: str | None) -> OutputFormat:
    """Map the ``format`` parameter to an output format.

    Unknown values, including differently-cased ones, fall back to plain text.
    """
    if value is None:
        return OutputFormat.PLAIN
    return _FORMATS.get(value, OutputFormat.PLAIN)


def split_stat_names(value: str | None) -> tuple[str, ...]:
    """Split the ``stats`` parameter on commas, dropping empty segments.

    >>> split_stat_names("a,,b,")
    ('a', 'b')
    """
    if not value:
        return ()
    return tuple(name for name in value.split(",") if name)


def parse_request(method: str, query_params: Mapping[str, str]) -> ParseOutcome:
    """Parse a request into a StatsQuery, or UnsupportedMethod for non-GET.

    Unrecognised parameters are ignored.

    Args:
        method: HTTP method of the request.
        query_params: Decoded query parameters.

    Returns:
        StatsQuery for GET requests, UnsupportedMethod otherwise.
    """
    if method.upper() != "GET":
        return UnsupportedMethod(method=method)

    return StatsQuery(
        output_format=parse_output_format(query_params.get(FORMAT_PARAM)),
        requested_names=split_stat_names(query_params.get(STATS_PARAM)),
    )
