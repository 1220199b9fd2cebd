"""Resolve a stats query against a stats registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stats_service.core.exceptions import StatsReadError
from stats_service.features.stats.schemas import StatError, StatResult, StatValue

if TYPE_CHECKING:
    from stats_service.features.stats.registry import StatsRegistry
    from stats_service.features.stats.schemas import StatsQuery

logger = logging.getLogger(__name__)


def resolve_stats(query: StatsQuery, registry: StatsRegistry) -> list[StatResult]:
    """Read the requested metrics from the registry.

    With no requested names every known metric is returned in registry
    order. Otherwise one result is produced per requested name, in request
    order, duplicates included. A metric that cannot be read becomes a
    StatError carrying the registry's failure description.

    Args:
        query: Parsed stats query.
        registry: Registry to read from. It is never modified.

    Returns:
        Ordered list of per-metric results.
    """
    if query.wants_all:
        return [StatResult(name, StatValue(value)) for name, value in registry.read_all()]

    results: list[StatResult] = []
    for name in query.requested_names:
        try:
            outcome = StatValue(registry.read_value(name))
        except StatsReadError as e:
            logger.warning(
                "Failed to read stat",
                extra={"stat_name": name, "detail": e.detail},
            )
            outcome = StatError(e.detail)
        results.append(StatResult(name, outcome))
    return results
