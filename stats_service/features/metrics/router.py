"""Prometheus metrics endpoint.

Endpoints:
    GET /metrics - Prometheus scrape endpoint for the process registry

The same registry backs the default stats registry of ``GET /stats``.
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from stats_service.infra.metrics.prometheus import REGISTRY

router = APIRouter(tags=["observability"])


@router.get("/metrics")
async def metrics() -> Response:
    """Expose the process registry in Prometheus text format.

    Returns:
        Response with Prometheus metrics.
    """
    data = generate_latest(REGISTRY)
    return Response(
        content=data,
        media_type=CONTENT_TYPE_LATEST,
        headers={"Cache-Control": "no-cache, no-store, must-revalidate"},
    )
