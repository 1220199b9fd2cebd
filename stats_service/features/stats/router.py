"""Stats endpoint.

Endpoints:
    GET <stats_path> - Registry stats as plain text, pretty JSON or a
        monitor-agent payload.

Query Parameters:
    format: ``json`` | ``monitor``; anything else (or absent) is plain text.
    stats: Comma separated metric names; absent returns every metric.

Every method is routed here so the stats dispatcher answers non-GET
requests itself (405, empty body) instead of the framework.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Request, Response
from starlette.requests import ClientDisconnect

# NOTE: Must be outside TYPE_CHECKING for FastAPI to resolve the Depends metadata
from stats_service.features.stats.service import StatsServiceDep  # noqa: TC001
from stats_service.infra.metrics import tracking

logger = logging.getLogger(__name__)

STATS_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Non-standard status for a client that went away mid-request; never delivered.
CLIENT_CLOSED_REQUEST = 499

router = APIRouter(tags=["stats"])


@router.api_route(
    "",
    methods=STATS_METHODS,
    summary="Read process stats",
    responses={
        200: {"description": "Stats in the requested format"},
        405: {"description": "Method other than GET"},
    },
)
async def get_stats(request: Request, service: StatsServiceDep) -> Response:
    """Serve registry stats in the requested format.

    The request body is drained before the response is built.

    Returns:
        Response with the rendered stats, or an empty 405.
    """
    handler = service.new_handler()
    handler.on_request(request.method, request.query_params)

    try:
        async for chunk in request.stream():
            if chunk:
                handler.on_body(chunk)
    except ClientDisconnect:
        handler.on_error("client disconnected before end of message")
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    # Registry reads and host resolution block; keep them off the event loop.
    result = await asyncio.to_thread(handler.on_eom)

    output_format = result.output_format.value if result.output_format else "none"
    tracking.track_stats_request(output_format, result.status_code, handler.failures)

    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )
