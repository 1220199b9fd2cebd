"""Liveness endpoint.

Endpoints:
    GET /health/live - Is the process alive?
"""

from __future__ import annotations

from fastapi import APIRouter

from stats_service.features.health.schemas import LivenessResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "/live",
    response_model=LivenessResponse,
    summary="Liveness probe (Kubernetes)",
)
async def liveness_check() -> LivenessResponse:
    """Return alive while the event loop is serving requests."""
    return LivenessResponse(status="alive")
