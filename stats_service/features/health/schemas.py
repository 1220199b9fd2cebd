"""Health check response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LivenessResponse(BaseModel):
    """Liveness probe response."""

    status: Literal["alive"] = Field(description="Always 'alive' when the process responds")

    model_config = ConfigDict(json_schema_extra={"example": {"status": "alive"}})
