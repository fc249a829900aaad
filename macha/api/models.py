"""Pydantic models for API responses.

Resource payloads are the normalization DTOs themselves; this module only
holds the envelopes the API adds around them.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned when a resource could not be loaded."""

    error: str = Field(..., description="User-facing error message")
    details: str = Field("", description="Underlying error message, for diagnostics")


class LivenessResponse(BaseModel):
    """Liveness probe payload."""

    status: Literal["alive"] = "alive"
    timestamp: datetime
