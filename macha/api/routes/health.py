"""Health check endpoints for the dashboard API."""

from datetime import datetime, timezone

from fastapi import APIRouter

from macha.api.models import LivenessResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health/live",
    response_model=LivenessResponse,
    summary="Liveness Check",
    description="Simple liveness check for container orchestration.",
)
async def liveness() -> LivenessResponse:
    """
    Liveness probe. Does not touch Notion.

    Returns 200 if the service is alive.
    """
    return LivenessResponse(timestamp=datetime.now(timezone.utc))
