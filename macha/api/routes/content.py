"""Static dashboard content endpoint."""

from fastapi import APIRouter, Depends

from macha.content import StaticContent, get_static_content

router = APIRouter(prefix="/content", tags=["Content"])


@router.get(
    "",
    response_model=StaticContent,
    summary="Static dashboard content",
    description="AI analysis narrative, metric definitions and source breakdowns. Configured, not computed.",
)
async def static_content(content: StaticContent = Depends(get_static_content)) -> StaticContent:
    return content
