"""Campaign endpoints for the dashboard API."""

from fastapi import APIRouter, Depends

from macha.api.dependencies import get_notion
from macha.api.models import ErrorResponse
from macha.config.settings import Settings, get_settings
from macha.normalization.schema import Campaign
from macha.notion.client import NotionClient
from macha.services.records import fetch_campaigns

router = APIRouter(prefix="/campaigns", tags=["Campaigns"])


@router.get(
    "",
    response_model=list[Campaign],
    summary="List campaigns",
    description="Campaign pages matching the configured campaign title, in Notion order.",
    responses={500: {"model": ErrorResponse, "description": "Notion query failed"}},
)
async def list_campaigns(
    notion: NotionClient = Depends(get_notion),
    settings: Settings = Depends(get_settings),
) -> list[Campaign]:
    return await fetch_campaigns(notion, settings)
