"""Seeding (campaign participant) endpoints for the dashboard API."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from macha.api.dependencies import get_notion
from macha.api.models import ErrorResponse
from macha.config.settings import Settings, get_settings
from macha.normalization.schema import SeedingEntry
from macha.notion.client import NotionClient
from macha.services.records import fetch_seeding

router = APIRouter(prefix="/seeding", tags=["Seeding"])


@router.get(
    "",
    response_model=list[SeedingEntry],
    summary="List campaign participants",
    description="One entry per influencer handle, derived from the campaign's mentions.",
    responses={500: {"model": ErrorResponse, "description": "Notion query failed"}},
)
async def list_seeding(
    campaign_id: Optional[str] = Query(None, alias="campaignId", description="Campaign page id"),
    notion: NotionClient = Depends(get_notion),
    settings: Settings = Depends(get_settings),
) -> list[SeedingEntry]:
    return await fetch_seeding(notion, campaign_id, settings)
