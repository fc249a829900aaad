"""Mention endpoints for the dashboard API."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from macha.api.dependencies import get_notion
from macha.api.models import ErrorResponse
from macha.config.settings import Settings, get_settings
from macha.normalization.schema import Mention
from macha.notion.client import NotionClient
from macha.services.records import fetch_mentions

router = APIRouter(prefix="/mentions", tags=["Mentions"])


@router.get(
    "",
    response_model=list[Mention],
    summary="List mentions",
    description="Instagram posts mentioning a campaign. Capped at one page of 100 records.",
    responses={500: {"model": ErrorResponse, "description": "Notion query failed"}},
)
async def list_mentions(
    campaign_id: Optional[str] = Query(
        None,
        alias="campaignId",
        description="Campaign page id. Omit to list mentions across all campaigns.",
    ),
    notion: NotionClient = Depends(get_notion),
    settings: Settings = Depends(get_settings),
) -> list[Mention]:
    """
    List mentions for a campaign.

    **Parameters:**
    - **campaignId**: Optional campaign page id; matched against the mention's campaign relation
    """
    return await fetch_mentions(notion, campaign_id, settings)
