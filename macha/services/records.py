"""Normalization handlers.

One coroutine per resource: query Notion with the resource's fixed filter and
map every returned page into its DTO. Any failure, upstream or while mapping,
is logged and re-raised as a RecordSourceError carrying a localized message
and the underlying error text. Handlers never return partial results.
"""

from typing import Any, Optional

import structlog

from macha.config.settings import Settings, get_settings
from macha.core.exceptions import MachaError, RecordSourceError
from macha.normalization.schema import Campaign, Mention, SeedingEntry
from macha.normalization.transformers import (
    CAMPAIGN_NAME,
    MENTION_CAMPAIGN_RELATION,
    derive_seeding,
    transform_campaign_page,
    transform_mention_page,
)
from macha.notion.client import NotionClient

logger = structlog.get_logger(__name__)

CAMPAIGNS_FAILED = "캠페인 목록을 불러오는데 실패했습니다."
MENTIONS_FAILED = "멘션 데이터를 불러오는데 실패했습니다."
SEEDING_FAILED = "시딩 데이터를 불러오는데 실패했습니다."


def _cause(exc: Exception) -> str:
    if isinstance(exc, MachaError):
        return exc.message
    return str(exc)


def mentions_query(settings: Settings, campaign_id: Optional[str] = None) -> dict[str, Any]:
    """Build the mentions query arguments.

    Without a campaign id the query is unfiltered; either way it is capped
    at one page of ``mentions_page_size`` records.
    """
    query: dict[str, Any] = {"page_size": settings.mentions_page_size}
    if campaign_id:
        query["filter"] = {
            "property": MENTION_CAMPAIGN_RELATION,
            "relation": {"contains": campaign_id},
        }
    return query


async def _query_mentions(
    notion: NotionClient,
    settings: Settings,
    campaign_id: Optional[str],
) -> list[dict[str, Any]]:
    response = await notion.query_database(
        settings.mentions_database_id,
        **mentions_query(settings, campaign_id),
    )
    return response.get("results", [])


async def fetch_campaigns(
    notion: NotionClient,
    settings: Optional[Settings] = None,
) -> list[Campaign]:
    """
    Load the configured campaign's pages as Campaign DTOs, in page order.

    Raises:
        RecordSourceError: If the query or the mapping fails.
    """
    settings = settings or get_settings()

    try:
        response = await notion.query_database(
            settings.campaigns_database_id,
            filter={
                "property": CAMPAIGN_NAME,
                "title": {"equals": settings.campaign_title},
            },
        )
        campaigns = [transform_campaign_page(page) for page in response.get("results", [])]
    except Exception as e:
        logger.error("campaigns_query_failed", error=_cause(e), error_type=type(e).__name__)
        raise RecordSourceError("campaigns", CAMPAIGNS_FAILED, _cause(e)) from e

    logger.info("campaigns_loaded", count=len(campaigns))
    return campaigns


async def fetch_mentions(
    notion: NotionClient,
    campaign_id: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> list[Mention]:
    """
    Load Instagram mentions, optionally restricted to one campaign.

    Args:
        notion: Notion client.
        campaign_id: Campaign page id matched against the campaign relation.
            Empty or None queries the whole database (first page only).
        settings: Settings override.

    Raises:
        RecordSourceError: If the query or the mapping fails.
    """
    settings = settings or get_settings()

    try:
        pages = await _query_mentions(notion, settings, campaign_id)
        mentions = [transform_mention_page(page) for page in pages]
    except Exception as e:
        logger.error(
            "mentions_query_failed",
            campaign_id=campaign_id,
            error=_cause(e),
            error_type=type(e).__name__,
        )
        raise RecordSourceError("mentions", MENTIONS_FAILED, _cause(e)) from e

    logger.info("mentions_loaded", campaign_id=campaign_id, count=len(mentions))
    return mentions


async def fetch_seeding(
    notion: NotionClient,
    campaign_id: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> list[SeedingEntry]:
    """
    Derive campaign participants from the same mentions query as fetch_mentions.

    Raises:
        RecordSourceError: If the query or the derivation fails.
    """
    settings = settings or get_settings()

    try:
        pages = await _query_mentions(notion, settings, campaign_id)
        seeding = derive_seeding(pages, settings.seeding_placeholder_thumbnail)
    except Exception as e:
        logger.error(
            "seeding_query_failed",
            campaign_id=campaign_id,
            error=_cause(e),
            error_type=type(e).__name__,
        )
        raise RecordSourceError("seeding", SEEDING_FAILED, _cause(e)) from e

    logger.info("seeding_loaded", campaign_id=campaign_id, count=len(seeding))
    return seeding
