"""Notion page transformers.

Provides functions to transform Notion database pages into the Campaign,
Mention and SeedingEntry DTOs. Every field has its own default: a missing
property is never an error.
"""

from typing import Any, Iterable

from macha.normalization.schema import (
    SPONSORED,
    Campaign,
    Mention,
    SeedingEntry,
    SeedingInfluencer,
)
from macha.notion import properties as p

# Campaign database properties
CAMPAIGN_NAME = "캠페인명"
CAMPAIGN_CATEGORY = "카테고리"
CAMPAIGN_TYPE = "캠페인 유형"
CAMPAIGN_PRODUCTS = "협찬 제품"
CAMPAIGN_PARTICIPANTS = "캠페인 총 참여 인원"
CAMPAIGN_START = "캠페인 시작일"
CAMPAIGN_END = "캠페인 종료일"
CAMPAIGN_MANAGER = "담당자"
CAMPAIGN_STATUS = "상태"
CAMPAIGN_BUDGET = "예산(만원)"
CAMPAIGN_MENTION_COUNT = "총 맨션 피드 수"

# Mention database properties
MENTION_CAMPAIGN_RELATION = "캠페인 DB"
MENTION_FULL_NAME = "ownerFulName"
MENTION_USERNAME = "ownerUsername"
MENTION_TYPE = "type"
MENTION_LIKES = "likesCounts"
MENTION_COMMENTS = "commentsCount"
MENTION_SHARES = "reshareCount"
MENTION_VIEWS = "VideoPlayCount"
MENTION_POST_URL = "Post URL"
MENTION_POSTED_AT = "피드게시일"
MENTION_CAPTION = "caption"
MENTION_THUMBNAIL = "displayUrl"

SEEDING_PLACEHOLDER_THUMBNAIL = "https://via.placeholder.com/100"


def transform_campaign_page(page: dict[str, Any]) -> Campaign:
    """Transform a campaign database page into a Campaign.

    Args:
        page: Raw page object from a Notion query

    Returns:
        Normalized Campaign instance
    """
    props = page.get("properties") or {}

    return Campaign(
        id=page["id"],
        name=p.title_text(props, CAMPAIGN_NAME) or "",
        category=p.select_name(props, CAMPAIGN_CATEGORY) or "",
        campaign_type=p.select_name(props, CAMPAIGN_TYPE) or SPONSORED,
        product_type=", ".join(p.multi_select_names(props, CAMPAIGN_PRODUCTS)),
        participants=p.rollup_number(props, CAMPAIGN_PARTICIPANTS) or 0,
        start_date=p.date_start(props, CAMPAIGN_START) or "",
        end_date=p.date_start(props, CAMPAIGN_END) or "",
        manager=p.first_person_name(props, CAMPAIGN_MANAGER) or "",
        status=p.status_name(props, CAMPAIGN_STATUS) or "active",
        budget=p.number(props, CAMPAIGN_BUDGET) or 0,
        spent=0,
        total_likes=0,
        total_comments=0,
        total_shares=0,
        total_views=0,
        total_mentions=p.formula_number(props, CAMPAIGN_MENTION_COUNT) or 0,
    )


def mention_handle(page: dict[str, Any]) -> str:
    """Instagram username of the mention's author, or ``""``."""
    return p.first_plain_text(page.get("properties") or {}, MENTION_USERNAME) or ""


def transform_mention_page(page: dict[str, Any]) -> Mention:
    """Transform a mention database page into a Mention.

    Args:
        page: Raw page object from a Notion query

    Returns:
        Normalized Mention instance
    """
    props = page.get("properties") or {}
    handle = mention_handle(page)
    post_type = p.select_name(props, MENTION_TYPE)

    return Mention(
        id=page["id"],
        influencer_name=p.first_plain_text(props, MENTION_FULL_NAME) or handle,
        handle=handle,
        platform="instagram",
        type=post_type.lower() if post_type else "post",
        likes=p.number(props, MENTION_LIKES) or 0,
        comments=p.number(props, MENTION_COMMENTS) or 0,
        shares=p.number(props, MENTION_SHARES) or 0,
        views=p.number(props, MENTION_VIEWS) or 0,
        reach=0,
        impressions=0,
        engagement_rate=0,
        post_url=p.url(props, MENTION_POST_URL) or "",
        posted_at=p.date_start(props, MENTION_POSTED_AT) or "",
        caption=p.first_plain_text(props, MENTION_CAPTION) or "",
        thumbnail=p.first_file_url(props, MENTION_THUMBNAIL) or "",
    )


def transform_seeding_page(
    page: dict[str, Any],
    placeholder_thumbnail: str = SEEDING_PLACEHOLDER_THUMBNAIL,
) -> SeedingEntry:
    """Build a SeedingEntry with ``page`` as the influencer's representative mention.

    Commercial fields (type, status, payment, product value, notes, request
    date) have no source column and are fixed defaults.
    """
    props = page.get("properties") or {}
    handle = mention_handle(page)

    return SeedingEntry(
        id=page["id"],
        influencer=SeedingInfluencer(
            id=page["id"],
            name=p.first_plain_text(props, MENTION_FULL_NAME) or handle,
            handle=handle,
            thumbnail=p.first_file_url(props, MENTION_THUMBNAIL) or placeholder_thumbnail,
            followers=0,
            engagement_rate=0,
        ),
        type="free",
        status="posted",
        payment_amount=0,
        product_value=0,
        notes="",
        request_date="",
        post_date=p.date_start(props, MENTION_POSTED_AT) or "",
    )


def derive_seeding(
    pages: Iterable[dict[str, Any]],
    placeholder_thumbnail: str = SEEDING_PLACEHOLDER_THUMBNAIL,
) -> list[SeedingEntry]:
    """Derive one SeedingEntry per distinct handle from mention pages.

    Pages without a handle are dropped. The first page seen for a handle is
    its representative; later mentions by the same handle are ignored.
    Output order is first-seen order.
    """
    by_handle: dict[str, SeedingEntry] = {}
    for page in pages:
        handle = mention_handle(page)
        if not handle or handle in by_handle:
            continue
        by_handle[handle] = transform_seeding_page(page, placeholder_thumbnail)
    return list(by_handle.values())
