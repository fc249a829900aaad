"""View models built from API payloads.

Adapts the camelCase JSON returned by the dashboard API into the shapes the
campaign views render: list rows, participant rows and gallery items. Only
counts are derived here; every other value passes through unchanged.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from macha.normalization.status import classify_status, is_active, is_completed

CONTENT_PLACEHOLDER_THUMBNAIL = "https://via.placeholder.com/300x400"
CONTENT_TYPES = frozenset({"image", "video", "reel", "story"})

Number = int | float


@dataclass(frozen=True)
class CampaignListItem:
    """Row of the campaign list table."""

    id: str
    name: str
    category: str
    campaign_type: str
    product_type: str
    participants: Number
    start_date: str
    end_date: str
    manager: str
    status: str

    @property
    def status_group(self) -> Optional[str]:
        return classify_status(self.status)


@dataclass(frozen=True)
class InfluencerCard:
    id: str
    name: str
    handle: str
    thumbnail: str
    followers: Number = 0
    engagement_rate: Number = 0
    platform: str = "instagram"
    avg_likes: Number = 0
    avg_comments: Number = 0
    category: tuple[str, ...] = ()
    price_range: str = ""
    verified: bool = False


@dataclass(frozen=True)
class SeedingItem:
    """Row of the participating-influencer table."""

    id: str
    influencer: InfluencerCard
    type: str
    status: str
    request_date: str
    post_date: str = ""
    payment_amount: Number = 0
    product_value: Number = 0
    notes: str = ""
    campaign_id: str = ""


@dataclass(frozen=True)
class ContentItem:
    """Tile of the content gallery."""

    id: str
    influencer_name: str
    platform: str
    type: str
    thumbnail: str
    original_url: str
    download_url: str
    likes: Number
    comments: Number
    views: Number
    engagement_rate: Number
    posted_at: str
    caption: str = ""
    influencer_id: str = ""


@dataclass(frozen=True)
class CampaignSummary:
    """Counts shown on the active/completed filter buttons."""

    total: int
    active: int
    completed: int
    unclassified: int = 0


@dataclass(frozen=True)
class CampaignDetail:
    """Data behind the campaign detail view."""

    seeding: list[SeedingItem] = field(default_factory=list)
    contents: list[ContentItem] = field(default_factory=list)


def to_campaign_list_item(campaign: dict[str, Any]) -> CampaignListItem:
    return CampaignListItem(
        id=campaign["id"],
        name=campaign.get("name", ""),
        category=campaign.get("category", ""),
        campaign_type=campaign.get("campaignType", ""),
        product_type=campaign.get("productType", ""),
        participants=campaign.get("participants", 0),
        start_date=campaign.get("startDate", ""),
        end_date=campaign.get("endDate", ""),
        manager=campaign.get("manager", ""),
        status=campaign.get("status", ""),
    )


def to_seeding_item(entry: dict[str, Any]) -> SeedingItem:
    influencer = entry.get("influencer") or {}
    return SeedingItem(
        id=entry["id"],
        influencer=InfluencerCard(
            id=influencer.get("id", ""),
            name=influencer.get("name", ""),
            handle=influencer.get("handle", ""),
            thumbnail=influencer.get("thumbnail", ""),
            followers=influencer.get("followers", 0),
            engagement_rate=influencer.get("engagementRate", 0),
        ),
        type=entry.get("type", "free"),
        status=entry.get("status", ""),
        request_date=entry.get("requestDate") or "",
        post_date=entry.get("postDate", ""),
        payment_amount=entry.get("paymentAmount", 0),
        product_value=entry.get("productValue", 0),
        notes=entry.get("notes", ""),
    )


def to_content_item(mention: dict[str, Any]) -> ContentItem:
    """Gallery tile for a mention.

    Unknown post types (e.g. ``"post"``, ``"sidecar"``) are passed through;
    only an empty type falls back to ``"image"``.
    """
    post_url = mention.get("postUrl", "")
    return ContentItem(
        id=mention["id"],
        influencer_name=mention.get("influencerName") or mention.get("handle", ""),
        platform="instagram",
        type=mention.get("type") or "image",
        thumbnail=mention.get("thumbnail") or CONTENT_PLACEHOLDER_THUMBNAIL,
        original_url=post_url,
        download_url=post_url,
        likes=mention.get("likes", 0),
        comments=mention.get("comments", 0),
        views=mention.get("views", 0),
        engagement_rate=mention.get("engagementRate", 0),
        posted_at=mention.get("postedAt", ""),
        caption=mention.get("caption", ""),
    )


def summarize_campaigns(campaigns: Iterable[CampaignListItem]) -> CampaignSummary:
    """Count campaigns per status group."""
    total = active = completed = 0
    for campaign in campaigns:
        total += 1
        if is_active(campaign.status):
            active += 1
        elif is_completed(campaign.status):
            completed += 1
    return CampaignSummary(
        total=total,
        active=active,
        completed=completed,
        unclassified=total - active - completed,
    )


def filter_campaigns(
    campaigns: Iterable[CampaignListItem],
    group: str,
) -> list[CampaignListItem]:
    """Campaigns whose status falls in ``group`` (``"active"`` or ``"completed"``)."""
    return [campaign for campaign in campaigns if campaign.status_group == group]
