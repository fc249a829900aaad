"""DTO schema for normalized Notion records.

Provides the Campaign, Mention and SeedingEntry models returned to the
dashboard. All models are immutable and serialize with camelCase keys.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = int | float

SPONSORED = "협찬"
PAID = "유료"


class _DTO(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Campaign(_DTO):
    """A campaign page from the campaigns database.

    ``status`` is whatever label Notion holds (``"진행중"``, ``"완료"``,
    ``"active"``...). Classify it with :mod:`macha.normalization.status`,
    never by comparing against a fixed enum.
    """

    id: str
    name: str = ""
    category: str = ""
    campaign_type: str = Field(default=SPONSORED, description="협찬 (sponsored) or 유료 (paid)")
    product_type: str = Field(default="", description="Comma-joined sponsored product names")
    participants: Number = 0
    start_date: str = ""
    end_date: str = ""
    manager: str = ""
    status: str = "active"
    budget: Number = Field(default=0, description="Budget in units of 10,000 KRW")
    spent: Number = 0

    # Aggregate engagement; only mentions are sourced so far
    total_likes: Number = 0
    total_comments: Number = 0
    total_shares: Number = 0
    total_views: Number = 0
    total_mentions: Number = 0


class Mention(_DTO):
    """An Instagram post that mentions a campaign."""

    id: str
    influencer_name: str = ""
    handle: str = ""
    platform: str = "instagram"
    type: str = "post"
    likes: Number = 0
    comments: Number = 0
    shares: Number = 0
    views: Number = 0

    # Not available from the mentions database
    reach: Number = 0
    impressions: Number = 0
    engagement_rate: Number = 0

    post_url: str = ""
    posted_at: str = ""
    caption: str = ""
    thumbnail: str = ""


class SeedingInfluencer(_DTO):
    """Influencer summary nested in a seeding entry."""

    id: str
    name: str = ""
    handle: str = ""
    thumbnail: str = ""
    followers: Number = 0
    engagement_rate: Number = 0


class SeedingEntry(_DTO):
    """A campaign participant, derived from the first mention by each handle."""

    id: str
    influencer: SeedingInfluencer
    type: str = "free"
    status: str = "posted"
    payment_amount: Number = 0
    product_value: Number = 0
    notes: str = ""
    request_date: str = ""
    post_date: str = ""
