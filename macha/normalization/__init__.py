"""Normalization of Notion records into dashboard DTOs."""

from macha.normalization.schema import (
    Campaign,
    Mention,
    SeedingEntry,
    SeedingInfluencer,
)
from macha.normalization.status import (
    classify_status,
    is_active,
    is_completed,
)
from macha.normalization.transformers import (
    derive_seeding,
    transform_campaign_page,
    transform_mention_page,
    transform_seeding_page,
)

__all__ = [
    "Campaign",
    "Mention",
    "SeedingEntry",
    "SeedingInfluencer",
    "classify_status",
    "is_active",
    "is_completed",
    "derive_seeding",
    "transform_campaign_page",
    "transform_mention_page",
    "transform_seeding_page",
]
