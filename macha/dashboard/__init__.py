"""Dashboard client layer: API client, data-fetch hooks and view models."""

from macha.dashboard.client import DashboardApiClient
from macha.dashboard.hooks import (
    HookState,
    ResourceHook,
    any_loading,
    use_campaign_detail,
    use_campaigns,
    use_mentions,
    use_seeding,
    use_static_content,
)
from macha.dashboard.views import (
    CampaignDetail,
    CampaignListItem,
    CampaignSummary,
    ContentItem,
    SeedingItem,
    filter_campaigns,
    summarize_campaigns,
)

__all__ = [
    "DashboardApiClient",
    "HookState",
    "ResourceHook",
    "any_loading",
    "use_campaign_detail",
    "use_campaigns",
    "use_mentions",
    "use_seeding",
    "use_static_content",
    "CampaignDetail",
    "CampaignListItem",
    "CampaignSummary",
    "ContentItem",
    "SeedingItem",
    "filter_campaigns",
    "summarize_campaigns",
]
