"""Data-fetch hooks.

A hook owns one resource's ``data``, ``loading`` and ``error`` state and
reloads it on ``refetch()``. Each fetch runs as its own asyncio task and is
never cancelled. Hooks share no cache and do not coordinate: when two
fetches of the same hook overlap, whichever resolves last writes the state,
even if it was issued first. Pass ``latest_only=True`` to drop responses
from superseded fetches instead.

Hooks start fetching when created, so the ``use_*`` factories must be called
from a running event loop.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

import structlog

from macha.dashboard.client import DashboardApiClient
from macha.dashboard.views import (
    CampaignDetail,
    CampaignListItem,
    to_campaign_list_item,
    to_content_item,
    to_seeding_item,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")

CAMPAIGNS_ERROR_PREFIX = "캠페인 데이터를 불러오는데 실패했습니다"
UNKNOWN_ERROR = "알 수 없는 오류"


@dataclass(frozen=True)
class HookState(Generic[T]):
    """Point-in-time copy of a hook's state."""

    data: Optional[T]
    loading: bool
    error: Optional[str]


class ResourceHook(Generic[T]):
    """State container for one remotely loaded resource.

    Attributes:
        data: Last successfully loaded value; None until the first success.
            A failed fetch leaves it unchanged.
        loading: True from creation, and again while a refetch is pending.
        error: Message of the last failure, cleared by the next success.
    """

    def __init__(
        self,
        loader: Callable[[], Awaitable[T]],
        *,
        name: str,
        error_prefix: Optional[str] = None,
        latest_only: bool = False,
    ):
        self.name = name
        self.data: Optional[T] = None
        self.loading = True
        self.error: Optional[str] = None

        self._loader = loader
        self._error_prefix = error_prefix
        self._latest_only = latest_only
        self._issued = 0
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> HookState[T]:
        return HookState(data=self.data, loading=self.loading, error=self.error)

    @property
    def pending(self) -> int:
        """Number of fetches still in flight."""
        return len(self._tasks)

    def mount(self) -> asyncio.Task:
        """Start the initial fetch."""
        return self.refetch()

    def refetch(self) -> asyncio.Task:
        """Start a new fetch without cancelling any that are in flight."""
        self._issued += 1
        self.loading = True
        task = asyncio.create_task(self._run(self._issued), name=f"hook:{self.name}:{self._issued}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def settle(self) -> None:
        """Wait until no fetch is in flight."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _is_stale(self, ticket: int) -> bool:
        return self._latest_only and ticket != self._issued

    def _format_error(self, exc: Exception) -> str:
        message = getattr(exc, "message", None) or str(exc) or UNKNOWN_ERROR
        if self._error_prefix:
            return f"{self._error_prefix}: {message}"
        return message

    async def _run(self, ticket: int) -> None:
        try:
            result = await self._loader()
        except Exception as e:
            if self._is_stale(ticket):
                logger.debug("hook_stale_failure_dropped", hook=self.name, ticket=ticket)
                return
            logger.error(
                "hook_fetch_failed",
                hook=self.name,
                ticket=ticket,
                error=str(e),
                error_type=type(e).__name__,
            )
            self.error = self._format_error(e)
            self.loading = False
            return

        if self._is_stale(ticket):
            logger.debug("hook_stale_response_dropped", hook=self.name, ticket=ticket)
            return

        self.data = result
        self.error = None
        self.loading = False
        logger.debug("hook_fetch_complete", hook=self.name, ticket=ticket)


def any_loading(*hooks: ResourceHook[Any]) -> bool:
    """True while any of ``hooks`` is loading."""
    return any(hook.loading for hook in hooks)


# =============================================================================
# Resource Hooks
# =============================================================================


def use_campaigns(
    api: DashboardApiClient,
    *,
    latest_only: bool = False,
) -> ResourceHook[list[CampaignListItem]]:
    async def load() -> list[CampaignListItem]:
        campaigns = await api.fetch_campaigns()
        return [to_campaign_list_item(campaign) for campaign in campaigns]

    hook = ResourceHook(
        load,
        name="campaigns",
        error_prefix=CAMPAIGNS_ERROR_PREFIX,
        latest_only=latest_only,
    )
    hook.mount()
    return hook


def use_mentions(
    api: DashboardApiClient,
    campaign_id: Optional[str] = None,
    *,
    latest_only: bool = False,
) -> ResourceHook[list[dict[str, Any]]]:
    hook = ResourceHook(
        lambda: api.fetch_mentions(campaign_id),
        name="mentions",
        latest_only=latest_only,
    )
    hook.mount()
    return hook


def use_seeding(
    api: DashboardApiClient,
    campaign_id: str,
    *,
    latest_only: bool = False,
) -> ResourceHook[list[dict[str, Any]]]:
    hook = ResourceHook(
        lambda: api.fetch_seeding(campaign_id),
        name="seeding",
        latest_only=latest_only,
    )
    hook.mount()
    return hook


def use_static_content(api: DashboardApiClient) -> ResourceHook[dict[str, Any]]:
    hook = ResourceHook(api.fetch_static_content, name="static_content")
    hook.mount()
    return hook


def use_campaign_detail(
    api: DashboardApiClient,
    campaign_id: str,
    *,
    latest_only: bool = False,
) -> ResourceHook[CampaignDetail]:
    """Participants and gallery content of one campaign.

    Seeding and mentions are requested concurrently; if either fails the
    whole detail load fails and the previous detail, if any, is kept.
    """

    async def load() -> CampaignDetail:
        seeding, mentions = await asyncio.gather(
            api.fetch_seeding(campaign_id),
            api.fetch_mentions(campaign_id),
        )
        return CampaignDetail(
            seeding=[to_seeding_item(entry) for entry in seeding],
            contents=[to_content_item(mention) for mention in mentions],
        )

    hook = ResourceHook(load, name="campaign_detail", latest_only=latest_only)
    hook.mount()
    return hook
