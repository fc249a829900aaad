"""API route modules."""

from macha.api.routes.campaigns import router as campaigns_router
from macha.api.routes.content import router as content_router
from macha.api.routes.health import router as health_router
from macha.api.routes.mentions import router as mentions_router
from macha.api.routes.seeding import router as seeding_router

__all__ = [
    "campaigns_router",
    "content_router",
    "health_router",
    "mentions_router",
    "seeding_router",
]
