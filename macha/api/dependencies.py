"""FastAPI dependency injection providers.

This module provides dependency functions for injecting services into route handlers.
"""

from typing import Optional

from macha.config.settings import get_settings
from macha.notion.client import NotionClient

# Global instance for singleton pattern
_notion_client: Optional[NotionClient] = None


def get_notion() -> NotionClient:
    """
    Get Notion client instance.

    Uses a singleton pattern to reuse the same client across requests.
    The client holds only the credential and base configuration, so sharing
    it between concurrent requests is safe.

    Returns:
        Authenticated Notion client.
    """
    global _notion_client

    if _notion_client is None:
        _notion_client = NotionClient(settings=get_settings())

    return _notion_client


async def reset_dependencies() -> None:
    """
    Close and drop all global dependency instances.

    Called on application shutdown and between tests.
    """
    global _notion_client
    if _notion_client is not None:
        await _notion_client.close()
    _notion_client = None
