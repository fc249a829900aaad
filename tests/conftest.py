"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- settings: Settings with test Notion identifiers
- mock_notion: NotionClient double with an AsyncMock query_database
- api_client: FastAPI TestClient wired to mock_notion
- sample_campaign_page / sample_mention_pages: Raw Notion pages
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from macha.api.dependencies import get_notion
from macha.api.main import create_app
from macha.config.settings import Settings, get_settings
from macha.notion.client import NotionClient
from tests.notion_pages import campaign_page, mention_page, query_response


@pytest.fixture
def settings() -> Settings:
    """Return settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        notion_token="  secret_test_token\n",
        campaigns_database_id="db-campaigns",
        mentions_database_id="db-mentions",
        api_url="http://testserver",
    )


@pytest.fixture
def mock_notion() -> MagicMock:
    """Return a NotionClient double answering every query with no results."""
    notion = MagicMock(spec=NotionClient)
    notion.query_database = AsyncMock(return_value=query_response())
    return notion


@pytest.fixture
def api_client(settings, mock_notion):
    """Return a TestClient for a fresh app using the mocked Notion client."""
    app = create_app()
    app.dependency_overrides[get_notion] = lambda: mock_notion
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_campaign_page() -> dict:
    """Return a fully populated campaign page."""
    return campaign_page("2b708b1c-0001")


@pytest.fixture
def sample_mention_pages() -> list[dict]:
    """Return mention pages with handles a, b, a and one without a handle."""
    return [
        mention_page("m-1", "a", full_name="Alice Kim", posted_at="2024-12-02",
                     external_thumbnail="https://cdn.example.com/a1.jpg"),
        mention_page("m-2", "b", posted_at="2024-12-03"),
        mention_page("m-3", "a", full_name="Alice K.", posted_at="2024-12-09",
                     external_thumbnail="https://cdn.example.com/a2.jpg"),
        mention_page("m-4", "", full_name="No Handle", posted_at="2024-12-04"),
    ]
