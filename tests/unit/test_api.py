"""Unit tests for the dashboard HTTP API."""

import pytest
from fastapi.testclient import TestClient

from macha.api.main import create_app
from macha.config.settings import get_settings
from macha.content import get_static_content, load_static_content
from macha.core.exceptions import NotionQueryError
from tests.notion_pages import campaign_page, mention_page, page, query_response

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_cors(response) -> None:
    for header, value in CORS.items():
        assert response.headers[header] == value


class TestCampaignsEndpoint:
    """Tests for GET /api/campaigns."""

    def test_returns_camel_case_campaigns(self, api_client, mock_notion, sample_campaign_page):
        mock_notion.query_database.return_value = query_response(sample_campaign_page)

        response = api_client.get("/api/campaigns")

        assert response.status_code == 200
        assert_cors(response)
        body = response.json()
        assert len(body) == 1
        assert body[0]["id"] == "2b708b1c-0001"
        assert body[0]["campaignType"] == "유료"
        assert body[0]["productType"] == "선크림, 토너"
        assert body[0]["totalMentions"] == 34

    def test_missing_campaign_type_serializes_as_sponsored(self, api_client, mock_notion):
        mock_notion.query_database.return_value = query_response(page("c-1", {}))

        body = api_client.get("/api/campaigns").json()

        assert body[0]["campaignType"] == "협찬"
        assert body[0]["category"] == ""

    def test_upstream_failure_returns_500(self, api_client, mock_notion):
        mock_notion.query_database.side_effect = NotionQueryError("API token is invalid.", status=401)

        response = api_client.get("/api/campaigns")

        assert response.status_code == 500
        assert_cors(response)
        assert response.json() == {
            "error": "캠페인 목록을 불러오는데 실패했습니다.",
            "details": "API token is invalid.",
        }


class TestMentionsEndpoint:
    """Tests for GET /api/mentions."""

    def test_without_campaign_id(self, api_client, mock_notion):
        mock_notion.query_database.return_value = query_response(mention_page("m-1", "a"))

        response = api_client.get("/api/mentions")

        assert response.status_code == 200
        mock_notion.query_database.assert_awaited_once_with("db-mentions", page_size=100)
        assert response.json()[0]["handle"] == "a"
        assert response.json()[0]["platform"] == "instagram"

    def test_with_campaign_id(self, api_client, mock_notion):
        api_client.get("/api/mentions", params={"campaignId": "c-1"})

        mock_notion.query_database.assert_awaited_once_with(
            "db-mentions",
            page_size=100,
            filter={"property": "캠페인 DB", "relation": {"contains": "c-1"}},
        )

    def test_failure_returns_500(self, api_client, mock_notion):
        mock_notion.query_database.side_effect = RuntimeError("timeout")

        response = api_client.get("/api/mentions", params={"campaignId": "c-1"})

        assert response.status_code == 500
        assert response.json() == {"error": "멘션 데이터를 불러오는데 실패했습니다.", "details": "timeout"}


class TestSeedingEndpoint:
    """Tests for GET /api/seeding."""

    def test_dedupes_participants(self, api_client, mock_notion, sample_mention_pages):
        mock_notion.query_database.return_value = query_response(*sample_mention_pages)

        response = api_client.get("/api/seeding", params={"campaignId": "c-1"})

        assert response.status_code == 200
        body = response.json()
        assert [entry["influencer"]["handle"] for entry in body] == ["a", "b"]
        assert body[0]["postDate"] == "2024-12-02"
        assert body[1]["influencer"]["thumbnail"] == "https://via.placeholder.com/100"

    def test_failure_returns_500(self, api_client, mock_notion):
        mock_notion.query_database.side_effect = NotionQueryError("Could not find database")

        response = api_client.get("/api/seeding")

        assert response.status_code == 500
        assert response.json()["error"] == "시딩 데이터를 불러오는데 실패했습니다."


class TestCors:
    """Tests for OPTIONS short-circuit and CORS headers."""

    @pytest.mark.parametrize("path", ["/api/campaigns", "/api/mentions", "/api/seeding"])
    def test_options_returns_empty_200(self, api_client, mock_notion, path):
        response = api_client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)
        mock_notion.query_database.assert_not_awaited()

    def test_preflight_request(self, api_client):
        response = api_client.options(
            "/api/mentions",
            headers={"Origin": "https://dashboard.example.com", "Access-Control-Request-Method": "GET"},
        )

        assert response.status_code == 200
        assert_cors(response)


class TestAuxiliaryEndpoints:
    """Tests for static content and liveness endpoints."""

    def test_static_content(self, api_client):
        body = api_client.get("/api/content").json()

        assert set(body) == {"aiAnalysis", "metricDefinitions", "reachSource", "engagementSource"}
        assert [share["value"] for share in body["reachSource"]] == [69, 31]
        assert "reachSource" in body["metricDefinitions"]

    def test_liveness(self, api_client):
        response = api_client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"


class TestUnexpectedErrors:
    """Tests for failures outside the Notion record handlers."""

    def test_bad_static_content_file_returns_cors_json_500(self, settings, tmp_path):
        path = tmp_path / "content.json"
        path.write_text("[1]", encoding="utf-8")
        app = create_app()
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_static_content] = lambda: load_static_content(path)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/content")

        assert response.status_code == 500
        assert_cors(response)
        body = response.json()
        assert body["error"] == "서버에서 예상치 못한 오류가 발생했습니다."
        assert "JSON object" in body["details"]
