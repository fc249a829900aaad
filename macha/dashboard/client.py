"""Dashboard API client.

Async client the dashboard uses to call the Macha API. Every call either
returns parsed JSON or raises exactly once: there is no retry, timeout or
cancellation. Response bodies are read as text first so that error pages
can be classified even when they are not JSON.
"""

import json
from typing import Any, Optional
from urllib.parse import urlencode

import httpx
import structlog

from macha.config.settings import Settings, get_settings
from macha.core.exceptions import (
    ApiRequestError,
    ApiResponseError,
    ApiRoutingError,
    InvalidJsonError,
)

logger = structlog.get_logger(__name__)

HTML_ERROR_MESSAGE = "API가 HTML을 반환했습니다. 라우팅 설정을 확인하세요."
INVALID_JSON_MESSAGE = "응답이 유효한 JSON이 아닙니다."


def _looks_like_html(text: str) -> bool:
    return "<!DOCTYPE" in text or "<html" in text


class DashboardApiClient:
    """Client for the dashboard API.

    Example:
        async with DashboardApiClient() as api:
            campaigns = await api.fetch_campaigns()
            mentions = await api.fetch_mentions(campaigns[0]["id"])
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API origin. Defaults to the configured ``api_url``; an
                empty string means the API is served from the same origin.
            settings: Settings to read the base URL from.
            transport: Optional httpx transport, used to fake the API in tests.
        """
        settings = settings or get_settings()
        self.base_url = (settings.api_url if base_url is None else base_url).rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "DashboardApiClient":
        """Enter async context manager."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=None, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def request(self, path: str, method: str = "GET", **options: Any) -> Any:
        """Call an API endpoint and return its parsed JSON body.

        Args:
            path: Endpoint path including any query string, e.g. ``/api/mentions?campaignId=x``.
            method: HTTP method.
            **options: Extra keyword arguments passed to ``httpx.AsyncClient.request``.

        Returns:
            Parsed JSON, unvalidated.

        Raises:
            ApiResponseError: On a non-2xx status. The message is the body's
                ``error`` field when present, else ``"API Error: <status>"``.
            ApiRoutingError: On a non-2xx status whose body is an HTML page.
            InvalidJsonError: On a 2xx status whose body is not JSON.
            ApiRequestError: When the request cannot be sent.
        """
        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json", **options.pop("headers", {})}
        client = self._ensure_client()

        logger.debug("api_request", url=url, method=method)

        try:
            response = await client.request(method, url, headers=headers, **options)
            text = response.text
        except httpx.HTTPError as e:
            logger.error("api_request_failed", url=url, error=str(e))
            raise ApiRequestError(f"Request failed: {e}", {"url": url}) from e

        logger.debug(
            "api_response",
            url=url,
            status_code=response.status_code,
            body_preview=text[:500],
        )

        if not response.is_success:
            raise self._error_for(response.status_code, text)

        try:
            return json.loads(text)
        except ValueError as e:
            logger.error("api_invalid_json", url=url, status_code=response.status_code)
            raise InvalidJsonError(INVALID_JSON_MESSAGE, {"url": url}) from e

    @staticmethod
    def _error_for(status_code: int, text: str) -> ApiResponseError:
        """Classify a non-success response body."""
        try:
            data = json.loads(text)
        except ValueError:
            if _looks_like_html(text):
                return ApiRoutingError(HTML_ERROR_MESSAGE, status_code)
            return ApiResponseError(f"API Error: {status_code}", status_code)

        message = data.get("error") if isinstance(data, dict) else None
        if not isinstance(message, str) or not message:
            message = f"API Error: {status_code}"
        return ApiResponseError(message, status_code)

    # -------------------------------------------------------------------------
    # Resource Methods
    # -------------------------------------------------------------------------

    async def fetch_campaigns(self) -> list[dict[str, Any]]:
        """Campaign list."""
        return await self.request("/api/campaigns")

    async def fetch_mentions(self, campaign_id: Optional[str] = None) -> list[dict[str, Any]]:
        """Mentions, for one campaign or across all campaigns."""
        query = f"?{urlencode({'campaignId': campaign_id})}" if campaign_id else ""
        return await self.request(f"/api/mentions{query}")

    async def fetch_seeding(self, campaign_id: str) -> list[dict[str, Any]]:
        """Campaign participants."""
        return await self.request(f"/api/seeding?{urlencode({'campaignId': campaign_id})}")

    async def fetch_static_content(self) -> dict[str, Any]:
        """AI analysis, metric definitions and source breakdowns."""
        return await self.request("/api/content")
