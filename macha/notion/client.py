"""Notion database query client.

Thin async wrapper around the Notion REST API ``databases/{id}/query``
endpoint. Only the first page of results is ever requested; callers bound
the result size with ``page_size``.
"""

from typing import Any, Optional

import httpx
import structlog

from macha.config.settings import Settings, get_settings
from macha.core.exceptions import ConfigurationError, NotionQueryError

logger = structlog.get_logger(__name__)


class NotionClient:
    """Async client for querying Notion databases.

    The client carries no per-request state and is safe to share across
    concurrent requests. No timeout or retry is applied: a slow upstream
    holds the caller for as long as Notion takes.

    Example:
        async with NotionClient() as notion:
            page = await notion.query_database(database_id, page_size=100)
            for record in page["results"]:
                ...
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            token: Notion integration token. If not provided, loads from settings.
            settings: Settings to read the API URL and version from.
            transport: Optional httpx transport, used to fake Notion in tests.
        """
        self._settings = settings or get_settings()
        self._token = (token if token is not None else self._settings.notion_token.get_secret_value()).strip()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "NotionClient":
        """Enter async context manager."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._settings.notion_api_url,
                timeout=None,
                transport=self._transport,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Notion-Version": self._settings.notion_version,
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def query_database(
        self,
        database_id: str,
        *,
        filter: Optional[dict[str, Any]] = None,
        page_size: Optional[int] = None,
    ) -> dict[str, Any]:
        """Query a database and return the first page of results.

        Args:
            database_id: Notion database identifier.
            filter: Notion filter object, sent as-is.
            page_size: Maximum number of records to return (Notion caps at 100).

        Returns:
            Parsed query response with ``results``, ``has_more`` and ``next_cursor``.

        Raises:
            ConfigurationError: If no database id is configured.
            NotionQueryError: On transport failure or a non-2xx response.
        """
        if not database_id:
            raise ConfigurationError("Notion database id is not configured", "database_id")

        body: dict[str, Any] = {}
        if filter is not None:
            body["filter"] = filter
        if page_size is not None:
            body["page_size"] = page_size

        client = await self._ensure_client()

        logger.debug(
            "notion_query",
            database_id=database_id,
            filtered=filter is not None,
            page_size=page_size,
        )

        try:
            response = await client.post(f"/v1/databases/{database_id}/query", json=body)
        except httpx.RequestError as e:
            logger.error("notion_request_error", database_id=database_id, error=str(e))
            raise NotionQueryError(
                f"Request failed: {e}",
                details={"database_id": database_id},
            ) from e

        if response.status_code >= 400:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            message = error_data.get("message") or f"Notion API error {response.status_code}"
            logger.error(
                "notion_api_error",
                database_id=database_id,
                status_code=response.status_code,
                code=error_data.get("code"),
                error=message,
            )
            raise NotionQueryError(
                message,
                status=response.status_code,
                code=error_data.get("code"),
                details={"database_id": database_id},
            )

        data = response.json()
        logger.debug(
            "notion_query_complete",
            database_id=database_id,
            results=len(data.get("results", [])),
            has_more=data.get("has_more", False),
        )
        return data
