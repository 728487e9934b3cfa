"""Notion HTTP client for the content store.

Provides a thin async wrapper over the Notion REST API endpoints the
site uses: database queries, page retrieval and page creation.
"""

from typing import Any

import httpx
import structlog

from motoclub.infrastructure.config import settings

logger = structlog.get_logger()

# Largest page size the Notion query endpoint accepts.
MAX_PAGE_SIZE = 100


class NotionClientError(Exception):
    """Error from a Notion API call."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotionClient:
    """HTTP client for the Notion API.

    Handles authentication headers, cursor pagination and error
    normalization. One instance is shared by the content repository.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.notion.com/v1",
        notion_version: str = "2022-06-28",
        timeout: float = 10.0,
    ) -> None:
        """Initialize Notion client.

        Args:
            api_key: Integration token.
            base_url: API base URL.
            notion_version: Value of the Notion-Version header.
            timeout: Request timeout in seconds.
        """
        self.api_key = api_key
        self.base_url = base_url
        self.notion_version = notion_version
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Notion-Version": self.notion_version,
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and decode the JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            json: Optional JSON body.

        Returns:
            Decoded response body.

        Raises:
            NotionClientError: On transport errors or non-2xx responses.
        """
        try:
            client = await self._get_client()
            response = await client.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.error(
                "Notion API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise NotionClientError(f"Request failed: {str(e)}") from e

        if response.status_code >= 400:
            raise NotionClientError(
                f"Notion API returned {response.status_code}: {response.text}",
                response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise NotionClientError(
                "Notion API returned a non-JSON body", response.status_code
            ) from e

    async def query_database(
        self,
        database_id: str,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        page_size: int = MAX_PAGE_SIZE,
    ) -> list[dict[str, Any]]:
        """Query every row of a database.

        Follows next_cursor until the API reports no more results.

        Args:
            database_id: Database to query.
            filter: Notion filter object.
            sorts: Notion sort objects.
            page_size: Rows per request, capped at 100.

        Returns:
            All result pages in API order.

        Raises:
            NotionClientError: On API error.
        """
        body: dict[str, Any] = {"page_size": min(page_size, MAX_PAGE_SIZE)}
        if filter:
            body["filter"] = filter
        if sorts:
            body["sorts"] = sorts

        results: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            request_body = {**body, "start_cursor": cursor} if cursor else dict(body)
            data = await self._request(
                "POST", f"/databases/{database_id}/query", json=request_body
            )
            results.extend(data.get("results", []))

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break

        logger.debug(
            "Queried Notion database",
            database_id=database_id,
            result_count=len(results),
        )
        return results

    async def retrieve_page(self, page_id: str) -> dict[str, Any] | None:
        """Get a page by ID.

        Args:
            page_id: Page identifier.

        Returns:
            Page object, or None if the page does not exist.

        Raises:
            NotionClientError: On API error (except 404).
        """
        try:
            return await self._request("GET", f"/pages/{page_id}")
        except NotionClientError as e:
            if e.status_code == 404:
                return None
            raise

    async def create_page(
        self, database_id: str, properties: dict[str, Any]
    ) -> dict[str, Any]:
        """Create a page in a database.

        Args:
            database_id: Parent database.
            properties: Notion property values.

        Returns:
            The created page object.

        Raises:
            NotionClientError: On API error.
        """
        return await self._request(
            "POST",
            "/pages",
            json={
                "parent": {"database_id": database_id},
                "properties": properties,
            },
        )


# Global client instance
_notion_client: NotionClient | None = None


def get_notion_client() -> NotionClient:
    """Get the Notion client singleton.

    Returns:
        NotionClient instance.
    """
    global _notion_client
    if _notion_client is None:
        _notion_client = NotionClient(
            api_key=settings.notion_api_key,
            base_url=settings.notion_base_url,
            notion_version=settings.notion_version,
            timeout=settings.notion_timeout_seconds,
        )
    return _notion_client


async def close_notion_client() -> None:
    """Close and forget the Notion client singleton."""
    global _notion_client
    if _notion_client is not None:
        await _notion_client.close()
        _notion_client = None
