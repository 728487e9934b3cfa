"""Content repository backed by Notion databases.

Reads products, events and blog posts with time-based caching and a
fail-open policy: a content store outage yields empty listings rather
than errors. Also owns the single write path, product suggestions.
"""

from typing import Any, Awaitable, Callable, TypeVar

import structlog

from motoclub.content.exceptions import ContentWriteError
from motoclub.content.models import BlogPost, Event, Product
from motoclub.infrastructure.cache import TTLCache
from motoclub.infrastructure.config import settings
from motoclub.infrastructure.notion_client import (
    NotionClient,
    NotionClientError,
    get_notion_client,
)

logger = structlog.get_logger()

T = TypeVar("T")

# Errors that degrade a read to an empty result.
READ_ERRORS = (NotionClientError, AttributeError, KeyError, TypeError, ValueError)


class ContentRepository:
    """Read and write access to the site's content databases.

    Example usage:
        repo = get_content_repository()
        products = await repo.list_products()
    """

    def __init__(
        self,
        client: NotionClient,
        cache: TTLCache,
        products_db_id: str,
        events_db_id: str,
        blog_db_id: str,
    ) -> None:
        """Initialize repository.

        Args:
            client: Notion API client.
            cache: Cache for read results.
            products_db_id: Products database ID.
            events_db_id: Events database ID.
            blog_db_id: Blog posts database ID.
        """
        self.client = client
        self.cache = cache
        self.products_db_id = products_db_id
        self.events_db_id = events_db_id
        self.blog_db_id = blog_db_id

    async def _cached(
        self,
        key: tuple[str, ...],
        load: Callable[[], Awaitable[T]],
        fallback: T,
    ) -> T:
        """Return a cached value or load and cache it.

        Failed loads return the fallback and are not cached.
        """
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            value = await load()
        except READ_ERRORS as e:
            logger.error("Content read failed", key=list(key), error=str(e))
            return fallback

        if value is not None:
            self.cache.set(key, value)
        return value

    async def _query(
        self,
        database_id: str,
        title_property: str,
        sorts: list[dict[str, Any]] | None = None,
    ) -> list[dict[str, Any]]:
        if not database_id:
            logger.warning("Content database not configured", title_property=title_property)
            return []
        return await self.client.query_database(
            database_id,
            filter={"property": title_property, "title": {"is_not_empty": True}},
            sorts=sorts,
        )

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products(self) -> list[Product]:
        """List every product, most recently edited first.

        Returns:
            All products, or an empty list if the store is unavailable.
        """

        async def load() -> list[Product]:
            pages = await self._query(
                self.products_db_id,
                "Name of product",
                sorts=[{"timestamp": "last_edited_time", "direction": "descending"}],
            )
            return [Product.from_notion_page(page) for page in pages]

        return await self._cached(("products",), load, [])

    async def get_product(self, product_id: str) -> Product | None:
        """Get a product by ID.

        Args:
            product_id: Notion page ID.

        Returns:
            Product if found, None if missing or on failure.
        """

        async def load() -> Product | None:
            page = await self.client.retrieve_page(product_id)
            return Product.from_notion_page(page) if page else None

        return await self._cached(("product", product_id), load, None)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def list_events(self) -> list[Event]:
        """List events ordered by start date."""

        async def load() -> list[Event]:
            pages = await self._query(
                self.events_db_id,
                "Name of event",
                sorts=[{"property": "Date", "direction": "ascending"}],
            )
            return [Event.from_notion_page(page) for page in pages]

        return await self._cached(("events",), load, [])

    # ------------------------------------------------------------------
    # Blog
    # ------------------------------------------------------------------

    async def list_blog_posts(self) -> list[BlogPost]:
        """List blog posts."""

        async def load() -> list[BlogPost]:
            pages = await self._query(self.blog_db_id, "Name")
            return [BlogPost.from_notion_page(page) for page in pages]

        return await self._cached(("blog_posts",), load, [])

    async def get_blog_post(self, post_id: str) -> BlogPost | None:
        """Get a blog post by ID."""

        async def load() -> BlogPost | None:
            page = await self.client.retrieve_page(post_id)
            return BlogPost.from_notion_page(page) if page else None

        return await self._cached(("blog_post", post_id), load, None)

    # ------------------------------------------------------------------
    # Suggestions
    # ------------------------------------------------------------------

    async def submit_suggestion(self, title: str, url: str) -> str:
        """Create a product suggestion row in the products database.

        Args:
            title: Row title.
            url: Suggested product URL.

        Returns:
            ID of the created page.

        Raises:
            ContentWriteError: If the store rejects or cannot take the write.
        """
        if not self.products_db_id:
            raise ContentWriteError("Products database is not configured")

        try:
            page = await self.client.create_page(
                self.products_db_id,
                {
                    "Name of product": {"title": [{"text": {"content": title}}]},
                    "URL": {"url": url},
                },
            )
        except NotionClientError as e:
            raise ContentWriteError(
                "Failed to create suggestion",
                details={"status_code": e.status_code, "error": e.message},
            ) from e

        page_id = page.get("id", "")
        logger.info("Product suggestion stored", page_id=page_id, title=title)
        return page_id


# Global repository instance
_content_repository: ContentRepository | None = None


def get_content_repository() -> ContentRepository:
    """Get the content repository singleton.

    Returns:
        ContentRepository instance.
    """
    global _content_repository
    if _content_repository is None:
        _content_repository = ContentRepository(
            client=get_notion_client(),
            cache=TTLCache(ttl_seconds=settings.content_cache_ttl),
            products_db_id=settings.notion_products_db_id,
            events_db_id=settings.notion_events_db_id,
            blog_db_id=settings.notion_blog_db_id,
        )
    return _content_repository
