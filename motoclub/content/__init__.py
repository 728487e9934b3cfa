"""Content store access.

Normalizes Notion pages into site records and provides cached,
fail-open reads plus the product suggestion write.
"""

from motoclub.content.exceptions import ContentError, ContentWriteError
from motoclub.content.models import BlogPost, Event, Product
from motoclub.content.repository import ContentRepository, get_content_repository

__all__ = [
    # Models
    "BlogPost",
    "Event",
    "Product",
    # Repository
    "ContentRepository",
    "get_content_repository",
    # Errors
    "ContentError",
    "ContentWriteError",
]
