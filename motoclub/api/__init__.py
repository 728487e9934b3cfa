"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from motoclub.api.content import router as content_router
from motoclub.api.health import router as health_router
from motoclub.api.products import router as products_router
from motoclub.api.suggest import router as suggest_router

__all__ = [
    "content_router",
    "health_router",
    "products_router",
    "suggest_router",
]
