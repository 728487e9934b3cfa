"""Shared fixtures for Vegan Moto Club tests."""

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

import motoclub.content.repository as repository_module
import motoclub.infrastructure.notion_client as notion_module
import motoclub.suggestions as suggestions_module
from motoclub.api.dependencies import get_gate, get_repository
from motoclub.content.models import BlogPost, Event, Product
from motoclub.content.repository import ContentRepository
from motoclub.main import app
from motoclub.suggestions import RateLimiter, SubmissionGate


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset global singletons and dependency overrides around each test."""
    repository_module._content_repository = None
    notion_module._notion_client = None
    suggestions_module._submission_gate = None
    yield
    app.dependency_overrides.clear()
    repository_module._content_repository = None
    notion_module._notion_client = None
    suggestions_module._submission_gate = None


# ============================================================================
# Record Fixtures
# ============================================================================


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for products with sensible defaults."""
    counter = {"n": 0}

    def factory(**overrides: Any) -> Product:
        counter["n"] += 1
        values: dict[str, Any] = {
            "id": f"prod-{counter['n']}",
            "name": f"Product {counter['n']}",
            "brand": "Acme",
            "price": 100.0,
        }
        values.update(overrides)
        return Product(**values)

    return factory


@pytest.fixture
def catalog(make_product) -> list[Product]:
    """A small mixed catalog in store order."""
    return [
        make_product(
            id="glove-a",
            name="Glove A",
            brand="Acme",
            price=80,
            categories=["Gloves"],
            genders=["Men"],
            riding_styles=["Touring"],
            staff_favorite=True,
            last_edited_time="2026-03-02T10:00:00.000Z",
        ),
        make_product(
            id="glove-b",
            name="Glove B",
            brand="Acme",
            price=40,
            categories=["Gloves"],
            genders=["Women"],
            riding_styles=["Sport", "Touring"],
            last_edited_time="2026-03-05T10:00:00.000Z",
        ),
        make_product(
            id="jacket-c",
            name="Jacket C",
            brand="Zed",
            price=40,
            categories=["Jackets"],
            genders=["Men & Women"],
            riding_styles=["Adventure"],
            staff_favorite=True,
            last_edited_time="2026-01-20T10:00:00.000Z",
        ),
    ]


@pytest.fixture
def events() -> list[Event]:
    """Events ordered by start date."""
    return [
        Event(id="ev-1", name="Spring Ride", start_date="2026-04-01"),
        Event(
            id="ev-2",
            name="Moto Weekend",
            start_date="2026-05-09",
            end_date="2026-05-10",
            price="$20",
        ),
    ]


@pytest.fixture
def blog_posts() -> list[BlogPost]:
    """Published blog posts."""
    return [
        BlogPost(
            id="post-1",
            title="Choosing Vegan Gloves",
            content="Synthetic leather has come a long way.",
            publish_date="2026-02-01",
        ),
    ]


# ============================================================================
# Notion Page Fixtures
# ============================================================================


@pytest.fixture
def notion_product_page() -> dict[str, Any]:
    """A products database page as returned by the Notion API."""
    return {
        "object": "page",
        "id": "page-product-1",
        "created_time": "2026-01-01T00:00:00.000Z",
        "last_edited_time": "2026-03-01T12:00:00.000Z",
        "properties": {
            "Name of product": {
                "type": "title",
                "title": [{"plain_text": "Storm "}, {"plain_text": "Jacket"}],
            },
            "Brand": {"type": "rich_text", "rich_text": [{"plain_text": "Zed"}]},
            "Category": {"type": "select", "select": {"name": "Jackets"}},
            "Level of Protection": {"type": "select", "select": {"name": "CE AA"}},
            "Gender": {"type": "select", "select": {"name": "Unisex"}},
            "Price": {"type": "number", "number": 349.5},
            "Description": {
                "type": "rich_text",
                "rich_text": [{"plain_text": "Four-season textile jacket."}],
            },
            "URL": {
                "type": "rich_text",
                "rich_text": [{"plain_text": "https://zed.example/storm"}],
            },
            "Photos": {
                "type": "files",
                "files": [
                    {"type": "external", "external": {"url": "https://img.example/1.jpg"}},
                    {"type": "file", "file": {"url": "https://img.example/2.jpg"}},
                    {"type": "unknown"},
                ],
            },
            "Riding style": {
                "type": "multi_select",
                "multi_select": [{"name": "Touring"}, {"name": "Adventure"}],
            },
            "Season": {"type": "multi_select", "multi_select": [{"name": "Winter"}]},
            "Level of Waterproof": {"type": "select", "select": {"name": "Waterproof"}},
            "Materials": {
                "type": "multi_select",
                "multi_select": [{"name": "Cordura"}],
            },
            "Vegan Verified": {"type": "select", "select": {"name": "Verified"}},
            "Staff favorite": {"type": "checkbox", "checkbox": True},
        },
    }


@pytest.fixture
def notion_event_page() -> dict[str, Any]:
    """An events database page."""
    return {
        "object": "page",
        "id": "page-event-1",
        "properties": {
            "Name of event": {"type": "title", "title": [{"plain_text": "Spring Ride"}]},
            "Date": {"type": "date", "date": {"start": "2026-04-01", "end": None}},
            "Location": {"type": "rich_text", "rich_text": [{"plain_text": "Portland"}]},
            "Price": {"type": "rich_text", "rich_text": []},
        },
    }


@pytest.fixture
def notion_blog_page() -> dict[str, Any]:
    """A blog database page."""
    return {
        "object": "page",
        "id": "page-blog-1",
        "created_time": "2026-02-01T08:00:00.000Z",
        "properties": {
            "Name": {"type": "title", "title": [{"plain_text": "Why Vegan Gear"}]},
            "Description": {
                "type": "rich_text",
                "rich_text": [{"plain_text": "A short intro."}],
            },
            "Thumbnail Image": {
                "type": "files",
                "files": [
                    {"type": "external", "external": {"url": "https://img.example/b.jpg"}}
                ],
            },
        },
    }


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def mock_notion() -> MagicMock:
    """A Notion client with async methods mocked."""
    client = MagicMock()
    client.query_database = AsyncMock(return_value=[])
    client.retrieve_page = AsyncMock(return_value=None)
    client.create_page = AsyncMock(return_value={"id": "new-page"})
    client.close = AsyncMock()
    return client


@pytest.fixture
def fake_repository(catalog, events, blog_posts) -> MagicMock:
    """Content repository double serving the sample records."""
    repo = MagicMock(spec=ContentRepository)
    repo.list_products = AsyncMock(return_value=catalog)
    repo.list_events = AsyncMock(return_value=events)
    repo.list_blog_posts = AsyncMock(return_value=blog_posts)
    repo.get_product = AsyncMock(
        side_effect=lambda pid: next((p for p in catalog if p.id == pid), None)
    )
    repo.get_blog_post = AsyncMock(
        side_effect=lambda pid: next((p for p in blog_posts if p.id == pid), None)
    )
    repo.submit_suggestion = AsyncMock(return_value="new-page")
    return repo


@pytest.fixture
def client(fake_repository) -> TestClient:
    """Test client wired to the fake repository and a fresh gate."""
    gate = SubmissionGate(
        limiter=RateLimiter(max_requests=5, window_seconds=3600),
        writer=fake_repository,
        min_elapsed_ms=2000,
    )
    app.dependency_overrides[get_repository] = lambda: fake_repository
    app.dependency_overrides[get_gate] = lambda: gate
    return TestClient(app)
