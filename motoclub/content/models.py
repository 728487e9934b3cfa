"""Content records normalized from Notion pages.

Each record type knows how to build itself from a raw Notion page
object. Missing or malformed properties fall back to empty values.
"""

from dataclasses import dataclass, field
from typing import Any


# ============================================================================
# Property Helpers
# ============================================================================


def extract_text(rich_text: list[dict[str, Any]] | None) -> str:
    """Join the plain text of a rich text array."""
    return "".join(block.get("plain_text", "") for block in rich_text or [])


def file_url(file: dict[str, Any] | None) -> str | None:
    """Get the URL of a Notion file object.

    Args:
        file: File object, either externally hosted or uploaded.

    Returns:
        URL or None if the file has no usable URL.
    """
    if not file:
        return None
    if file.get("type") == "external":
        return (file.get("external") or {}).get("url")
    if file.get("type") == "file":
        return (file.get("file") or {}).get("url")
    return None


def _prop(properties: dict[str, Any], name: str) -> dict[str, Any]:
    return properties.get(name) or {}


def title_of(properties: dict[str, Any], name: str) -> str:
    """Read a title property."""
    return extract_text(_prop(properties, name).get("title"))


def text_of(properties: dict[str, Any], name: str) -> str:
    """Read a rich text property, accepting url and email shapes too."""
    prop = _prop(properties, name)
    if prop.get("type") in ("url", "email"):
        return prop.get(prop["type"]) or ""
    return extract_text(prop.get("rich_text"))


def select_of(properties: dict[str, Any], name: str) -> str:
    """Read a select property."""
    selected = _prop(properties, name).get("select") or {}
    return selected.get("name") or ""


def tags_of(properties: dict[str, Any], name: str) -> list[str]:
    """Read a tag property stored either as select or multi-select."""
    prop = _prop(properties, name)
    if prop.get("multi_select") is not None:
        return [tag["name"] for tag in prop["multi_select"] if tag.get("name")]
    selected = prop.get("select") or {}
    return [selected["name"]] if selected.get("name") else []


def number_of(properties: dict[str, Any], name: str) -> float:
    """Read a number property, treating missing values as zero."""
    value = _prop(properties, name).get("number")
    return float(value) if value is not None else 0.0


def files_of(properties: dict[str, Any], name: str) -> list[str]:
    """Read the URLs of a files property in display order."""
    urls = (file_url(f) for f in _prop(properties, name).get("files") or [])
    return [url for url in urls if url]


def date_range_of(properties: dict[str, Any], name: str) -> tuple[str, str]:
    """Read a date property as (start, end); end defaults to start."""
    date = _prop(properties, name).get("date") or {}
    start = date.get("start") or ""
    return start, date.get("end") or start


# ============================================================================
# Records
# ============================================================================


@dataclass
class Product:
    """A catalog entry."""

    id: str
    name: str
    brand: str = ""
    categories: list[str] = field(default_factory=list)
    protection_level: str = ""
    genders: list[str] = field(default_factory=list)
    price: float = 0.0
    description: str = ""
    url: str = ""
    photos: list[str] = field(default_factory=list)
    riding_styles: list[str] = field(default_factory=list)
    seasons: list[str] = field(default_factory=list)
    waterproof_level: str = ""
    materials: list[str] = field(default_factory=list)
    vegan_verified: str = ""
    staff_favorite: bool = False
    last_edited_time: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            self.price = 0.0

    @property
    def primary_photo(self) -> str | None:
        """First photo, used as the card image."""
        return self.photos[0] if self.photos else None

    @property
    def category(self) -> str:
        """Category tags as display text."""
        return ", ".join(self.categories)

    @property
    def gender(self) -> str:
        """Gender tags as display text."""
        return ", ".join(self.genders)

    @classmethod
    def from_notion_page(cls, page: dict[str, Any]) -> "Product":
        """Create from a Notion page object.

        Args:
            page: Page object from a products database.

        Returns:
            Product instance.
        """
        properties = page.get("properties") or {}
        return cls(
            id=page["id"],
            name=title_of(properties, "Name of product"),
            brand=text_of(properties, "Brand"),
            categories=tags_of(properties, "Category"),
            protection_level=select_of(properties, "Level of Protection"),
            genders=tags_of(properties, "Gender"),
            price=number_of(properties, "Price"),
            description=text_of(properties, "Description"),
            url=text_of(properties, "URL"),
            photos=files_of(properties, "Photos"),
            riding_styles=tags_of(properties, "Riding style"),
            seasons=tags_of(properties, "Season"),
            waterproof_level=select_of(properties, "Level of Waterproof"),
            materials=tags_of(properties, "Materials"),
            vegan_verified=select_of(properties, "Vegan Verified"),
            staff_favorite=bool(_prop(properties, "Staff favorite").get("checkbox")),
            last_edited_time=page.get("last_edited_time") or "",
        )


@dataclass
class Event:
    """A community event."""

    id: str
    name: str
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    location: str = ""
    url: str = ""
    price: str = "Free"

    def __post_init__(self) -> None:
        if not self.end_date:
            self.end_date = self.start_date
        if not self.price:
            self.price = "Free"

    @property
    def is_multi_day(self) -> bool:
        """Whether the event spans more than its start date."""
        return bool(self.end_date) and self.end_date != self.start_date

    @classmethod
    def from_notion_page(cls, page: dict[str, Any]) -> "Event":
        """Create from a Notion page object."""
        properties = page.get("properties") or {}
        start, end = date_range_of(properties, "Date")
        return cls(
            id=page["id"],
            name=title_of(properties, "Name of event"),
            start_date=start,
            end_date=end,
            description=text_of(properties, "Description"),
            location=text_of(properties, "Location"),
            url=text_of(properties, "URL"),
            price=text_of(properties, "Price"),
        )


@dataclass
class BlogPost:
    """A blog article."""

    id: str
    title: str
    content: str = ""
    publish_date: str = ""
    featured_image: str = ""

    @classmethod
    def from_notion_page(cls, page: dict[str, Any]) -> "BlogPost":
        """Create from a Notion page object.

        The publish date comes from the "Publish Date" property when the
        database has one, otherwise from the page creation time.
        """
        properties = page.get("properties") or {}
        publish_date, _ = date_range_of(properties, "Publish Date")
        thumbnails = _prop(properties, "Thumbnail Image").get("files") or []
        return cls(
            id=page["id"],
            title=title_of(properties, "Name"),
            content=text_of(properties, "Description"),
            publish_date=publish_date or page.get("created_time") or "",
            featured_image=file_url(thumbnails[0] if thumbnails else None) or "",
        )
