"""API schemas for the Vegan Moto Club backend.

Pydantic models for request/response validation and serialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from motoclub.content.models import BlogPost, Event, Product


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors except the suggestion endpoint follow this format.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class PaginatedResponse(BaseModel):
    """Base paginated response."""

    total: int = Field(..., description="Number of items matching the filters")
    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Items per page")
    page_count: int = Field(..., description="Number of pages")
    has_more: bool = Field(..., description="Whether there are more pages")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product details."""

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    brand: str = Field(default="", description="Brand name")
    categories: list[str] = Field(default_factory=list, description="Category tags")
    protection_level: str = Field(default="", description="Level of protection")
    genders: list[str] = Field(default_factory=list, description="Gender tags")
    price: float = Field(..., ge=0, description="Price in dollars")
    description: str = Field(default="", description="Product description")
    url: str = Field(default="", description="External purchase URL")
    photos: list[str] = Field(default_factory=list, description="Photo URLs, primary first")
    primary_photo: str | None = Field(default=None, description="Card image URL")
    riding_styles: list[str] = Field(default_factory=list, description="Riding styles")
    seasons: list[str] = Field(default_factory=list, description="Seasons")
    waterproof_level: str = Field(default="", description="Level of waterproofing")
    materials: list[str] = Field(default_factory=list, description="Materials")
    vegan_verified: str = Field(default="", description="Vegan verification status")
    staff_favorite: bool = Field(default=False, description="Staff pick")
    last_edited_time: str = Field(default="", description="Last edit in the content store")


class ProductFacets(BaseModel):
    """Option lists for filter controls."""

    brands: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    genders: list[str] = Field(default_factory=list)
    riding_styles: list[str] = Field(default_factory=list)


class ProductListResponse(PaginatedResponse):
    """Filtered, paginated product list."""

    items: list[ProductSchema] = Field(..., description="Products on this page")
    total_products: int = Field(..., description="Number of products before filtering")
    facets: ProductFacets = Field(..., description="Filter options over all products")


# ============================================================================
# Event and Blog Schemas
# ============================================================================


class EventSchema(BaseModel):
    """Community event."""

    id: str
    name: str
    start_date: str = ""
    end_date: str = ""
    is_multi_day: bool = False
    description: str = ""
    location: str = ""
    url: str = ""
    price: str = "Free"


class EventListResponse(BaseModel):
    """All events ordered by start date."""

    items: list[EventSchema]
    total: int


class BlogPostSchema(BaseModel):
    """Blog post."""

    id: str
    title: str
    content: str = ""
    publish_date: str = ""
    featured_image: str = ""


class BlogPostListResponse(BaseModel):
    """All blog posts."""

    items: list[BlogPostSchema]
    total: int


class HomeResponse(BaseModel):
    """Landing page data."""

    staff_picks: list[ProductSchema]
    upcoming_events: list[EventSchema]
    last_updated: str | None = Field(
        default=None, description="Most recent product edit time"
    )


# ============================================================================
# Suggestion Schemas
# ============================================================================


class SuggestionBody(BaseModel):
    """Suggest-a-product form submission.

    Fields are untyped so that a malformed payload still reaches the
    submission gate, which rate limits before judging content.
    """

    url: Any = Field(default=None, description="Suggested product URL")
    website: Any = Field(
        default=None, description="Honeypot field; real users leave it empty"
    )
    elapsed_ms: Any = Field(
        default=None, description="Milliseconds between form render and submit"
    )


class SuggestionSuccess(BaseModel):
    """Suggestion accepted."""

    success: bool = True


class SuggestionError(BaseModel):
    """Suggestion rejected."""

    error: str


# ============================================================================
# Converters
# ============================================================================


def product_to_schema(product: Product) -> ProductSchema:
    """Convert Product record to response schema."""
    return ProductSchema(
        id=product.id,
        name=product.name,
        brand=product.brand,
        categories=product.categories,
        protection_level=product.protection_level,
        genders=product.genders,
        price=product.price,
        description=product.description,
        url=product.url,
        photos=product.photos,
        primary_photo=product.primary_photo,
        riding_styles=product.riding_styles,
        seasons=product.seasons,
        waterproof_level=product.waterproof_level,
        materials=product.materials,
        vegan_verified=product.vegan_verified,
        staff_favorite=product.staff_favorite,
        last_edited_time=product.last_edited_time,
    )


def event_to_schema(event: Event) -> EventSchema:
    """Convert Event record to response schema."""
    return EventSchema(
        id=event.id,
        name=event.name,
        start_date=event.start_date,
        end_date=event.end_date,
        is_multi_day=event.is_multi_day,
        description=event.description,
        location=event.location,
        url=event.url,
        price=event.price,
    )


def blog_post_to_schema(post: BlogPost) -> BlogPostSchema:
    """Convert BlogPost record to response schema."""
    return BlogPostSchema(
        id=post.id,
        title=post.title,
        content=post.content,
        publish_date=post.publish_date,
        featured_image=post.featured_image,
    )
