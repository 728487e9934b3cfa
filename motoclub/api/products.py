"""Product API endpoints.

Provides the filtered, paginated catalog listing and product details.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from motoclub.api.dependencies import get_repository
from motoclub.api.schemas import (
    ErrorResponse,
    ProductFacets,
    ProductListResponse,
    ProductSchema,
    product_to_schema,
)
from motoclub.catalog import (
    FilterCriteria,
    facet_values,
    filter_products,
    page_count,
    paginate,
)
from motoclub.content.repository import ContentRepository
from motoclub.infrastructure.config import settings

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
    description="Filter, sort by price and paginate the product catalog.",
)
async def list_products(
    repository: Annotated[ContentRepository, Depends(get_repository)],
    search: Annotated[str | None, Query(description="Text in name or brand")] = None,
    brand: Annotated[str | None, Query()] = None,
    category: Annotated[str | None, Query()] = None,
    gender: Annotated[list[str] | None, Query()] = None,
    riding_style: Annotated[list[str] | None, Query()] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> ProductListResponse:
    """List products matching the filters.

    Clients must send page=1 whenever any filter changes; a page past
    the end returns no items rather than an error.

    Args:
        repository: Content repository.
        search: Case-insensitive text matched against name or brand.
        brand: Exact brand.
        category: Exact category.
        gender: Accepted genders (repeatable).
        riding_style: Accepted riding styles (repeatable).
        page: Page number (1-based).
        page_size: Items per page.

    Returns:
        Page of products with facet options.
    """
    products = await repository.list_products()
    size = page_size or settings.default_page_size

    criteria = FilterCriteria(
        search=search,
        brand=brand,
        category=category,
        genders=frozenset(gender or ()),
        riding_styles=frozenset(riding_style or ()),
    )
    filtered = filter_products(products, criteria)
    items = paginate(filtered, size, page)

    return ProductListResponse(
        items=[product_to_schema(p) for p in items],
        total=len(filtered),
        total_products=len(products),
        page=page,
        page_size=size,
        page_count=page_count(len(filtered), size),
        has_more=page * size < len(filtered),
        facets=ProductFacets(
            brands=facet_values(products, "brand"),
            categories=facet_values(products, "categories"),
            genders=facet_values(products, "genders"),
            riding_styles=facet_values(products, "riding_styles"),
        ),
    )


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product details",
)
async def get_product(
    product_id: str,
    repository: Annotated[ContentRepository, Depends(get_repository)],
) -> ProductSchema:
    """Get a product by ID.

    Raises:
        HTTPException: If the product is not found.
    """
    product = await repository.get_product(product_id)

    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": f"Product not found: {product_id}",
            },
        )

    return product_to_schema(product)
