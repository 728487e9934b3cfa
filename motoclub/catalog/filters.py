"""Catalog filtering, facets and pagination.

Pure functions over an in-memory product list. Criteria combine with
AND across fields and OR within a multi-valued field; results are
ordered by ascending price.
"""

import math
import re
from dataclasses import dataclass, field, replace
from typing import Sequence, TypeVar

from motoclub.content.models import Product

T = TypeVar("T")

FACET_FIELDS = frozenset(
    {
        "brand",
        "categories",
        "genders",
        "riding_styles",
        "seasons",
        "materials",
        "protection_level",
        "waterproof_level",
        "vegan_verified",
    }
)


@dataclass(frozen=True)
class FilterCriteria:
    """Filter parameters for product browsing.

    Attributes:
        search: Case-insensitive text matched against name or brand.
        brand: Exact brand.
        category: Exact category tag.
        genders: Accepted genders; any one is enough.
        riding_styles: Accepted riding styles; any one is enough.
    """

    search: str | None = None
    brand: str | None = None
    category: str | None = None
    genders: frozenset[str] = field(default_factory=frozenset)
    riding_styles: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        """Whether no criterion constrains the result."""
        return not (
            self.search
            or self.brand
            or self.category
            or self.genders
            or self.riding_styles
        )


def gender_matches(tag: str, wanted: str) -> bool:
    """Check a gender tag against a requested gender.

    Tags may combine several genders ("Men & Women"), so a whole-word
    occurrence also counts. "Women" does not match "Men".
    """
    if tag == wanted:
        return True
    return re.search(rf"\b{re.escape(wanted)}\b", tag) is not None


def matches(product: Product, criteria: FilterCriteria) -> bool:
    """Check a single product against the criteria."""
    if criteria.search:
        needle = criteria.search.lower()
        if (
            needle not in product.name.lower()
            and needle not in product.brand.lower()
        ):
            return False

    if criteria.brand and product.brand != criteria.brand:
        return False

    if criteria.category and criteria.category not in product.categories:
        return False

    if criteria.genders and not any(
        gender_matches(tag, wanted)
        for wanted in criteria.genders
        for tag in product.genders
    ):
        return False

    if criteria.riding_styles and not any(
        style in product.riding_styles for style in criteria.riding_styles
    ):
        return False

    return True


def filter_products(
    products: Sequence[Product], criteria: FilterCriteria
) -> list[Product]:
    """Filter products and order them by price.

    Args:
        products: Full product list.
        criteria: Active filters.

    Returns:
        Matching products, cheapest first. Ties keep input order.
    """
    return sorted(
        (p for p in products if matches(p, criteria)),
        key=lambda p: p.price,
    )


def facet_values(products: Sequence[Product], field_name: str) -> list[str]:
    """Distinct values of a product field for filter controls.

    Args:
        products: Products to scan.
        field_name: Scalar or tag-list field name.

    Returns:
        Sorted unique non-blank values.

    Raises:
        ValueError: If the field is not a facet field.
    """
    if field_name not in FACET_FIELDS:
        raise ValueError(f"Unknown facet field: {field_name}")

    values: set[str] = set()
    for product in products:
        value = getattr(product, field_name)
        if isinstance(value, str):
            value = [value]
        values.update(v for v in value if v and v.strip())
    return sorted(values)


def paginate(items: Sequence[T], page_size: int, page: int) -> list[T]:
    """Slice one page out of a list.

    Args:
        items: Items to page through.
        page_size: Items per page.
        page: Page number (1-based).

    Returns:
        Items on the page; empty when the page is out of range.
    """
    if page < 1 or page_size < 1:
        return []
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for total items; at least one."""
    if page_size < 1:
        return 1
    return max(1, math.ceil(total / page_size))


@dataclass(frozen=True)
class BrowseState:
    """Filter and page state held by a catalog consumer.

    Any criteria change sends the consumer back to page 1 so a stale
    page number is never carried into a different result set.
    """

    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    page: int = 1

    def with_criteria(self, **changes: object) -> "BrowseState":
        """Return a state with updated criteria.

        Args:
            **changes: FilterCriteria fields to replace.

        Returns:
            New state; page is reset to 1 if the criteria changed.
        """
        for name in ("genders", "riding_styles"):
            if name in changes:
                changes[name] = frozenset(changes[name] or ())  # type: ignore[arg-type]
        criteria = replace(self.criteria, **changes)  # type: ignore[arg-type]
        if criteria == self.criteria:
            return self
        return BrowseState(criteria=criteria, page=1)

    def with_page(self, page: int) -> "BrowseState":
        """Return a state on another page with the same criteria."""
        return replace(self, page=page)

    def clear(self) -> "BrowseState":
        """Drop every criterion and return to page 1."""
        return BrowseState()
