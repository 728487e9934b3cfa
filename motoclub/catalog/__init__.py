"""Product catalog browsing.

Provides filtering, facet extraction and pagination over the product
list, plus the landing page highlights.
"""

from motoclub.catalog.filters import (
    BrowseState,
    FilterCriteria,
    facet_values,
    filter_products,
    page_count,
    paginate,
)
from motoclub.catalog.highlights import Highlights, build_highlights

__all__ = [
    # Filtering
    "BrowseState",
    "FilterCriteria",
    "facet_values",
    "filter_products",
    "page_count",
    "paginate",
    # Highlights
    "Highlights",
    "build_highlights",
]
