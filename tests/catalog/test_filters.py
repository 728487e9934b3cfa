"""Tests for catalog filtering, facets and pagination."""

import pytest

from motoclub.catalog import (
    BrowseState,
    FilterCriteria,
    facet_values,
    filter_products,
    page_count,
    paginate,
)
from motoclub.catalog.filters import gender_matches


def ids(products) -> list[str]:
    return [p.id for p in products]


class TestFilterProducts:
    """Tests for filter_products."""

    def test_brand_filter_sorted_by_price(self, catalog) -> None:
        """Brand filter keeps only that brand, cheapest first."""
        result = filter_products(catalog, FilterCriteria(brand="Acme"))
        assert ids(result) == ["glove-b", "glove-a"]
        assert [p.price for p in result] == [40, 80]

    def test_search_matches_name_case_insensitive(self, catalog) -> None:
        """Search is a case-insensitive substring of the name."""
        result = filter_products(catalog, FilterCriteria(search="jacket"))
        assert ids(result) == ["jacket-c"]

    def test_search_matches_brand(self, catalog) -> None:
        """Search also matches the brand."""
        result = filter_products(catalog, FilterCriteria(search="ZED"))
        assert ids(result) == ["jacket-c"]

    def test_empty_search_imposes_no_constraint(self, catalog) -> None:
        """Empty or missing search returns every product."""
        for search in ("", None):
            result = filter_products(catalog, FilterCriteria(search=search))
            assert sorted(ids(result)) == sorted(ids(catalog))
        assert FilterCriteria(search="").is_empty

    def test_search_is_not_trimmed(self, catalog) -> None:
        """Surrounding whitespace is part of the search text."""
        assert filter_products(catalog, FilterCriteria(search=" jacket")) == []
        assert ids(filter_products(catalog, FilterCriteria(search="t c"))) == [
            "jacket-c"
        ]

    def test_whitespace_search_is_a_constraint(self, catalog) -> None:
        assert filter_products(catalog, FilterCriteria(search="   ")) == []
        assert not FilterCriteria(search="   ").is_empty

    def test_no_criteria_sorts_by_price_stable(self, catalog) -> None:
        """Ties in price keep input order."""
        result = filter_products(catalog, FilterCriteria())
        assert ids(result) == ["glove-b", "jacket-c", "glove-a"]

    def test_category_exact_match(self, catalog) -> None:
        """Category must equal one of the product's tags."""
        assert ids(filter_products(catalog, FilterCriteria(category="Jackets"))) == [
            "jacket-c"
        ]
        assert filter_products(catalog, FilterCriteria(category="Jack")) == []

    def test_genders_any_of(self, catalog) -> None:
        """Any requested gender is enough."""
        result = filter_products(
            catalog, FilterCriteria(genders=frozenset({"Women"}))
        )
        assert ids(result) == ["glove-b", "jacket-c"]

    def test_men_does_not_match_women(self, catalog) -> None:
        """Men matches its own tag and the combined tag, never Women."""
        result = filter_products(catalog, FilterCriteria(genders=frozenset({"Men"})))
        assert ids(result) == ["jacket-c", "glove-a"]

    def test_riding_styles_any_of(self, catalog) -> None:
        """Any requested riding style is enough."""
        result = filter_products(
            catalog, FilterCriteria(riding_styles=frozenset({"Sport", "Adventure"}))
        )
        assert ids(result) == ["glove-b", "jacket-c"]

    def test_fields_combine_with_and(self, catalog) -> None:
        """Result is the intersection of per-field matches."""
        criteria = FilterCriteria(
            brand="Acme",
            riding_styles=frozenset({"Touring"}),
            genders=frozenset({"Men"}),
        )
        assert ids(filter_products(catalog, criteria)) == ["glove-a"]

    def test_empty_list(self) -> None:
        """Empty input gives empty output."""
        assert filter_products([], FilterCriteria(brand="Acme")) == []

    def test_does_not_mutate_input(self, catalog) -> None:
        """Input list order is untouched."""
        before = ids(catalog)
        filter_products(catalog, FilterCriteria())
        assert ids(catalog) == before


class TestGenderMatches:
    """Tests for gender tag matching."""

    @pytest.mark.parametrize(
        "tag,wanted,expected",
        [
            ("Men", "Men", True),
            ("Men & Women", "Women", True),
            ("Men/Women", "Men", True),
            ("Women", "Men", False),
            ("Unisex", "Men", False),
        ],
    )
    def test_gender_matches(self, tag: str, wanted: str, expected: bool) -> None:
        """Whole-word match within combined tags."""
        assert gender_matches(tag, wanted) is expected


class TestFacetValues:
    """Tests for facet_values."""

    def test_brands_sorted_unique(self, catalog) -> None:
        assert facet_values(catalog, "brand") == ["Acme", "Zed"]

    def test_tag_lists_flattened(self, catalog) -> None:
        assert facet_values(catalog, "riding_styles") == [
            "Adventure",
            "Sport",
            "Touring",
        ]

    def test_blank_values_excluded(self, make_product) -> None:
        products = [make_product(brand=""), make_product(brand="  "), make_product()]
        assert facet_values(products, "brand") == ["Acme"]

    def test_unknown_field_rejected(self, catalog) -> None:
        with pytest.raises(ValueError):
            facet_values(catalog, "price")


class TestPaginate:
    """Tests for paginate and page_count."""

    def test_first_and_last_page(self) -> None:
        items = list(range(25))
        assert paginate(items, 10, 1) == list(range(10))
        assert paginate(items, 10, 3) == [20, 21, 22, 23, 24]

    def test_page_beyond_end_is_empty(self) -> None:
        assert paginate(list(range(25)), 10, 4) == []
        assert paginate([], 10, 1) == []

    def test_page_below_one_is_empty(self) -> None:
        assert paginate(list(range(5)), 10, 0) == []

    def test_page_count(self) -> None:
        assert page_count(25, 10) == 3
        assert page_count(20, 10) == 2
        assert page_count(0, 10) == 1


class TestBrowseState:
    """Tests for the consumer page-reset contract."""

    def test_criteria_change_resets_page(self) -> None:
        """Changing any criterion returns to page 1."""
        state = BrowseState().with_page(3)
        assert state.page == 3

        updated = state.with_criteria(brand="Acme")
        assert updated.page == 1
        assert updated.criteria.brand == "Acme"

    def test_multi_value_change_resets_page(self) -> None:
        state = BrowseState().with_criteria(genders=["Men"]).with_page(2)
        updated = state.with_criteria(genders=["Men", "Women"])
        assert updated.page == 1
        assert updated.criteria.genders == frozenset({"Men", "Women"})

    def test_unchanged_criteria_keep_page(self) -> None:
        state = BrowseState().with_criteria(brand="Acme").with_page(2)
        assert state.with_criteria(brand="Acme").page == 2

    def test_clear(self) -> None:
        state = BrowseState().with_criteria(search="glove").with_page(4)
        cleared = state.clear()
        assert cleared.page == 1
        assert cleared.criteria.is_empty
