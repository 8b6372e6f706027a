import pytest
from pydantic import ValidationError

from swipewise.catalog.categories import (
    CatalogValidationError,
    CategoryCatalog,
    build_category,
    default_catalog,
)
from swipewise.catalog.definitions import CATEGORY_DEFINITIONS


def test_default_catalog_has_fourteen_categories_in_definition_order() -> None:
    ids = [category.id for category in default_catalog.all_categories()]

    assert len(default_catalog) == 14
    assert ids == [item["id"] for item in CATEGORY_DEFINITIONS]
    assert ids[0] == "dining"


def test_get_category_normalizes_lookup_key() -> None:
    assert default_catalog.get_category("Home Improvement").id == "home_improvement"
    assert default_catalog.get_category("  DINING ").id == "dining"
    assert default_catalog.get_category("spaceships") is None
    assert default_catalog.get_category(None) is None
    assert "groceries" in default_catalog


def test_find_by_keyword_matches_exact_keyword_only() -> None:
    assert default_catalog.find_by_keyword("Costco").id == "warehouse"
    assert default_catalog.find_by_keyword(" starbucks ").id == "dining"
    assert default_catalog.find_by_keyword("starbucks reserve roastery") is None
    assert default_catalog.find_by_keyword("") is None
    assert default_catalog.find_by_keyword(None) is None


def test_lookup_by_code_alias_and_generic_find() -> None:
    assert default_catalog.find_by_code(5411).id == "groceries"
    assert default_catalog.find_by_code("5541").id == "gas"
    assert default_catalog.find_by_code("not-a-code") is None
    assert default_catalog.find_by_alias("restaurants").id == "dining"
    assert default_catalog.find_by_alias("Gas Stations").id == "gas"

    assert default_catalog.find("travel").id == "travel"
    assert default_catalog.find("netflix").id == "streaming"
    assert default_catalog.find("supermarkets").id == "groceries"
    assert default_catalog.find("5912").id == "drugstores"
    assert default_catalog.find("") is None


def test_subcategory_parent_and_compatibility() -> None:
    assert default_catalog.parent_of_subcategory("hotel").id == "travel"
    assert default_catalog.parent_of_subcategory("nothing") is None
    assert default_catalog.are_compatible("streaming", "entertainment")
    assert default_catalog.are_compatible("entertainment", "streaming")
    assert default_catalog.are_compatible("dining", "dining")
    assert not default_catalog.are_compatible("dining", "travel")
    assert not default_catalog.are_compatible("dining", None)


def test_display_name() -> None:
    assert default_catalog.display_name("gas") == "⛽ Gas & Fuel"
    assert default_catalog.display_name("unknown") == "Unknown Category"


def test_categories_are_immutable() -> None:
    category = default_catalog.get_category("dining")
    with pytest.raises(ValidationError):
        category.name = "Food"


def _definition(category_id: str, **overrides) -> dict:
    definition = {"id": category_id, "name": category_id.title(), "keywords": [category_id]}
    definition.update(overrides)
    return definition


def test_catalog_rejects_wrong_category_count() -> None:
    with pytest.raises(CatalogValidationError, match="Expected 14"):
        CategoryCatalog.from_definitions([_definition("dining")])


def test_catalog_rejects_duplicate_ids() -> None:
    with pytest.raises(CatalogValidationError, match="Duplicate"):
        CategoryCatalog.from_definitions([_definition("dining"), _definition("Dining")], expected_count=None)


def test_catalog_rejects_unknown_parent() -> None:
    with pytest.raises(CatalogValidationError, match="unknown parent"):
        CategoryCatalog.from_definitions([_definition("streaming", parent="media")], expected_count=None)


def test_catalog_rejects_code_claimed_twice() -> None:
    definitions = [_definition("dining", codes=[5812]), _definition("bars", codes=[5812])]
    with pytest.raises(CatalogValidationError, match="5812"):
        CategoryCatalog.from_definitions(definitions, expected_count=None)


def test_build_category_requires_keywords() -> None:
    with pytest.raises(CatalogValidationError, match="keywords"):
        build_category({"id": "empty", "name": "Empty", "keywords": []})
