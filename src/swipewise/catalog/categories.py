import logging
from typing import Any, Iterable

from swipewise.catalog.definitions import CATEGORY_DEFINITIONS
from swipewise.domain.models import Category, category_key

logger = logging.getLogger(__name__)

EXPECTED_CATEGORY_COUNT = 14


class CatalogValidationError(ValueError):
    pass


def parse_code(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    return int(text) if text.isascii() and text.isdigit() else None


def build_category(definition: dict) -> Category:
    missing = [name for name in ("id", "name", "keywords") if not definition.get(name)]
    if missing:
        label = definition.get("id") or definition.get("name") or "<unnamed>"
        raise CatalogValidationError(f"Category {label!r} is missing required fields: {', '.join(missing)}")

    return Category(
        id=category_key(definition["id"]),
        name=definition["name"],
        icon=definition.get("icon", ""),
        description=definition.get("description", ""),
        keywords=tuple(dict.fromkeys(kw.strip().lower() for kw in definition["keywords"] if kw.strip())),
        aliases=tuple(dict.fromkeys(category_key(a) for a in definition.get("aliases", []) if category_key(a))),
        codes=tuple(int(code) for code in definition.get("codes", [])),
        subcategories=tuple(category_key(s) for s in definition.get("subcategories", [])),
        parent=category_key(definition["parent"]) if definition.get("parent") else None,
    )


class CategoryCatalog:
    """Immutable registry of merchant categories, validated once at construction."""

    def __init__(self, categories: Iterable[Category], expected_count: int | None = EXPECTED_CATEGORY_COUNT):
        self._categories: dict[str, Category] = {}
        for category in categories:
            if category.id in self._categories:
                raise CatalogValidationError(f"Duplicate category id: {category.id!r}")
            self._categories[category.id] = category

        if expected_count is not None and len(self._categories) != expected_count:
            raise CatalogValidationError(
                f"Expected {expected_count} categories, found {len(self._categories)}"
            )

        self._by_code: dict[int, Category] = {}
        for category in self._categories.values():
            if category.parent and category.parent not in self._categories:
                raise CatalogValidationError(
                    f"Category {category.id!r} refers to unknown parent {category.parent!r}"
                )
            for code in category.codes:
                owner = self._by_code.get(code)
                if owner is not None:
                    raise CatalogValidationError(
                        f"Code {code} is claimed by both {owner.id!r} and {category.id!r}"
                    )
                self._by_code[code] = category

        logger.debug("Loaded %d categories (%d codes)", len(self._categories), len(self._by_code))

    @classmethod
    def from_definitions(
        cls, definitions: Iterable[dict], expected_count: int | None = EXPECTED_CATEGORY_COUNT
    ) -> "CategoryCatalog":
        return cls((build_category(item) for item in definitions), expected_count=expected_count)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return category_key(category_id) in self._categories

    def get_category(self, category_id: str | None) -> Category | None:
        if not category_id:
            return None
        return self._categories.get(category_key(category_id))

    def all_categories(self) -> list[Category]:
        return list(self._categories.values())

    def find_by_keyword(self, text: str | None) -> Category | None:
        if not text or not isinstance(text, str):
            return None
        needle = text.strip().lower()
        if not needle:
            return None
        for category in self._categories.values():
            if needle in category.keywords:
                return category
        return None

    def find_by_code(self, code: Any) -> Category | None:
        parsed = parse_code(code)
        if parsed is None:
            return None
        return self._by_code.get(parsed)

    def find_by_alias(self, alias: str | None) -> Category | None:
        key = category_key(alias)
        if not key:
            return None
        for category in self._categories.values():
            if key in category.aliases:
                return category
        return None

    def find(self, query: Any) -> Category | None:
        """Resolve by id, then keyword, then reward alias, then numeric code."""
        if query is None or query == "":
            return None
        text = str(query)
        return (
            self.get_category(text)
            or self.find_by_keyword(text)
            or self.find_by_alias(text)
            or self.find_by_code(text)
        )

    def parent_of_subcategory(self, subcategory_id: str | None) -> Category | None:
        key = category_key(subcategory_id)
        if not key:
            return None
        for category in self._categories.values():
            if key in category.subcategories:
                return category
        return None

    def display_name(self, category_id: str | None) -> str:
        category = self.get_category(category_id)
        if category is None:
            return "Unknown Category"
        return f"{category.icon} {category.name}".strip()

    def are_compatible(self, first_id: str | None, second_id: str | None) -> bool:
        first = self.get_category(first_id)
        second = self.get_category(second_id)
        if first is None or second is None:
            return False
        return first.id == second.id or first.parent == second.id or second.parent == first.id


default_catalog = CategoryCatalog.from_definitions(CATEGORY_DEFINITIONS)
