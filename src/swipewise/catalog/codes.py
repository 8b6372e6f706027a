"""Merchant category code (MCC) lookups.

Codes are the most reliable classification signal because they come from the
card network rather than from free text, so every known code carries a fixed,
high confidence.
"""

import logging
from typing import Any, Iterable

from swipewise.catalog.categories import CatalogValidationError, CategoryCatalog, parse_code, default_catalog
from swipewise.catalog.definitions import CATEGORY_DEFINITIONS
from swipewise.domain.models import CodeMatch, category_key

logger = logging.getLogger(__name__)

DEFAULT_CODE_CONFIDENCE = 0.9

CODE_CONFIDENCE: dict[int, float] = {
    int(code): float(confidence)
    for definition in CATEGORY_DEFINITIONS
    for code, confidence in definition.get("code_confidence", {}).items()
}


class CodeMapper:
    def __init__(
        self,
        catalog: CategoryCatalog | None = None,
        confidences: dict[int, float] | None = None,
        default_confidence: float = DEFAULT_CODE_CONFIDENCE,
    ):
        self.catalog = catalog or default_catalog
        self.default_confidence = default_confidence
        if confidences is None:
            confidences = {
                code: value for code, value in CODE_CONFIDENCE.items() if self.catalog.find_by_code(code)
            }
        self._confidences = dict(confidences)

        for code, confidence in self._confidences.items():
            if self.catalog.find_by_code(code) is None:
                raise CatalogValidationError(f"Confidence given for unmapped code {code}")
            if not 0 < confidence <= 1:
                raise CatalogValidationError(f"Confidence for code {code} must be in (0, 1], got {confidence}")

    def classify(self, code: Any) -> CodeMatch | None:
        parsed = parse_code(code)
        if parsed is None:
            return None
        category = self.catalog.find_by_code(parsed)
        if category is None:
            logger.debug("Code %s is not mapped to any category", parsed)
            return None
        return CodeMatch(category_id=category.id, confidence=self.confidence(parsed), code=parsed)

    def confidence(self, code: Any) -> float:
        parsed = parse_code(code)
        if parsed is None or self.catalog.find_by_code(parsed) is None:
            return 0.0
        return self._confidences.get(parsed, self.default_confidence)

    def codes_for(self, category_id: str | None) -> list[int]:
        category = self.catalog.get_category(category_key(category_id))
        return list(category.codes) if category else []


default_mapper = CodeMapper()


def classify_by_code(code: Any) -> CodeMatch | None:
    return default_mapper.classify(code)


def classify_many_by_code(codes: Iterable[Any] | None) -> list[CodeMatch | None]:
    if codes is None:
        return []
    return [default_mapper.classify(code) for code in codes]


def code_confidence(code: Any) -> float:
    return default_mapper.confidence(code)


def is_known_code(code: Any) -> bool:
    return default_mapper.classify(code) is not None


def codes_for_category(category_id: str | None) -> list[int]:
    return default_mapper.codes_for(category_id)


def most_confident_code(category_id: str | None) -> int | None:
    codes = codes_for_category(category_id)
    if not codes:
        return None
    # max() keeps the first code on ties, so catalog order decides.
    return max(codes, key=default_mapper.confidence)


def describe_code(code: Any) -> str:
    match = default_mapper.classify(code)
    if match is None:
        return f"Unknown code {code}"
    category = default_mapper.catalog.get_category(match.category_id)
    return f"{match.code}: {category.name}"
