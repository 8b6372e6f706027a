"""Merchant name to category classification.

Resolution runs in tiers and stops at the first one that clears its floor:
cache, merchant category code, keyword scoring, an optional caller-supplied
hint, and finally an explicit "no category" result. Nothing here raises on
bad input; unusable names simply fall through to the last tier.
"""

import logging
import re
import unicodedata
from typing import Any, Iterable

from pydantic import ValidationError

from swipewise.catalog.categories import CategoryCatalog, default_catalog, parse_code
from swipewise.catalog.codes import CodeMapper, default_mapper
from swipewise.config import settings
from swipewise.domain.models import Category, ClassificationResult, ClassificationSource, ExternalHint
from swipewise.nlp.cache import BoundedCache

logger = logging.getLogger(__name__)

NAME_MATCH_SCORE = 1.0
WHOLE_WORD_BASE = 0.80
WHOLE_WORD_SPAN = 0.15
PARTIAL_BASE = 0.60
PARTIAL_SPAN = 0.05
PARTIAL_MIN_LENGTH = 5
SPECIFICITY_LENGTH = 12
EXTRA_HIT_BONUS = 0.02
MAX_KEYWORD_SCORE = 0.99

_APOSTROPHES = str.maketrans("", "", "'’`")
_WHITESPACE = re.compile(r"\s+")


def normalize_merchant(text: Any) -> str:
    if not isinstance(text, str):
        return ""
    text = unicodedata.normalize("NFKD", text)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.lower().translate(_APOSTROPHES)
    return _WHITESPACE.sub(" ", text).strip()


def _whole_word(phrase: str) -> re.Pattern[str]:
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)")


class _CategoryMatcher:
    """Precompiled phrases for one category."""

    def __init__(self, category: Category):
        self.category = category
        name = normalize_merchant(category.name)
        self.names = [(name, _whole_word(name))] if name else []
        # bare id scores as a keyword; only the display name counts as a name hit
        phrases = [category.id.replace("_", " "), *category.keywords]
        keywords = dict.fromkeys(normalize_merchant(kw) for kw in phrases)
        self.keywords = [(kw, _whole_word(kw)) for kw in keywords if kw]

    def score(self, text: str) -> tuple[float, str | None]:
        for name, pattern in self.names:
            if name in text and pattern.search(text):
                return NAME_MATCH_SCORE, name

        best, best_keyword, hits = 0.0, None, 0
        for keyword, pattern in self.keywords:
            if keyword not in text:
                continue
            specificity = min(len(keyword), SPECIFICITY_LENGTH) / SPECIFICITY_LENGTH
            if pattern.search(text):
                weight = WHOLE_WORD_BASE + WHOLE_WORD_SPAN * specificity
            elif len(keyword) >= PARTIAL_MIN_LENGTH:
                weight = PARTIAL_BASE + PARTIAL_SPAN * specificity
            else:
                continue
            hits += 1
            if weight > best:
                best, best_keyword = weight, keyword

        if hits == 0:
            return 0.0, None
        return min(best + EXTRA_HIT_BONUS * (hits - 1), MAX_KEYWORD_SCORE), best_keyword


class MerchantClassifier:
    def __init__(
        self,
        catalog: CategoryCatalog | None = None,
        code_mapper: CodeMapper | None = None,
        cache_size: int | None = None,
        code_threshold: float | None = None,
        keyword_threshold: float | None = None,
        hint_max_confidence: float | None = None,
    ):
        self.catalog = catalog or default_catalog
        if code_mapper is None:
            code_mapper = default_mapper if catalog is None else CodeMapper(self.catalog)
        self.code_mapper = code_mapper
        self.code_threshold = settings.code_confidence_threshold if code_threshold is None else code_threshold
        self.keyword_threshold = (
            settings.keyword_confidence_threshold if keyword_threshold is None else keyword_threshold
        )
        self.hint_max_confidence = (
            settings.external_hint_max_confidence if hint_max_confidence is None else hint_max_confidence
        )
        self._cache: BoundedCache[ClassificationResult] = BoundedCache(
            cache_size or settings.classifier_cache_size
        )
        self._matchers = [_CategoryMatcher(category) for category in self.catalog.all_categories()]

    def classify(
        self,
        merchant_name: str | None,
        code: Any = None,
        hint: ExternalHint | dict | None = None,
    ) -> ClassificationResult:
        name = normalize_merchant(merchant_name)
        parsed_code = parse_code(code)
        key = (name, parsed_code)

        cached = self._cache.get(key)
        if cached is not None:
            return cached.model_copy(update={"source": ClassificationSource.CACHED})

        result = None
        if parsed_code is not None:
            result = self._classify_by_code(parsed_code)
        if result is None and name:
            result = self._classify_by_keywords(name, merchant_name)

        if result is not None:
            self._cache.set(key, result)
            return result

        if hint is not None:
            hinted = self._classify_by_hint(hint)
            if hinted is not None:
                return hinted

        if not name and parsed_code is None:
            return self._no_match("No merchant name provided")
        return self._no_match(f"Could not classify {merchant_name!r}", parsed_code)

    def classify_many(self, merchants: Iterable[str | None] | None) -> list[ClassificationResult]:
        if merchants is None:
            return []
        return [self.classify(merchant) for merchant in merchants]

    def can_classify(self, merchant_name: str | None) -> bool:
        return self.classify(merchant_name).category_id is not None

    def suggest_categories(self, partial_name: str | None) -> list[ClassificationResult]:
        if len(normalize_merchant(partial_name)) < 2:
            return []
        result = self.classify(partial_name)
        return [result] if result.category_id else []

    def supported_categories(self) -> list[Category]:
        return self.catalog.all_categories()

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_stats(self) -> dict[str, int]:
        return self._cache.stats()

    def _classify_by_code(self, code: int) -> ClassificationResult | None:
        match = self.code_mapper.classify(code)
        if match is None:
            return None
        if match.confidence < self.code_threshold:
            logger.debug(
                "Code %s -> %s below threshold (%.2f < %.2f)",
                code, match.category_id, match.confidence, self.code_threshold,
            )
            return None

        category = self.catalog.get_category(match.category_id)
        return ClassificationResult(
            category_id=category.id,
            category_name=category.name,
            confidence=match.confidence,
            source=ClassificationSource.NUMERIC_CODE,
            explanation=f"Classified as {category.name} from merchant code {code}",
            code=code,
        )

    def _classify_by_keywords(self, text: str, merchant_name: str) -> ClassificationResult | None:
        best_category, best_score, best_phrase = None, 0.0, None
        for matcher in self._matchers:
            score, phrase = matcher.score(text)
            # strict comparison keeps the earlier category on ties
            if score > best_score:
                best_category, best_score, best_phrase = matcher.category, score, phrase

        if best_category is None:
            return None
        if best_score < self.keyword_threshold:
            logger.debug(
                "Best keyword match for %r is %s at %.2f, below %.2f",
                text, best_category.id, best_score, self.keyword_threshold,
            )
            return None

        return ClassificationResult(
            category_id=best_category.id,
            category_name=best_category.name,
            confidence=round(best_score, 4),
            source=ClassificationSource.KEYWORD,
            explanation=f"Matched {merchant_name.strip()!r} to {best_category.name} on {best_phrase!r}",
        )

    def _classify_by_hint(self, hint: ExternalHint | dict) -> ClassificationResult | None:
        if not isinstance(hint, ExternalHint):
            try:
                hint = ExternalHint.model_validate(hint)
            except ValidationError:
                logger.debug("Ignoring malformed external hint: %r", hint)
                return None

        category = self.catalog.get_category(hint.category_id)
        if category is None or hint.confidence <= 0:
            return None

        return ClassificationResult(
            category_id=category.id,
            category_name=category.name,
            confidence=min(hint.confidence, self.hint_max_confidence),
            source=ClassificationSource.EXTERNAL,
            explanation=f"Using external suggestion {category.name}; no keyword or code match",
        )

    @staticmethod
    def _no_match(reason: str, code: int | None = None) -> ClassificationResult:
        return ClassificationResult(
            category_id=None,
            category_name=None,
            confidence=0.0,
            source=ClassificationSource.DEFAULT,
            explanation=reason,
            code=code,
        )
