import threading
import time

import pytest

from swipewise.domain.models import ClassificationSource, ExternalHint
from swipewise.nlp.cache import BoundedCache
from swipewise.nlp.classifier import MerchantClassifier, normalize_merchant


@pytest.fixture
def classifier() -> MerchantClassifier:
    return MerchantClassifier()


def test_code_tier_wins_for_whole_foods(classifier: MerchantClassifier) -> None:
    result = classifier.classify("Whole Foods Market", 5411)

    assert result.category_id == "groceries"
    assert result.confidence >= 0.9
    assert result.source == ClassificationSource.NUMERIC_CODE
    assert result.code == 5411


def test_code_tier_works_without_a_name(classifier: MerchantClassifier) -> None:
    result = classifier.classify("", "5812")

    assert result.category_id == "dining"
    assert result.source == ClassificationSource.NUMERIC_CODE


def test_code_below_threshold_falls_through_to_keywords() -> None:
    classifier = MerchantClassifier(code_threshold=0.95)

    result = classifier.classify("Whole Foods Market", 5411)

    assert result.category_id == "groceries"
    assert result.source == ClassificationSource.KEYWORD
    assert result.confidence == pytest.approx(0.9575)


@pytest.mark.parametrize(
    ("merchant", "expected"),
    [
        ("Starbucks", "dining"),
        ("Shell Oil 1234", "gas"),
        ("Trader Joe's", "groceries"),
        ("NETFLIX.COM", "streaming"),
        ("Uber Eats", "dining"),
        ("Costco Wholesale #123", "warehouse"),
        ("CVS/pharmacy", "drugstores"),
        ("The Home Depot", "home_improvement"),
    ],
)
def test_keyword_tier(classifier: MerchantClassifier, merchant: str, expected: str) -> None:
    result = classifier.classify(merchant)

    assert result.category_id == expected
    assert result.source == ClassificationSource.KEYWORD
    assert 0.7 <= result.confidence < 1.0


def test_category_name_outweighs_keywords(classifier: MerchantClassifier) -> None:
    result = classifier.classify("Warehouse Clubs of America")

    assert result.category_id == "warehouse"
    assert result.confidence == 1.0


def test_bare_category_id_scores_like_a_keyword(classifier: MerchantClassifier) -> None:
    result = classifier.classify("Local Groceries Co")

    assert result.category_id == "groceries"
    assert 0.7 <= result.confidence < 1.0


@pytest.mark.parametrize("merchant", ["SoCal Gas Bill", "PG&E Gas Company"])
def test_longer_utility_phrase_beats_category_id(classifier: MerchantClassifier, merchant: str) -> None:
    result = classifier.classify(merchant)

    assert result.category_id == "utilities"
    assert result.source == ClassificationSource.KEYWORD


def test_accents_are_folded(classifier: MerchantClassifier) -> None:
    result = classifier.classify("Café Rouge")

    assert result.category_id == "dining"
    assert normalize_merchant("Crème Brûlée Bistro") == "creme brulee bistro"


def test_keyword_inside_longer_word_is_not_enough(classifier: MerchantClassifier) -> None:
    result = classifier.classify("Chevronix")

    assert result.category_id is None
    assert result.source == ClassificationSource.DEFAULT


def test_repeat_classification_is_served_from_cache(classifier: MerchantClassifier) -> None:
    first = classifier.classify("Starbucks")
    second = classifier.classify("  STARBUCKS ")

    assert second.source == ClassificationSource.CACHED
    assert second.category_id == first.category_id
    assert second.confidence == first.confidence
    assert classifier.cache_stats()["hits"] == 1


def test_cache_key_includes_code(classifier: MerchantClassifier) -> None:
    classifier.classify("Whole Foods Market", 5411)

    assert classifier.classify("Whole Foods Market").source == ClassificationSource.KEYWORD
    assert classifier.classify("Whole Foods Market", "5411").source == ClassificationSource.CACHED


def test_clear_cache_resets_entries_and_stats(classifier: MerchantClassifier) -> None:
    classifier.classify("Starbucks")
    classifier.classify("Starbucks")
    classifier.clear_cache()

    assert classifier.cache_stats() == {"size": 0, "capacity": 1000, "hits": 0, "misses": 0}
    assert classifier.classify("Starbucks").source == ClassificationSource.KEYWORD


def test_cache_is_bounded() -> None:
    classifier = MerchantClassifier(cache_size=2)
    for merchant in ("Starbucks", "Shell", "Costco"):
        classifier.classify(merchant)

    assert classifier.cache_stats()["size"] == 2
    assert classifier.classify("Starbucks").source == ClassificationSource.KEYWORD
    assert classifier.classify("Costco").source == ClassificationSource.CACHED


@pytest.mark.parametrize("merchant", [None, "", "   ", "!!!@@@###", "寿司 🍣", "Ünïcödé Ltd", 12345, "\x00"])
def test_odd_input_never_raises(classifier: MerchantClassifier, merchant) -> None:
    result = classifier.classify(merchant)

    assert result.source in (ClassificationSource.DEFAULT, ClassificationSource.KEYWORD)
    if result.category_id is None:
        assert result.confidence == 0.0
        assert result.explanation


def test_missing_name_explains_itself(classifier: MerchantClassifier) -> None:
    assert classifier.classify(None).explanation == "No merchant name provided"


def test_unknown_code_is_carried_on_default_result(classifier: MerchantClassifier) -> None:
    result = classifier.classify("zzqx", 9999)

    assert result.category_id is None
    assert result.code == 9999


def test_external_hint_is_capped_and_not_cached(classifier: MerchantClassifier) -> None:
    hint = ExternalHint(category_id="travel", confidence=0.95)

    first = classifier.classify("zzqx holdings", hint=hint)
    second = classifier.classify("zzqx holdings", hint={"category_id": "travel", "confidence": 0.95})

    assert first.category_id == "travel"
    assert first.confidence == pytest.approx(0.6)
    assert first.source == ClassificationSource.EXTERNAL
    assert second.source == ClassificationSource.EXTERNAL


def test_external_hint_only_used_when_keywords_fail(classifier: MerchantClassifier) -> None:
    result = classifier.classify("Starbucks", hint=ExternalHint(category_id="travel", confidence=0.99))

    assert result.category_id == "dining"
    assert result.source == ClassificationSource.KEYWORD


@pytest.mark.parametrize(
    "hint",
    [
        ExternalHint(category_id="spaceships", confidence=0.9),
        ExternalHint(category_id="travel", confidence=0.0),
        {"category_id": "travel", "confidence": 7},
        "travel",
    ],
)
def test_unusable_hints_are_ignored(classifier: MerchantClassifier, hint) -> None:
    assert classifier.classify("zzqx holdings", hint=hint).category_id is None


def test_batch_helpers(classifier: MerchantClassifier) -> None:
    results = classifier.classify_many(["Starbucks", None, "Shell"])

    assert [r.category_id for r in results] == ["dining", None, "gas"]
    assert classifier.classify_many(None) == []
    assert classifier.can_classify("Kroger")
    assert not classifier.can_classify("zzqx")
    assert classifier.suggest_categories("s") == []
    assert [r.category_id for r in classifier.suggest_categories("Shell")] == ["gas"]
    assert len(classifier.supported_categories()) == 14


def test_batch_classification_is_fast(classifier: MerchantClassifier) -> None:
    merchants = [f"Merchant {i} Starbucks" for i in range(500)]

    started = time.perf_counter()
    classifier.classify_many(merchants)

    assert time.perf_counter() - started < 5


def test_normalize_merchant() -> None:
    assert normalize_merchant("  Trader   Joe’s ") == "trader joes"
    assert normalize_merchant("ＳＴＡＲＢＵＣＫＳ") == "starbucks"
    assert normalize_merchant(None) == ""


def test_bounded_cache_evicts_least_recently_used() -> None:
    cache: BoundedCache[int] = BoundedCache(capacity=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")
    cache.set("c", 3)

    assert "a" in cache
    assert "b" not in cache
    assert len(cache) == 2
    with pytest.raises(ValueError):
        BoundedCache(capacity=0)


def test_concurrent_classification_keeps_cache_bounded() -> None:
    classifier = MerchantClassifier(cache_size=5)
    merchants = ["Starbucks", "Shell", "Costco", "Kroger", "Netflix", "Walgreens", "Uber", "Hilton"]
    errors: list[Exception] = []

    def worker(offset: int) -> None:
        try:
            for i in range(300):
                result = classifier.classify(merchants[(i + offset) % len(merchants)])
                assert result.category_id is not None
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    stats = classifier.cache_stats()
    assert errors == []
    assert stats["size"] <= stats["capacity"] == 5
    assert stats["hits"] + stats["misses"] == 8 * 300
