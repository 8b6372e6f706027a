import logging

from swipewise.catalog.categories import CategoryCatalog, default_catalog
from swipewise.domain.models import (
    DEFAULT_REWARD_KEY,
    ROTATING_REWARD_KEY,
    Card,
    MatchSource,
    RewardMatchResult,
    RewardValue,
    category_key,
)

logger = logging.getLogger(__name__)

MATCH_CONFIDENCE = {
    MatchSource.EXACT: 1.0,
    MatchSource.ALIAS: 0.9,
    MatchSource.PARENT: 0.8,
    MatchSource.ROTATING: 0.75,
    MatchSource.DEFAULT: 0.5,
}
FALLBACK_MULTIPLIER = 1.0


def _entry(card: Card, key: str | None) -> RewardValue | None:
    if not key:
        return None
    entry = card.reward_structure.get(key)
    if entry is None or entry.multiplier is None:
        return None
    return entry


def _result(card: Card, source: MatchSource, entry: RewardValue, key: str, reason: str) -> RewardMatchResult:
    explanation = f"{card.display_name}: {entry.multiplier:g}x {reason}"
    if entry.note:
        explanation = f"{explanation} ({entry.note})"
    return RewardMatchResult(
        multiplier=entry.multiplier,
        source=source,
        confidence=MATCH_CONFIDENCE[source],
        explanation=explanation,
        note=entry.note,
        matched_key=key,
    )


def _parent_match(
    card: Card, category_id: str, subcategory_id: str, catalog: CategoryCatalog
) -> RewardMatchResult | None:
    category = catalog.get_category(category_id)

    if subcategory_id and category is not None and subcategory_id in category.subcategories:
        key = f"{category_id}_{subcategory_id}"
        entry = _entry(card, key)
        if entry:
            return _result(card, MatchSource.PARENT, entry, key, f"on {subcategory_id} within {category_id}")

    if category is not None and category.parent:
        entry = _entry(card, category.parent)
        if entry:
            return _result(card, MatchSource.PARENT, entry, category.parent, f"via parent category {category.parent}")

    owner = catalog.parent_of_subcategory(category_id) if category is None else None
    if owner is not None:
        entry = _entry(card, owner.id)
        if entry:
            return _result(card, MatchSource.PARENT, entry, owner.id, f"via parent category {owner.id}")
    return None


def default_multiplier(card: Card) -> RewardMatchResult:
    entry = _entry(card, DEFAULT_REWARD_KEY)
    if entry:
        return _result(card, MatchSource.DEFAULT, entry, DEFAULT_REWARD_KEY, "base rate")
    return RewardMatchResult(
        multiplier=FALLBACK_MULTIPLIER,
        source=MatchSource.DEFAULT,
        confidence=MATCH_CONFIDENCE[MatchSource.DEFAULT],
        explanation=f"{card.display_name}: {FALLBACK_MULTIPLIER:g}x base rate (no default reward listed)",
    )


def find_multiplier(
    card: Card,
    category_id: str | None,
    subcategory_id: str | None = None,
    catalog: CategoryCatalog | None = None,
) -> RewardMatchResult:
    """Resolve the reward multiplier a card earns for a category.

    Tries, in order: exact key, the category's aliases, parent/subcategory
    entries, an active rotating bonus, and finally the card's default rate.
    """
    catalog = catalog or default_catalog
    category = category_key(category_id)
    subcategory = category_key(subcategory_id)

    if not category or category == DEFAULT_REWARD_KEY:
        return default_multiplier(card)

    entry = _entry(card, category)
    if entry:
        return _result(card, MatchSource.EXACT, entry, category, f"on {category}")

    known = catalog.get_category(category)
    if known is not None:
        for alias in known.aliases:
            entry = _entry(card, alias)
            if entry:
                return _result(card, MatchSource.ALIAS, entry, alias, f"on {alias} (covers {category})")

    parent = _parent_match(card, category, subcategory, catalog)
    if parent is not None:
        return parent

    rotating = _entry(card, ROTATING_REWARD_KEY)
    if rotating and category in rotating.active_categories:
        return _result(card, MatchSource.ROTATING, rotating, ROTATING_REWARD_KEY, f"rotating bonus active on {category}")

    logger.debug("No reward entry for %s on card %s, using default", category, card.card_id)
    return default_multiplier(card)


def reward_categories(card: Card) -> dict[str, float]:
    """Bonus categories on a card, i.e. entries that beat the 1x baseline."""
    return {
        key: entry.multiplier
        for key, entry in card.reward_structure.items()
        if key not in (DEFAULT_REWARD_KEY, ROTATING_REWARD_KEY)
        and entry.multiplier is not None
        and entry.multiplier > 1
    }


def best_category(card: Card) -> str | None:
    rewards = reward_categories(card)
    if not rewards:
        return None
    return max(rewards, key=rewards.get)


def has_reward_for(
    card: Card, category_id: str | None, minimum: float = 2, catalog: CategoryCatalog | None = None
) -> bool:
    match = find_multiplier(card, category_id, catalog=catalog)
    return match.source != MatchSource.DEFAULT and match.multiplier >= minimum
