import math

from swipewise.domain.models import Card, RecommendationSummary, ScoredCard, StrategyComparison
from swipewise.engine.matcher import default_multiplier


def _capacity(card: Card) -> tuple[float, float]:
    return -card.available_credit, card.utilization


def _apr(card: Card) -> float:
    return card.apr if card.apr is not None else math.inf


def rewards_sort_key(item: ScoredCard) -> tuple:
    card = item.card
    return (
        not item.recommendable,
        -(item.cashback or 0.0),
        *_capacity(card),
        -(card.grace_period_days or 0),
        _apr(card),
        card.display_name.lower(),
    )


def apr_sort_key(item: ScoredCard) -> tuple:
    card = item.card
    return (
        item.monthly_interest is None,
        item.monthly_interest or 0.0,
        _apr(card),
        *_capacity(card),
        -(card.grace_period_days or 0),
        -default_multiplier(card).multiplier,
        card.display_name.lower(),
    )


def grace_sort_key(item: ScoredCard) -> tuple:
    card = item.card
    return (
        not item.recommendable,
        -(item.float_days or 0),
        -(item.payment_due.toordinal() if item.payment_due else 0),
        *_capacity(card),
        -default_multiplier(card).multiplier,
        _apr(card),
        card.display_name.lower(),
    )


def _best(ranked: list[ScoredCard]) -> ScoredCard | None:
    return next((item for item in ranked if item.recommendable), None)


def summarize(comparison: StrategyComparison) -> RecommendationSummary:
    cards = {}
    for ranked in (comparison.rewards, comparison.apr, comparison.grace_period):
        for item in ranked:
            cards.setdefault(item.card.card_id, item.card)

    return RecommendationSummary(
        best_rewards=_best(comparison.rewards),
        best_apr=_best(comparison.apr),
        best_grace_period=_best(comparison.grace_period),
        cards_with_balance=sum(1 for card in cards.values() if card.has_balance),
        cards_with_grace_period=sum(1 for card in cards.values() if not card.has_balance),
    )
