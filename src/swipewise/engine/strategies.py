import logging
from datetime import date
from typing import Iterable

from swipewise.catalog.categories import CategoryCatalog
from swipewise.config import settings
from swipewise.domain.models import Card, ScoredCard, Strategy, StrategyComparison
from swipewise.engine.cycle import PaymentCycle
from swipewise.engine.matcher import find_multiplier
from swipewise.engine.selectors import apr_sort_key, grace_sort_key, rewards_sort_key

logger = logging.getLogger(__name__)

INELIGIBLE_SCORE = -1000.0
MONTHS_PER_YEAR = 12


def _money(value: float) -> str:
    return f"${value:,.2f}"


def _purchase_amount(amount: float | None) -> float:
    if amount is None or amount <= 0:
        return 0.0
    return float(amount)


def _carrying_balance(card: Card, strategy: Strategy) -> ScoredCard:
    return ScoredCard(
        card=card,
        strategy=strategy,
        score=INELIGIBLE_SCORE,
        recommendable=False,
        has_grace_period=False,
        explanation="Interest charges immediately on new purchases",
        warning=(
            f"Has {_money(card.current_balance)} balance, no grace period: "
            "interest accrues immediately on new purchases"
        ),
    )


def evaluate_rewards(
    card: Card,
    category: str | None,
    amount: float | None,
    subcategory: str | None = None,
    catalog: CategoryCatalog | None = None,
) -> ScoredCard:
    if card.has_balance:
        return _carrying_balance(card, Strategy.REWARDS)

    match = find_multiplier(card, category, subcategory, catalog=catalog)
    spend = _purchase_amount(amount)
    cashback = round(spend * match.multiplier / 100, 2)

    return ScoredCard(
        card=card,
        strategy=Strategy.REWARDS,
        score=cashback,
        recommendable=True,
        has_grace_period=True,
        explanation=f"Earn {_money(cashback)} cashback on {_money(spend)} purchase ({match.explanation})",
        multiplier=match.multiplier,
        cashback=cashback,
        annual_value=round(cashback * MONTHS_PER_YEAR, 2),
        match=match,
    )


def evaluate_apr(card: Card, amount: float | None) -> ScoredCard:
    balance = settings.default_interest_amount if amount is None else _purchase_amount(amount)

    if card.apr is None:
        logger.warning("Card %s has no APR on file", card.card_id)
        return ScoredCard(
            card=card,
            strategy=Strategy.LOW_APR,
            score=INELIGIBLE_SCORE,
            recommendable=True,
            has_grace_period=not card.has_balance,
            explanation="APR unknown, interest cost cannot be estimated",
            warning="APR not on file",
        )

    monthly = balance * (card.apr / MONTHS_PER_YEAR) / 100
    annual = balance * card.apr / 100
    if balance > 0:
        explanation = f"If you carry {_money(balance)} balance: {_money(monthly)}/month interest"
    else:
        explanation = f"{card.apr:g}% APR"

    return ScoredCard(
        card=card,
        strategy=Strategy.LOW_APR,
        score=-round(monthly, 4),
        recommendable=True,
        has_grace_period=not card.has_balance,
        explanation=explanation,
        apr=card.apr,
        monthly_interest=round(monthly, 4),
        annual_interest=round(annual, 4),
    )


def evaluate_grace_period(card: Card, purchase_date: date | None = None) -> ScoredCard:
    if card.has_balance:
        return _carrying_balance(card, Strategy.GRACE_PERIOD)

    cycle = PaymentCycle.from_card(card)
    if cycle is None:
        logger.warning("Card %s has no statement cycle on file", card.card_id)
        return ScoredCard(
            card=card,
            strategy=Strategy.GRACE_PERIOD,
            score=0.0,
            recommendable=True,
            has_grace_period=True,
            explanation="Statement cycle unknown, float cannot be estimated",
            warning="Statement close day or due date not on file",
            float_days=0,
        )

    purchase_date = purchase_date or date.today()
    float_days = cycle.float_days(purchase_date)
    return ScoredCard(
        card=card,
        strategy=Strategy.GRACE_PERIOD,
        score=float(float_days),
        recommendable=True,
        has_grace_period=True,
        explanation=f"{float_days} days to pay, maximize cash float",
        float_days=float_days,
        payment_due=cycle.due_date_for_float(purchase_date),
    )


def score_for_rewards(
    cards: Iterable[Card],
    category: str | None,
    amount: float | None,
    subcategory: str | None = None,
    catalog: CategoryCatalog | None = None,
) -> list[ScoredCard]:
    scored = [evaluate_rewards(card, category, amount, subcategory, catalog) for card in cards or []]
    scored.sort(key=rewards_sort_key)
    return scored


def score_for_apr(cards: Iterable[Card], amount: float | None = None) -> list[ScoredCard]:
    scored = [evaluate_apr(card, amount) for card in cards or []]
    scored.sort(key=apr_sort_key)
    return scored


def score_for_grace_period(cards: Iterable[Card], purchase_date: date | None = None) -> list[ScoredCard]:
    scored = [evaluate_grace_period(card, purchase_date) for card in cards or []]
    scored.sort(key=grace_sort_key)
    return scored


def score_all_strategies(
    cards: Iterable[Card],
    category: str | None,
    amount: float | None,
    purchase_date: date | None = None,
    subcategory: str | None = None,
    catalog: CategoryCatalog | None = None,
) -> StrategyComparison:
    cards = list(cards or [])
    return StrategyComparison(
        rewards=score_for_rewards(cards, category, amount, subcategory, catalog),
        apr=score_for_apr(cards, amount),
        grace_period=score_for_grace_period(cards, purchase_date),
    )
