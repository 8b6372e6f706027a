"""Statement and payment-due date arithmetic.

A card can owe on two statements at once: the one that closed a cycle ago
(possibly already overdue) and the one that closed most recently. Both are
computed explicitly; float planning only ever looks forward.

Days of month beyond a month's length (31 in April, 30 in February) clamp to
the month's last day. Each month is derived from the configured day, so a
close day of 31 lands on Feb 28 and then back on Mar 31.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import Iterable

from swipewise.config import settings
from swipewise.domain.models import (
    ActiveObligations,
    Card,
    PaymentObligation,
    PaymentStatus,
    UpcomingPayment,
)

logger = logging.getLogger(__name__)


def clamp_day(year: int, month: int, day: int) -> date:
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def shift_month(value: date, months: int, day: int) -> date:
    """Move ``value`` by whole calendar months, landing on ``day`` (clamped)."""
    index = value.year * 12 + (value.month - 1) + months
    return clamp_day(index // 12, index % 12 + 1, day)


def format_day_of_month(day: int | None) -> str:
    if not day:
        return "not set"
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def grace_period_between(statement_close: date, payment_due: date) -> int:
    return (payment_due - statement_close).days


class PaymentCycle:
    def __init__(
        self,
        statement_close_day: int,
        payment_due_day: int | None = None,
        grace_period_days: int | None = None,
        due_soon_days: int | None = None,
        min_same_month_grace_days: int | None = None,
    ):
        if not 1 <= statement_close_day <= 31:
            raise ValueError(f"Statement close day must be 1-31, got {statement_close_day}")
        if payment_due_day is None and grace_period_days is None:
            raise ValueError("Either a payment due day or a grace period length is required")

        self.statement_close_day = statement_close_day
        self.payment_due_day = payment_due_day
        self.grace_period_days = grace_period_days
        self.due_soon_days = settings.due_soon_days if due_soon_days is None else due_soon_days
        self.min_same_month_grace_days = (
            settings.min_same_month_grace_days if min_same_month_grace_days is None else min_same_month_grace_days
        )

    @classmethod
    def from_card(cls, card: Card) -> "PaymentCycle | None":
        if card.statement_close_day is None or (card.payment_due_day is None and card.grace_period_days is None):
            logger.debug("Card %s has no usable statement cycle", card.card_id)
            return None
        return cls(card.statement_close_day, card.payment_due_day, card.grace_period_days)

    def most_recent_statement_close(self, reference: date) -> date:
        close = clamp_day(reference.year, reference.month, self.statement_close_day)
        if close <= reference:
            return close
        return shift_month(reference, -1, self.statement_close_day)

    def previous_statement_close(self, reference: date) -> date:
        return shift_month(self.most_recent_statement_close(reference), -1, self.statement_close_day)

    def next_statement_close(self, statement_close: date) -> date:
        return shift_month(statement_close, 1, self.statement_close_day)

    def due_date_for_statement(self, statement_close: date) -> date:
        if self.payment_due_day is not None:
            gap = self.payment_due_day - self.statement_close_day
            months = 0 if gap >= self.min_same_month_grace_days else 1
            return shift_month(statement_close, months, self.payment_due_day)
        return statement_close + timedelta(days=self.grace_period_days)

    def obligation(self, statement_close: date, reference: date, amount: float = 0.0) -> PaymentObligation:
        due = self.due_date_for_statement(statement_close)
        days = (due - reference).days
        if days < 0:
            status = PaymentStatus.OVERDUE
        elif days <= self.due_soon_days:
            status = PaymentStatus.DUE_SOON
        else:
            status = PaymentStatus.UPCOMING
        return PaymentObligation(
            statement_close=statement_close,
            payment_due=due,
            days_until_due=days,
            is_overdue=status is PaymentStatus.OVERDUE,
            is_due_soon=status is PaymentStatus.DUE_SOON,
            amount=amount,
            status=status,
        )

    def active_obligations(self, reference: date, amount_owed: float = 0.0) -> ActiveObligations:
        return ActiveObligations(
            previous=self.obligation(self.previous_statement_close(reference), reference, amount_owed),
            current=self.obligation(self.most_recent_statement_close(reference), reference, amount_owed),
        )

    def due_date_for_float(self, purchase_date: date) -> date:
        close = self.most_recent_statement_close(purchase_date)
        if purchase_date > close:
            close = self.next_statement_close(close)
        return self.due_date_for_statement(close)

    def float_days(self, purchase_date: date) -> int:
        return max(0, (self.due_date_for_float(purchase_date) - purchase_date).days)


def amount_owed(card: Card) -> float:
    if card.planned_payment_amount is not None:
        return card.planned_payment_amount
    return max(card.current_balance, 0.0)


def active_obligations(card: Card, reference: date | None = None) -> ActiveObligations | None:
    cycle = PaymentCycle.from_card(card)
    if cycle is None:
        return None
    return cycle.active_obligations(reference or date.today(), amount_owed(card))


def next_due_obligation(card: Card, reference: date | None = None) -> PaymentObligation | None:
    """The obligation to show first: the previous statement unless it is over a month stale."""
    obligations = active_obligations(card, reference)
    if obligations is None:
        return None
    if obligations.previous.days_until_due > -30:
        return obligations.previous
    return obligations.current


def upcoming_payments(
    cards: Iterable[Card], days_ahead: int | None = None, reference: date | None = None
) -> list[UpcomingPayment]:
    reference = reference or date.today()
    horizon = reference + timedelta(days=settings.upcoming_payment_window_days if days_ahead is None else days_ahead)

    payments = []
    for card in cards or []:
        if not card.has_balance:
            continue
        obligation = next_due_obligation(card, reference)
        if obligation is not None and obligation.payment_due <= horizon:
            payments.append(UpcomingPayment(card=card, obligation=obligation))

    payments.sort(key=lambda item: (not item.obligation.is_overdue, item.obligation.days_until_due))
    return payments


def payment_status_message(obligation: PaymentObligation | None) -> str:
    if obligation is None:
        return ""
    days = obligation.days_until_due
    if obligation.is_overdue:
        return f"Overdue by {abs(days)} day{'s' if abs(days) != 1 else ''}"
    if obligation.is_due_soon:
        return f"Due in {days} day{'s' if days != 1 else ''}"
    return f"Due {obligation.payment_due.isoformat()}"


def describe_cycle(card: Card, reference: date | None = None) -> str:
    cycle = PaymentCycle.from_card(card)
    if cycle is None:
        return "Payment schedule not configured"

    if cycle.payment_due_day is not None:
        schedule = (
            f"Statement closes on the {format_day_of_month(cycle.statement_close_day)}, "
            f"payment due on the {format_day_of_month(cycle.payment_due_day)}"
        )
    else:
        schedule = (
            f"Statement closes on the {format_day_of_month(cycle.statement_close_day)}, "
            f"payment due {cycle.grace_period_days} days later"
        )

    obligations = cycle.active_obligations(reference or date.today(), amount_owed(card))
    return (
        f"{schedule} | Previous statement: {obligations.previous.payment_due.isoformat()} "
        f"({obligations.previous.status.value}) | Next statement: "
        f"{obligations.current.payment_due.isoformat()} ({obligations.current.days_until_due} days)"
    )
