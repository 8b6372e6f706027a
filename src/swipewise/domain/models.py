import math
import re
from datetime import date
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_REWARD_KEY = "default"
ROTATING_REWARD_KEY = "rotating"

_KEY_SEPARATORS = re.compile(r"[\s\-]+")


def category_key(value: Any) -> str:
    """Normalize a category id or reward-definition key: 'Home Improvement' -> 'home_improvement'."""
    if value is None:
        return ""
    return _KEY_SEPARATORS.sub("_", str(value).strip().lower())


def _finite_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _whole_number(value: Any) -> int | None:
    number = _finite_float(value)
    if number is None or number != int(number):
        return None
    return int(number)


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str = ""
    description: str = ""
    keywords: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    codes: tuple[int, ...] = ()
    subcategories: tuple[str, ...] = ()
    parent: str | None = None


class RewardValue(BaseModel):
    """Normalized reward-definition entry.

    Card data arrives either as a plain multiplier (``{"dining": 4}``) or as a
    structured value (``{"dining": {"multiplier": 4, "note": "..."}}``). Both are
    coerced into this shape so scoring only ever reads ``multiplier``.
    """

    multiplier: float | None = None
    note: str | None = None
    active_categories: list[str] = Field(default_factory=list)

    @classmethod
    def coerce(cls, raw: Any) -> "RewardValue":
        if isinstance(raw, RewardValue):
            return raw

        if isinstance(raw, dict):
            multiplier = None
            for key in ("multiplier", "value", "rate"):
                if key in raw:
                    multiplier = _finite_float(raw[key])
                    break

            note = raw.get("note", raw.get("notes"))
            if isinstance(note, (list, tuple)):
                note = "; ".join(str(item) for item in note if item)
            note = str(note).strip() if note else None

            active = raw.get("active_categories", raw.get("categories")) or []
            if isinstance(active, str):
                active = [active]
            if not isinstance(active, (list, tuple, set)):
                active = []

            return cls(
                multiplier=multiplier if multiplier is None or multiplier >= 0 else None,
                note=note or None,
                active_categories=[category_key(item) for item in active if category_key(item)],
            )

        multiplier = _finite_float(raw)
        if multiplier is not None and multiplier < 0:
            multiplier = None
        return cls(multiplier=multiplier)


class Card(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    card_id: str = Field(validation_alias=AliasChoices("card_id", "id"))
    card_name: str = Field(default="", validation_alias=AliasChoices("card_name", "name"))
    nickname: str | None = None
    reward_structure: dict[str, RewardValue] = Field(default_factory=dict)
    apr: float | None = None
    credit_limit: float | None = None
    current_balance: float = 0.0
    statement_close_day: int | None = None
    payment_due_day: int | None = None
    grace_period_days: int | None = None
    planned_payment_amount: float | None = None

    @field_validator("card_id", mode="before")
    @classmethod
    def _card_id_as_text(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("reward_structure", mode="before")
    @classmethod
    def _normalize_rewards(cls, value: Any) -> dict[str, RewardValue]:
        if not isinstance(value, dict):
            return {}
        rewards: dict[str, RewardValue] = {}
        for key, entry in value.items():
            normalized = category_key(key)
            if normalized:
                rewards[normalized] = RewardValue.coerce(entry)
        return rewards

    @field_validator("apr", "credit_limit", "planned_payment_amount", mode="before")
    @classmethod
    def _lenient_amount(cls, value: Any) -> float | None:
        number = _finite_float(value)
        return number if number is not None and number >= 0 else None

    @field_validator("current_balance", mode="before")
    @classmethod
    def _lenient_balance(cls, value: Any) -> float:
        number = _finite_float(value)
        return number if number is not None else 0.0

    @field_validator("statement_close_day", "payment_due_day", mode="before")
    @classmethod
    def _day_of_month(cls, value: Any) -> int | None:
        day = _whole_number(value)
        return day if day is not None and 1 <= day <= 31 else None

    @field_validator("grace_period_days", mode="before")
    @classmethod
    def _grace_length(cls, value: Any) -> int | None:
        days = _whole_number(value)
        return days if days is not None and days >= 0 else None

    @property
    def display_name(self) -> str:
        return self.nickname or self.card_name or self.card_id

    @property
    def has_balance(self) -> bool:
        return self.current_balance > 0

    @property
    def available_credit(self) -> float:
        if not self.credit_limit:
            return 0.0
        return max(self.credit_limit - max(self.current_balance, 0.0), 0.0)

    @property
    def utilization(self) -> float:
        if not self.credit_limit:
            return math.inf
        return max(self.current_balance, 0.0) / self.credit_limit * 100


class ClassificationSource(str, Enum):
    NUMERIC_CODE = "numeric_code"
    CACHED = "cached"
    KEYWORD = "keyword"
    EXTERNAL = "external"
    DEFAULT = "default"


class ExternalHint(BaseModel):
    """Category suggestion produced outside the core, e.g. by a hosted classifier."""

    category_id: str | None = None
    confidence: float = Field(default=0.0, ge=0, le=1)


class CodeMatch(BaseModel):
    category_id: str
    confidence: float
    code: int


class ClassificationResult(BaseModel):
    category_id: str | None = None
    category_name: str | None = None
    confidence: float = 0.0
    source: ClassificationSource = ClassificationSource.DEFAULT
    explanation: str = ""
    code: int | None = None


class MatchSource(str, Enum):
    EXACT = "exact"
    ALIAS = "alias"
    PARENT = "parent"
    ROTATING = "rotating"
    DEFAULT = "default"


class RewardMatchResult(BaseModel):
    multiplier: float
    source: MatchSource
    confidence: float
    explanation: str
    note: str | None = None
    matched_key: str | None = None


class PaymentStatus(str, Enum):
    OVERDUE = "OVERDUE"
    DUE_SOON = "DUE_SOON"
    UPCOMING = "UPCOMING"


class PaymentObligation(BaseModel):
    statement_close: date
    payment_due: date
    days_until_due: int
    is_overdue: bool
    is_due_soon: bool
    amount: float
    status: PaymentStatus


class ActiveObligations(BaseModel):
    previous: PaymentObligation
    current: PaymentObligation


class UpcomingPayment(BaseModel):
    card: Card
    obligation: PaymentObligation


class Strategy(str, Enum):
    REWARDS = "REWARDS"
    LOW_APR = "LOW_APR"
    GRACE_PERIOD = "GRACE_PERIOD"


class ScoredCard(BaseModel):
    card: Card
    strategy: Strategy
    score: float
    recommendable: bool
    has_grace_period: bool
    explanation: str
    warning: str | None = None

    multiplier: float | None = None
    cashback: float | None = None
    annual_value: float | None = None
    match: RewardMatchResult | None = None

    apr: float | None = None
    monthly_interest: float | None = None
    annual_interest: float | None = None

    float_days: int | None = None
    payment_due: date | None = None


class StrategyComparison(BaseModel):
    rewards: list[ScoredCard] = Field(default_factory=list)
    apr: list[ScoredCard] = Field(default_factory=list)
    grace_period: list[ScoredCard] = Field(default_factory=list)


class RecommendationSummary(BaseModel):
    best_rewards: ScoredCard | None = None
    best_apr: ScoredCard | None = None
    best_grace_period: ScoredCard | None = None
    cards_with_balance: int = 0
    cards_with_grace_period: int = 0
