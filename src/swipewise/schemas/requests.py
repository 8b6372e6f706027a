from datetime import date

from pydantic import BaseModel, Field

from swipewise.domain.models import ExternalHint, Strategy


class RecommendRequest(BaseModel):
    merchant_name: str | None = None
    merchant_code: int | str | None = None
    category: str | None = None
    subcategory: str | None = None
    amount: float | None = None
    purchase_date: date | None = None
    hint: ExternalHint | None = None
    strategies: list[Strategy] = Field(default_factory=lambda: list(Strategy))
