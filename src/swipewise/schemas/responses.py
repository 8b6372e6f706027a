from datetime import date

from pydantic import BaseModel, Field

from swipewise.domain.models import ClassificationResult, RecommendationSummary, ScoredCard, Strategy


class RecommendResponse(BaseModel):
    classification: ClassificationResult | None = None
    category_id: str | None = None
    purchase_date: date
    rankings: dict[Strategy, list[ScoredCard]] = Field(default_factory=dict)
    summary: RecommendationSummary
