import logging
from datetime import date

from swipewise.domain.models import Card, ClassificationResult, ScoredCard, Strategy, StrategyComparison, category_key
from swipewise.engine.selectors import summarize
from swipewise.engine.strategies import score_for_apr, score_for_grace_period, score_for_rewards
from swipewise.nlp.classifier import MerchantClassifier
from swipewise.repository.card_store import CardStore
from swipewise.schemas.requests import RecommendRequest
from swipewise.schemas.responses import RecommendResponse

logger = logging.getLogger(__name__)


class RecommendationOrchestrator:
    def __init__(self, card_store: CardStore | None = None, classifier: MerchantClassifier | None = None):
        self.card_store = card_store or CardStore()
        self.classifier = classifier or MerchantClassifier()

    def _resolve_category(self, request: RecommendRequest) -> tuple[str | None, ClassificationResult | None]:
        if request.category:
            return category_key(request.category), None

        if not request.merchant_name and request.merchant_code is None:
            return None, None

        classification = self.classifier.classify(request.merchant_name, request.merchant_code, request.hint)
        if classification.category_id is None:
            logger.info("No category for %r, scoring with default rewards", request.merchant_name)
        return classification.category_id, classification

    def recommend(self, request: RecommendRequest, cards: list[Card] | None = None) -> RecommendResponse:
        category_id, classification = self._resolve_category(request)
        purchase_date = request.purchase_date or date.today()
        if cards is None:
            cards = self.card_store.load_cards()

        rankings: dict[Strategy, list[ScoredCard]] = {}
        for strategy in dict.fromkeys(request.strategies):
            if strategy is Strategy.REWARDS:
                rankings[strategy] = score_for_rewards(cards, category_id, request.amount, request.subcategory)
            elif strategy is Strategy.LOW_APR:
                rankings[strategy] = score_for_apr(cards, request.amount)
            elif strategy is Strategy.GRACE_PERIOD:
                rankings[strategy] = score_for_grace_period(cards, purchase_date)

        comparison = StrategyComparison(
            rewards=rankings.get(Strategy.REWARDS, []),
            apr=rankings.get(Strategy.LOW_APR, []),
            grace_period=rankings.get(Strategy.GRACE_PERIOD, []),
        )
        return RecommendResponse(
            classification=classification,
            category_id=category_id,
            purchase_date=purchase_date,
            rankings=rankings,
            summary=summarize(comparison),
        )
