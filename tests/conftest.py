from pathlib import Path

import pytest

from swipewise.domain.models import Card
from swipewise.repository.card_store import CardStore

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_CARDS = PROJECT_ROOT / "data" / "cards" / "sample_cards.json"


@pytest.fixture
def sample_cards() -> list[Card]:
    return CardStore(SAMPLE_CARDS).load_cards()


@pytest.fixture
def cards_by_id(sample_cards: list[Card]) -> dict[str, Card]:
    return {card.card_id: card for card in sample_cards}
