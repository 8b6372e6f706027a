import json
import logging
from pathlib import Path

from pydantic import ValidationError

from swipewise.config import settings
from swipewise.domain.models import Card

logger = logging.getLogger(__name__)


class CardStoreError(ValueError):
    pass


class CardStore:
    def __init__(self, card_file: str | Path | None = None):
        self.card_file = Path(card_file or settings.card_file)

    def load_cards(self) -> list[Card]:
        if not self.card_file.exists():
            raise FileNotFoundError(f"Card file not found: {self.card_file}")

        try:
            with self.card_file.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise CardStoreError(f"Card file is not valid JSON: {self.card_file}") from exc

        if isinstance(data, dict):
            data = data.get("cards", [])
        if not isinstance(data, list):
            raise CardStoreError(f"Expected a list of cards in {self.card_file}")

        try:
            cards = [Card.model_validate(item) for item in data]
        except ValidationError as exc:
            raise CardStoreError(f"Invalid card record in {self.card_file}: {exc}") from exc

        logger.debug("Loaded %d cards from %s", len(cards), self.card_file)
        return cards

    def get_card(self, card_id: str) -> Card | None:
        return next((card for card in self.load_cards() if card.card_id == card_id), None)
