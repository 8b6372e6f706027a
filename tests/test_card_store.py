import json
from pathlib import Path

import pytest

from swipewise.repository.card_store import CardStore, CardStoreError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_CARDS = PROJECT_ROOT / "data" / "cards" / "sample_cards.json"


def test_loads_sample_cards() -> None:
    cards = CardStore(SAMPLE_CARDS).load_cards()

    assert len(cards) == 5
    assert cards[0].card_id == "sapphire_preferred"
    assert cards[0].display_name == "Travel card"
    assert cards[0].reward_structure["travel"].note == "5x on travel booked through the portal"
    assert cards[2].current_balance == pytest.approx(20999.96)


def test_get_card() -> None:
    store = CardStore(SAMPLE_CARDS)

    assert store.get_card("gold_rewards").card_name == "Gold Rewards"
    assert store.get_card("missing") is None


def test_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError):
        CardStore("does/not/exist.json").load_cards()


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "cards.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CardStoreError, match="not valid JSON"):
        CardStore(path).load_cards()


def test_record_without_id_raises(tmp_path: Path) -> None:
    path = tmp_path / "cards.json"
    path.write_text(json.dumps([{"card_name": "Nameless"}]), encoding="utf-8")

    with pytest.raises(CardStoreError, match="Invalid card record"):
        CardStore(path).load_cards()


def test_wrapped_card_list_and_lenient_fields(tmp_path: Path) -> None:
    path = tmp_path / "cards.json"
    path.write_text(
        json.dumps({"cards": [{"id": 7, "name": "Odd", "apr": "n/a", "statement_close_day": 40}]}),
        encoding="utf-8",
    )

    [card] = CardStore(path).load_cards()

    assert card.card_id == "7"
    assert card.apr is None
    assert card.statement_close_day is None


def test_non_list_payload_raises(tmp_path: Path) -> None:
    path = tmp_path / "cards.json"
    path.write_text(json.dumps("cards"), encoding="utf-8")

    with pytest.raises(CardStoreError, match="list of cards"):
        CardStore(path).load_cards()
