import pytest
from pydantic import ValidationError

from cards_graphql_api.app.schemas.card import Card
from cards_graphql_api.app.services.card_store import SEED_CARDS, CardStore


def test_seeded_store_holds_seed_cards_in_order(seeded_store):
    assert seeded_store.all() == (
        Card(category="Bank Card", is_valid=True),
        Card(category="Shopping Card", is_valid=False),
    )
    assert len(seeded_store) == 2
    assert list(seeded_store) == list(SEED_CARDS)


@pytest.mark.parametrize(
    "category, expected",
    [
        ("Bank Card", Card(category="Bank Card", is_valid=True)),
        ("Shopping Card", Card(category="Shopping Card", is_valid=False)),
        ("Nonexistent", None),
        ("bank card", None),
        ("Bank Card ", None),
        ("", None),
        (None, None),
    ],
)
def test_find_by_category_is_exact(seeded_store, category, expected):
    assert seeded_store.find_by_category(category) == expected


def test_find_by_category_returns_first_duplicate(duplicate_store):
    found = duplicate_store.find_by_category("Gift Card")
    assert found is duplicate_store.all()[0]
    assert found.is_valid is False


def test_store_is_decoupled_from_source_list():
    cards = [Card(category="Bank Card", is_valid=True)]
    store = CardStore(cards)
    cards.append(Card(category="Extra", is_valid=True))
    assert len(store) == 1
    assert store.find_by_category("Extra") is None


def test_empty_store():
    store = CardStore()
    assert store.all() == ()
    assert store.find_by_category("Bank Card") is None


def test_cards_are_immutable():
    card = Card(category="Bank Card", is_valid=True)
    with pytest.raises(ValidationError):
        card.category = "Other"
