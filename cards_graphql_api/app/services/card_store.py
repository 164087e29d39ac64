"""
In-memory card storage.

The store is built once from an iterable of cards and never changes
afterwards: the cards are frozen into a tuple and the ``Card`` model
itself is immutable.  That makes a single store safe to share between
any number of concurrent requests without locking.

The application uses ``CardStore.seeded()``; tests construct stores
from their own fixtures.
"""

from typing import Iterable, Iterator, Optional, Tuple

from cards_graphql_api.app.schemas.card import Card


SEED_CARDS: Tuple[Card, ...] = (
    Card(category="Bank Card", is_valid=True),
    Card(category="Shopping Card", is_valid=False),
)


class CardStore:
    """Read-only ordered collection of cards."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: Tuple[Card, ...] = tuple(cards)

    @classmethod
    def seeded(cls) -> "CardStore":
        """Return a store holding the default seed cards."""
        return cls(SEED_CARDS)

    def all(self) -> Tuple[Card, ...]:
        """Return every card in storage order."""
        return self._cards

    def find_by_category(self, category: Optional[str]) -> Optional[Card]:
        """Return the first card whose category equals ``category``.

        The comparison is exact and case-sensitive.  ``None`` is
        returned when nothing matches or when ``category`` is ``None``.
        """
        if category is None:
            return None
        return next((card for card in self._cards if card.category == category), None)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
