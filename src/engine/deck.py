"""
Five-Card Draw - Deck

A single 52-card deck, created fresh for every round, shuffled once and then
consumed strictly from the front. Removed cards never come back.
"""

import random
from typing import Iterator

from src.engine.base import Card, Rank, Suit
from src.engine.errors import InsufficientCardsError


class Deck:
    """Ordered, mutable sequence of unique cards."""

    def __init__(self, cards: list[Card] | None = None) -> None:
        self._cards: list[Card] = list(cards) if cards is not None else []

    @classmethod
    def create(cls) -> "Deck":
        """Build the full deck in canonical order (suit-major, rank-minor)."""
        return cls([Card(rank=rank, suit=suit) for suit in Suit for rank in Rank])

    @classmethod
    def shuffled(cls, rng: random.Random | None = None) -> "Deck":
        """Build a full deck and shuffle it once."""
        deck = cls.create()
        deck.shuffle(rng)
        return deck

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle in place with Fisher-Yates.

        Args:
            rng: Optional random source (for reproducible tests)
        """
        randbelow = (rng or random).randrange
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = randbelow(i + 1)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self, count: int) -> list[Card]:
        """Remove and return the first ``count`` cards.

        Raises:
            InsufficientCardsError: If fewer than ``count`` cards remain
            ValueError: If ``count`` is negative
        """
        if count < 0:
            raise ValueError(f"Cannot draw a negative number of cards, got {count}.")
        if count > len(self._cards):
            raise InsufficientCardsError(requested=count, remaining=len(self._cards))
        drawn = self._cards[:count]
        del self._cards[:count]
        return drawn

    @property
    def remaining(self) -> tuple[Card, ...]:
        """Cards still in the deck, top first."""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"


def create_deck() -> Deck:
    """Unshuffled 52-card deck in canonical order."""
    return Deck.create()
