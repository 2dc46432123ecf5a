"""
Five-Card Draw - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Cards and hand results are immutable (frozen dataclasses) so
they can be shared freely between the round controller and the UI layer.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence


class Suit(Enum):
    """Card suits in canonical deck order."""
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    @property
    def letter(self) -> str:
        """ASCII shorthand (s, h, d, c)."""
        return self.name[0].lower()

    @classmethod
    def from_symbol(cls, symbol: str) -> "Suit":
        """Accept either the suit glyph or its ASCII letter."""
        for suit in cls:
            if symbol in (suit.value, suit.letter, suit.letter.upper()):
                return suit
        raise ValueError(f"Invalid suit: {symbol!r}")


class Rank(Enum):
    """Card ranks in ascending canonical order. Value is the numeric rank (Ace high)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return _RANK_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Rank":
        """Parse ``"2"``-``"9"``, ``"T"``/``"10"``, ``"J"``, ``"Q"``, ``"K"``, ``"A"``."""
        normalized = "T" if symbol == "10" else symbol.upper()
        for rank, rank_symbol in _RANK_SYMBOLS.items():
            if rank_symbol == normalized:
                return rank
        raise ValueError(f"Invalid rank: {symbol!r}")


_RANK_SYMBOLS: dict[Rank, str] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


class HandCategory(Enum):
    """Poker hand categories. Value is the category strength (higher wins)."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``"Three of a Kind"``."""
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES: dict[HandCategory, str] = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


class Phase(Enum):
    """Round phases. The ordering follows a single round from deal to settlement."""
    PRE_DEAL = "pre-deal"
    DEALING = "dealing"
    PLAYER_DRAW = "player-draw-phase"
    DEALER_DRAW = "dealer-draw-phase"
    SHOWDOWN = "showdown"
    ROUND_OVER = "round-over"
    GAME_OVER = "game-over"


class Comparison(Enum):
    """Result of ordering two evaluated hands."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


class Outcome(Enum):
    """Round verdict from the player's point of view."""
    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    PUSH = auto()


@dataclass(frozen=True)
class Card:
    """
    Immutable playing card.

    Attributes:
        rank: Card rank (2 through Ace)
        suit: Card suit
    """
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """Validate field types so malformed cards fail at construction."""
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")

    @property
    def value(self) -> int:
        """Numeric rank, 2-14 with Ace high."""
        return self.rank.value

    @property
    def label(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"

    @property
    def display_rank(self) -> str:
        """Rank as shown on a card face (``"10"`` rather than ``"T"``)."""
        return "10" if self.rank is Rank.TEN else self.rank.symbol

    @property
    def is_red(self) -> bool:
        return self.suit.is_red

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, label: str) -> "Card":
        """Create a Card from a short label such as ``"Ah"``, ``"T♠"`` or ``"10d"``."""
        label = label.strip()
        if len(label) < 2:
            raise ValueError(f"Invalid card label: {label!r}")
        return cls(rank=Rank.from_symbol(label[:-1]), suit=Suit.from_symbol(label[-1]))


def parse_cards(labels: Sequence[str] | str) -> list[Card]:
    """Parse several card labels. A string is split on whitespace."""
    if isinstance(labels, str):
        labels = labels.split()
    return [Card.parse(label) for label in labels]


@dataclass(frozen=True)
class HandResult:
    """
    Evaluated strength of a five-card hand.

    Attributes:
        category: Hand category
        tiebreak: Rank values compared in order when categories are equal
    """
    category: HandCategory
    tiebreak: tuple[int, ...]

    @property
    def name(self) -> str:
        return self.category.display_name

    @property
    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        """Key that orders results from weakest to strongest."""
        return (self.category.value, self.tiebreak)

    def __str__(self) -> str:
        return f"{self.name} {list(self.tiebreak)}"
