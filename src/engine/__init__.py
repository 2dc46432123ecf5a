"""
Five-Card Draw Game Engine.

Pure Python game logic with zero UI dependencies.
Handles the deck, hand ranking, the dealer's discard policy and the
round state machine.
"""

from src.engine.base import (
    Card,
    Comparison,
    HandCategory,
    HandResult,
    Outcome,
    Phase,
    Rank,
    Suit,
    parse_cards,
)
from src.engine.comparator import compare, compare_hands
from src.engine.dealer import DealerPolicy
from src.engine.deck import Deck, create_deck
from src.engine.errors import (
    InsufficientCardsError,
    InvalidSelectionError,
    InvalidTransitionError,
    PokerError,
)
from src.engine.evaluator import HandEvaluator, evaluate_hand
from src.engine.models import TableSnapshot
from src.engine.round import ActionResult, RoundController, RoundOutcome, RoundState

__all__ = [
    # Data Classes
    "Card",
    "HandResult",
    "RoundState",
    "RoundOutcome",
    "ActionResult",
    "TableSnapshot",
    "parse_cards",
    # Enums
    "Suit",
    "Rank",
    "HandCategory",
    "Phase",
    "Outcome",
    "Comparison",
    # Errors
    "PokerError",
    "InsufficientCardsError",
    "InvalidTransitionError",
    "InvalidSelectionError",
    # Engines
    "Deck",
    "create_deck",
    "HandEvaluator",
    "evaluate_hand",
    "compare",
    "compare_hands",
    "DealerPolicy",
    "RoundController",
]
