"""
Five-Card Draw - Input Validation Utilities

Provides validation functions for game engine inputs. Hand and chip validators
either return validated data or raise descriptive ValueError exceptions;
discard indices raise InvalidSelectionError so the round controller can report
them as a rejected action.
"""

from typing import Sequence

from src.engine.base import Card
from src.engine.errors import InvalidSelectionError

HAND_SIZE = 5


def validate_hand(cards: Sequence[Card], size: int = HAND_SIZE) -> tuple[Card, ...]:
    """
    Validate a complete poker hand.

    Args:
        cards: Cards making up the hand
        size: Required number of cards

    Returns:
        Validated cards as a tuple

    Raises:
        ValueError: If the hand has the wrong size, holds non-cards or duplicates
    """
    hand = tuple(cards)

    if len(hand) != size:
        raise ValueError(f"A hand must contain exactly {size} cards, got {len(hand)}.")

    for i, card in enumerate(hand):
        if not isinstance(card, Card):
            raise ValueError(f"Item at index {i} must be a Card, got {type(card).__name__}.")

    if len(set(hand)) != len(hand):
        raise ValueError("A hand cannot contain the same card twice.")

    return hand


def validate_discard_index(index: int, hand_size: int) -> int:
    """
    Validate a card index selected for discard.

    Args:
        index: Index into the player's hand
        hand_size: Number of cards currently in the hand

    Returns:
        Validated index

    Raises:
        InvalidSelectionError: If the index is not an int or is out of range
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidSelectionError(index, hand_size)

    if not (0 <= index < hand_size):
        raise InvalidSelectionError(index, hand_size)

    return index


def validate_chip_amount(amount: int, name: str = "Amount", allow_zero: bool = False) -> int:
    """
    Validate a chip amount (starting balance, ante).

    Args:
        amount: Number of chips
        name: Label used in error messages
        allow_zero: Whether zero is acceptable

    Returns:
        Validated amount

    Raises:
        ValueError: If amount is not an int or not positive
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"{name} must be an integer, got {type(amount).__name__}.")

    if amount < 0 or (amount == 0 and not allow_zero):
        raise ValueError(f"{name} must be positive, got {amount}.")

    return amount
