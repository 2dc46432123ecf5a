"""
Five-Card Draw - Hand Evaluator

Maps a five-card hand to its category and an ordered tie-break sequence.

Ranking Rules:
- Straight + flush = Straight Flush (Royal Flush when Ace-high)
- Ace plays low only in the wheel (A-2-3-4-5), which ranks as a 5-high straight
- Tie-break puts group ranks first (larger groups, then higher values),
  then the remaining kickers in descending order

All methods are stateless class methods operating on immutable data.
"""

from collections import defaultdict
from typing import ClassVar, Sequence

from src.engine.base import Card, HandCategory, HandResult
from src.engine.validators import validate_hand


class HandEvaluator:
    """Stateless five-card hand evaluator."""

    WHEEL: ClassVar[tuple[int, ...]] = (14, 5, 4, 3, 2)
    WHEEL_TIEBREAK: ClassVar[tuple[int, ...]] = (5, 4, 3, 2, 1)
    ROYAL: ClassVar[tuple[int, ...]] = (14, 13, 12, 11, 10)

    @classmethod
    def group_by_value(cls, cards: Sequence[Card]) -> dict[int, list[int]]:
        """
        Group hand positions by rank value.

        Args:
            cards: Cards in hand order

        Returns:
            Dict mapping rank value to the indices holding that rank
            Example: (K, 7, K, 2, 7) -> {13: [0, 2], 7: [1, 4], 2: [3]}
        """
        groups: dict[int, list[int]] = defaultdict(list)
        for index, card in enumerate(cards):
            groups[card.value].append(index)
        return dict(groups)

    @classmethod
    def ordered_groups(cls, cards: Sequence[Card]) -> list[tuple[int, int]]:
        """(value, count) pairs ordered by count, then value, both descending."""
        groups = cls.group_by_value(cards)
        return sorted(
            ((value, len(indices)) for value, indices in groups.items()),
            key=lambda item: (item[1], item[0]),
            reverse=True,
        )

    @classmethod
    def is_flush(cls, cards: Sequence[Card]) -> bool:
        return len({card.suit for card in cards}) == 1

    @classmethod
    def straight_values(cls, cards: Sequence[Card]) -> tuple[int, ...] | None:
        """
        Check for a straight.

        Returns:
            Tie-break values (high to low) if the hand is a straight, else None.
            The wheel returns (5, 4, 3, 2, 1).
        """
        values = tuple(sorted({card.value for card in cards}, reverse=True))
        if len(values) != 5:
            return None
        if values == cls.WHEEL:
            return cls.WHEEL_TIEBREAK
        if values[0] - values[4] == 4:
            return values
        return None

    @classmethod
    def evaluate(cls, cards: Sequence[Card]) -> HandResult:
        """
        Evaluate a five-card hand.

        Args:
            cards: Exactly five distinct cards

        Returns:
            HandResult with category and tie-break sequence

        Raises:
            ValueError: If the hand is not five distinct cards
        """
        hand = validate_hand(cards)

        descending = tuple(sorted((card.value for card in hand), reverse=True))
        flush = cls.is_flush(hand)
        straight = cls.straight_values(hand)
        groups = cls.ordered_groups(hand)
        counts = [count for _, count in groups]
        group_values = tuple(value for value, _ in groups)

        if straight and flush:
            if straight == cls.ROYAL:
                return HandResult(HandCategory.ROYAL_FLUSH, straight)
            return HandResult(HandCategory.STRAIGHT_FLUSH, straight)

        if counts[0] == 4:
            return HandResult(HandCategory.FOUR_OF_A_KIND, group_values)

        if counts[0] == 3 and counts[1] == 2:
            return HandResult(HandCategory.FULL_HOUSE, group_values)

        if flush:
            return HandResult(HandCategory.FLUSH, descending)

        if straight:
            return HandResult(HandCategory.STRAIGHT, straight)

        if counts[0] == 3:
            return HandResult(HandCategory.THREE_OF_A_KIND, group_values)

        if counts[0] == 2 and counts[1] == 2:
            return HandResult(HandCategory.TWO_PAIR, group_values)

        if counts[0] == 2:
            return HandResult(HandCategory.ONE_PAIR, group_values)

        return HandResult(HandCategory.HIGH_CARD, descending)


def evaluate_hand(cards: Sequence[Card]) -> HandResult:
    """Module-level shortcut for ``HandEvaluator.evaluate``."""
    return HandEvaluator.evaluate(cards)
