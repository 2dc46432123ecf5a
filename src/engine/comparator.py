"""
Five-Card Draw - Hand Comparator

Orders evaluated hands: category first, then the tie-break sequences element
by element. Hands that match on both are an exact tie.
"""

from typing import Sequence

from src.engine.base import Card, Comparison, HandResult
from src.engine.evaluator import HandEvaluator


def compare(a: HandResult, b: HandResult) -> Comparison:
    """Order hand ``a`` relative to hand ``b``."""
    if a.category.value != b.category.value:
        return Comparison.GREATER if a.category.value > b.category.value else Comparison.LESS

    for left, right in zip(a.tiebreak, b.tiebreak):
        if left != right:
            return Comparison.GREATER if left > right else Comparison.LESS

    # Same category always yields tie-breaks of the same length.
    return Comparison.EQUAL


def compare_hands(a: Sequence[Card], b: Sequence[Card]) -> Comparison:
    """Evaluate two raw hands and order them."""
    return compare(HandEvaluator.evaluate(a), HandEvaluator.evaluate(b))
