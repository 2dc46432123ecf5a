"""
Five-Card Draw - Dealer Policy

Fixed discard table keyed by the dealer's hand category before drawing:

| Category | Keep | Discards |
|---|---|---|
| High Card | Single highest card | 4 |
| One Pair | The pair | 3 |
| Two Pair | Both pairs | 1 |
| Three of a Kind | The triple | 2 |
| Straight or better | Everything | 0 |

No randomness: the same hand always yields the same discard indices.
"""

from typing import ClassVar, Sequence

from src.engine.base import Card, HandCategory, HandResult
from src.engine.evaluator import HandEvaluator


class DealerPolicy:
    """Stateless dealer discard strategy."""

    MAX_DISCARDS: ClassVar[int] = 4

    # Categories where the dealer keeps every card whose rank forms a group.
    _KEEP_GROUPS: ClassVar[frozenset[HandCategory]] = frozenset({
        HandCategory.ONE_PAIR,
        HandCategory.TWO_PAIR,
        HandCategory.THREE_OF_A_KIND,
    })

    @classmethod
    def choose_discards(
        cls,
        cards: Sequence[Card],
        result: HandResult | None = None,
    ) -> frozenset[int]:
        """
        Decide which dealer cards to throw away.

        Args:
            cards: The dealer's five cards, in hand order
            result: Optional pre-computed evaluation of ``cards``

        Returns:
            Indices (into ``cards``) to discard
        """
        if result is None:
            result = HandEvaluator.evaluate(cards)

        category = result.category

        if category is HandCategory.HIGH_CARD:
            keep = max(range(len(cards)), key=lambda i: cards[i].value)
            discards = [i for i in range(len(cards)) if i != keep]
            return frozenset(discards[: cls.MAX_DISCARDS])

        if category in cls._KEEP_GROUPS:
            groups = HandEvaluator.group_by_value(cards)
            return frozenset(
                index
                for indices in groups.values()
                if len(indices) == 1
                for index in indices
            )

        return frozenset()

    @classmethod
    def kept_cards(cls, cards: Sequence[Card]) -> tuple[Card, ...]:
        """Cards the dealer would hold after applying the policy."""
        discards = cls.choose_discards(cards)
        return tuple(card for i, card in enumerate(cards) if i not in discards)
