"""
Five-Card Draw - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from typing import Callable

import pytest

from src.engine.base import Card, parse_cards
from src.engine.deck import Deck
from src.engine.round import RoundController


# =============================================================================
# SCHEDULING
# =============================================================================

class ManualTimer:
    """Timer handle that only fires when a test tells it to."""

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if self.cancelled or self.fired:
            return
        self.fired = True
        self.callback()


class ManualScheduler:
    """Scheduler that records timers instead of starting threads."""

    def __init__(self) -> None:
        self.timers: list[ManualTimer] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def last(self) -> ManualTimer:
        return self.timers[-1]

    def fire_all(self) -> None:
        for timer in list(self.timers):
            timer.fire()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


# =============================================================================
# DECKS
# =============================================================================

@pytest.fixture
def stack_deck(monkeypatch) -> Callable[..., list[Card]]:
    """
    Make every new round deal from a known deck.

    Call with card labels in dealing order (player's five, dealer's five,
    player's replacements, dealer's replacements). The rest of the deck
    follows in canonical order. Pass ``complete=False`` to deal from a
    deck containing only the given cards.
    """

    def _stack(labels: str, complete: bool = True) -> list[Card]:
        top = parse_cards(labels)
        rest = [card for card in Deck.create() if card not in top] if complete else []
        cards = top + rest

        def _shuffled(cls, rng=None):
            return cls(list(cards))

        monkeypatch.setattr(Deck, "shuffled", classmethod(_shuffled))
        return cards

    return _stack


# =============================================================================
# CONTROLLERS
# =============================================================================

@pytest.fixture
def make_controller(scheduler) -> Callable[..., RoundController]:
    """Factory for controllers wired to the manual scheduler."""

    def _make(starting_chips: int = 1000, ante: int = 5, seed: int | None = 1234) -> RoundController:
        rng = random.Random(seed) if seed is not None else None
        return RoundController(
            starting_chips=starting_chips,
            ante=ante,
            dealer_delay=1.5,
            scheduler=scheduler,
            rng=rng,
        )

    return _make


@pytest.fixture
def controller(make_controller) -> RoundController:
    return make_controller()


# =============================================================================
# HAND TEST DATA
# =============================================================================

@pytest.fixture
def category_hands() -> dict[str, tuple[str, str, tuple[int, ...]]]:
    """
    One hand per category with expected results.

    Returns:
        Dict mapping name to (labels, category name, tie-break)
    """
    return {
        "royal_flush": ("As Ks Qs Js Ts", "Royal Flush", (14, 13, 12, 11, 10)),
        "straight_flush": ("9h 8h 7h 6h 5h", "Straight Flush", (9, 8, 7, 6, 5)),
        "four_of_a_kind": ("9s 9h 9d 9c 2h", "Four of a Kind", (9, 2)),
        "full_house": ("Ks Kh 7d 7c Kd", "Full House", (13, 7)),
        "flush": ("Ah Jh 9h 6h 2h", "Flush", (14, 11, 9, 6, 2)),
        "straight": ("9h 8d 7c 6s 5h", "Straight", (9, 8, 7, 6, 5)),
        "three_of_a_kind": ("8h 8d 8s Qd Js", "Three of a Kind", (8, 12, 11)),
        "two_pair": ("7h 7d 4s 4c As", "Two Pair", (7, 4, 14)),
        "one_pair": ("6h 6s Qh 8d 4c", "One Pair", (6, 12, 8, 4)),
        "high_card": ("2s 4h 6d 9c Jh", "High Card", (11, 9, 6, 4, 2)),
    }
