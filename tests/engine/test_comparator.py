"""
Five-Card Draw - Hand Comparator Tests
"""

import itertools

import pytest
from src.engine.base import Comparison, HandCategory, HandResult, parse_cards
from src.engine.comparator import compare, compare_hands
from src.engine.evaluator import HandEvaluator


def result(labels: str) -> HandResult:
    return HandEvaluator.evaluate(parse_cards(labels))


class TestCategoryOrdering:
    """Higher categories always win regardless of card values."""

    def test_pair_beats_ace_high(self):
        assert compare(result("2s 2h 3d 4c 6h"), result("As Kh Qd Jc 9h")) is Comparison.GREATER

    def test_flush_beats_straight(self):
        assert compare(result("2h 5h 7h 9h Jh"), result("Ah Kd Qc Js Th")) is Comparison.GREATER

    def test_royal_beats_straight_flush(self):
        assert compare(result("Kd Qd Jd Td 9d"), result("As Ks Qs Js Ts")) is Comparison.LESS

    def test_full_ladder(self, category_hands):
        order = [
            "high_card", "one_pair", "two_pair", "three_of_a_kind", "straight",
            "flush", "full_house", "four_of_a_kind", "straight_flush", "royal_flush",
        ]
        results = [result(category_hands[name][0]) for name in order]
        for weaker, stronger in zip(results, results[1:]):
            assert compare(weaker, stronger) is Comparison.LESS
            assert compare(stronger, weaker) is Comparison.GREATER


class TestTiebreaks:
    """Same category falls back to the tie-break sequence."""

    def test_pair_kicker_decides(self):
        assert compare(result("Ah Ad Kc Qs 9h"), result("As Ac Kd Qh 8h")) is Comparison.GREATER

    def test_two_pair_low_pair_decides(self):
        assert compare(result("Kh Kd 3c 3s Ah"), result("Ks Kc 4d 4h 2h")) is Comparison.LESS

    def test_wheel_loses_to_six_high_straight(self):
        assert compare(result("As 2d 3c 4h 5s"), result("2s 3d 4c 5h 6d")) is Comparison.LESS

    def test_full_house_trips_before_pair(self):
        assert compare(result("3s 3h 3d As Ah"), result("2s 2h 2d Ks Kh")) is Comparison.GREATER

    def test_exact_tie(self):
        assert compare(result("9s 8h 7d 6c 5s"), result("9h 8d 7c 6s 5h")) is Comparison.EQUAL

    def test_high_card_tie_across_suits(self):
        assert compare_hands(parse_cards("Ah Kd 9c 7s 3h"), parse_cards("As Kc 9d 7h 3c")) is Comparison.EQUAL


class TestTotalOrder:
    """Exactly one of less/equal/greater holds for any pair."""

    @pytest.fixture
    def sample(self, category_hands) -> list[HandResult]:
        extra = [
            "As 5h 4d 3c 2s",
            "Ah Ad Kc Qs 9h",
            "As Ac Kd Qh 8h",
            "9h 8d 7c 6s 5h",
            "Ah Kd 9c 7s 3h",
        ]
        return [result(labels) for labels, _, _ in category_hands.values()] + [result(labels) for labels in extra]

    def test_antisymmetric(self, sample):
        flipped = {
            Comparison.GREATER: Comparison.LESS,
            Comparison.LESS: Comparison.GREATER,
            Comparison.EQUAL: Comparison.EQUAL,
        }
        for a, b in itertools.product(sample, repeat=2):
            assert compare(b, a) is flipped[compare(a, b)]

    def test_equal_only_when_identical_keys(self, sample):
        for a, b in itertools.product(sample, repeat=2):
            is_equal = compare(a, b) is Comparison.EQUAL
            assert is_equal == (a.category == b.category and a.tiebreak == b.tiebreak)

    def test_consistent_with_sort_key(self, sample):
        for a, b in itertools.product(sample, repeat=2):
            expected = (a.sort_key > b.sort_key) - (a.sort_key < b.sort_key)
            assert compare(a, b).value == expected

    def test_reflexive(self):
        hand = HandResult(HandCategory.ONE_PAIR, (6, 12, 8, 4))
        assert compare(hand, hand) is Comparison.EQUAL
