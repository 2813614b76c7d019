"""Tests for the check digit algorithm."""

import itertools
import random

import pytest

from saudi_id.core.checksum import compute_check_digit, fold_digit, fold_sum, verify


def _digits(text: str) -> list[int]:
    return [int(c) for c in text]


class TestFoldDigit:
    """Tests for per-position weighting."""

    def test_even_positions_are_doubled(self):
        assert fold_digit(3, 0) == 6
        assert fold_digit(4, 2) == 8

    def test_doubled_values_fold(self):
        # 2 * 7 = 14 -> 1 + 4 = 5
        assert fold_digit(7, 0) == 5
        assert fold_digit(9, 8) == 9
        assert fold_digit(5, 4) == 1

    def test_odd_positions_unchanged(self):
        for digit in range(10):
            assert fold_digit(digit, 1) == digit
            assert fold_digit(digit, 9) == digit

    def test_doubling_is_a_permutation(self):
        """Each digit maps to a distinct value at doubled positions."""
        assert sorted(fold_digit(d, 0) for d in range(10)) == list(range(10))


class TestComputeCheckDigit:
    """Tests for compute_check_digit."""

    def test_citizen_zero_payload(self):
        # S = 1*2 = 2 -> (10 - 2) % 10 = 8
        assert compute_check_digit(_digits("100000000")) == 8

    def test_resident_zero_payload(self):
        assert compute_check_digit(_digits("200000000")) == 6

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ("158187235", 3),
            ("156443709", 1),
            ("123456789", 7),
            ("212345678", 8),
        ],
    )
    def test_known_vectors(self, payload, expected):
        assert compute_check_digit(_digits(payload)) == expected

    def test_sum_multiple_of_ten_gives_zero(self):
        # 1*2 + 8 = 10
        assert compute_check_digit(_digits("180000000")) == 0

    def test_full_id_fold_sum_is_multiple_of_ten(self, valid_citizen_ids, valid_resident_ids):
        for value in valid_citizen_ids + valid_resident_ids:
            assert fold_sum(_digits(value)) % 10 == 0

    @pytest.mark.parametrize("payload", ["1000000008", "10000000", ""])
    def test_wrong_payload_length(self, payload):
        with pytest.raises(ValueError, match="9 digits"):
            compute_check_digit(_digits(payload))

    def test_always_single_digit(self):
        rng = random.Random(7)
        for _ in range(1000):
            payload = [rng.randrange(10) for _ in range(9)]
            assert 0 <= compute_check_digit(payload) <= 9


class TestVerify:
    """Tests for verify."""

    def test_correct_digit(self):
        assert verify(_digits("100000000"), 8) is True

    def test_wrong_digit(self):
        assert verify(_digits("100000000"), 9) is False

    def test_computed_digit_always_verifies(self):
        rng = random.Random(99)
        for _ in range(2000):
            payload = [rng.randrange(10) for _ in range(9)]
            assert verify(payload, compute_check_digit(payload))

    def test_full_id_rejected(self):
        with pytest.raises(ValueError):
            verify(_digits("1000000008"), 8)

    def test_exactly_one_digit_verifies(self):
        payload = _digits("158187235")
        assert [d for d in range(10) if verify(payload, d)] == [3]


class TestErrorDetection:
    """Exhaustive checks of single-digit and transposition detection."""

    @pytest.fixture
    def sample_ids(self):
        rng = random.Random(2024)
        ids = []
        for prefix in (1, 2):
            for _ in range(50):
                payload = [prefix] + [rng.randrange(10) for _ in range(8)]
                ids.append(payload + [compute_check_digit(payload)])
        return ids

    @staticmethod
    def _is_valid(digits):
        return verify(digits[:9], digits[9])

    @pytest.mark.parametrize("position", range(10))
    def test_every_single_substitution_detected(self, sample_ids, position):
        """All 9 replacement digits are caught at every position."""
        for digits in sample_ids:
            detected = 0
            for replacement in range(10):
                if replacement == digits[position]:
                    continue
                mutated = list(digits)
                mutated[position] = replacement
                if not self._is_valid(mutated):
                    detected += 1
            assert detected == 9

    def test_adjacent_transpositions_detected_except_zero_nine(self):
        """Only swapping 0 and 9 between neighbours goes unnoticed."""
        undetected = set()
        for position in range(9):
            for a, b in itertools.product(range(10), repeat=2):
                if a == b:
                    continue
                before = fold_digit(a, position) + fold_digit(b, position + 1)
                after = fold_digit(b, position) + fold_digit(a, position + 1)
                if before % 10 == after % 10:
                    undetected.add(frozenset((a, b)))
        assert undetected == {frozenset((0, 9))}
