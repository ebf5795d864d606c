# Path: tests/test_digit_runs.py
"""Tests for the digit run comparator."""

import pytest

from src.alnumsort.digit_runs import Ordering, compare_digit_runs


def digits(text: str) -> list:
    return [ord(c) for c in text]


class TestCompareDigitRuns:
    """Tests for compare_digit_runs."""

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            ("2", "10", Ordering.LESS),
            ("10", "2", Ordering.GREATER),
            ("9", "9", Ordering.EQUAL),
            ("123", "124", Ordering.LESS),
            ("0123", "99", Ordering.GREATER),
            ("99", "0123", Ordering.LESS),
        ],
    )
    def test_compares_by_numeric_value(self, left, right, expected):
        assert compare_digit_runs(digits(left), digits(right)) is expected

    def test_fewer_leading_zeros_sorts_first(self):
        assert compare_digit_runs(digits("07"), digits("007")) is Ordering.LESS
        assert compare_digit_runs(digits("007"), digits("07")) is Ordering.GREATER
        assert compare_digit_runs(digits("0"), digits("00")) is Ordering.LESS

    def test_handles_runs_longer_than_any_machine_integer(self):
        big = "1" + "0" * 49
        bigger = "1" + "0" * 48 + "1"
        assert compare_digit_runs(digits(big), digits(bigger)) is Ordering.LESS
        assert compare_digit_runs(digits("9" * 49), digits(big)) is Ordering.LESS
        assert compare_digit_runs(digits(big), digits(big)) is Ordering.EQUAL

    def test_empty_run_reads_as_zero_without_digits(self):
        assert compare_digit_runs([], []) is Ordering.EQUAL
        assert compare_digit_runs([], digits("0")) is Ordering.LESS
        assert compare_digit_runs([], digits("5")) is Ordering.LESS
        assert compare_digit_runs(digits("5"), []) is Ordering.GREATER

    def test_ordering_values_work_as_cmp_results(self):
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1
