# Path: src/alnumsort/digit_runs.py
from enum import IntEnum
from typing import Sequence

__all__ = ["Ordering", "compare_digit_runs"]

ZERO = ord("0")


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_digit_runs(digits1: Sequence[int], digits2: Sequence[int]) -> Ordering:
    """
    Compare two runs of ASCII digit ordinals by numeric value.

    The shorter run is virtually left-padded with zeros so both are read
    from the most significant place; no integer conversion takes place, so
    runs of any length compare correctly. Runs of equal value are ordered
    by their literal length, fewer digits first. An empty run reads as zero
    written with no digits.
    """
    swapped = len(digits1) > len(digits2)
    short, long_ = (digits2, digits1) if swapped else (digits1, digits2)

    padding = len(long_) - len(short)
    for i, d_long in enumerate(long_):
        d_short = ZERO if i < padding else short[i - padding]
        if d_short != d_long:
            short_is_less = d_short < d_long
            if swapped:
                return Ordering.GREATER if short_is_less else Ordering.LESS
            return Ordering.LESS if short_is_less else Ordering.GREATER

    if not padding:
        return Ordering.EQUAL
    return Ordering.GREATER if swapped else Ordering.LESS
