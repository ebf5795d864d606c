# Path: src/alnumsort/comparator.py
"""
Natural ("alphanumeric") ordering of strings.

Both strings are scanned in lockstep one code point at a time. ASCII digits
are collected into per-side runs; once a run boundary is reached on both
sides the runs are compared by numeric value, everything else by code point
ordinal. Ties fall back to the UTF-8 byte length.
"""
from functools import cmp_to_key
from typing import Iterable, List, Optional

from .cursor import CodepointCursor, Text
from .digit_runs import Ordering, compare_digit_runs

__all__ = ["compare", "natural_key", "natural_sorted", "string_less"]

DIGIT_0 = ord("0")
DIGIT_9 = ord("9")

# ordinal of an exhausted side; sorts before every real character
END_OF_INPUT = -1


def _is_digit(codepoint: Optional[int]) -> bool:
    return codepoint is not None and DIGIT_0 <= codepoint <= DIGIT_9


def _ordinal(codepoint: Optional[int]) -> int:
    return END_OF_INPUT if codepoint is None else codepoint


def _order(left: int, right: int) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare(s1: Text, s2: Text, strict: bool = False) -> Ordering:
    """Three-way natural comparison of `s1` and `s2`."""
    cursor1 = CodepointCursor(s1, strict)
    cursor2 = CodepointCursor(s2, strict)
    run1: List[int] = []
    run2: List[int] = []

    while not cursor1.exhausted or not cursor2.exhausted:
        c1 = cursor1.next()
        is_digit1 = _is_digit(c1)
        if is_digit1:
            run1.append(c1)

        c2 = cursor2.next()
        is_digit2 = _is_digit(c2)
        if is_digit2:
            run2.append(c2)

        if c1 is None or c2 is None or (is_digit1 and is_digit2):
            continue

        if run1 and run2:
            result = compare_digit_runs(run1, run2)
            if result is not Ordering.EQUAL:
                return result

            # a side still inside its run steps onto its own boundary
            if is_digit1:
                c1 = cursor1.next()
            if is_digit2:
                c2 = cursor2.next()

            run1.clear()
            run2.clear()

        if c1 != c2:
            return _order(_ordinal(c1), _ordinal(c2))

    if run1 or run2:
        result = compare_digit_runs(run1, run2)
        if result is not Ordering.EQUAL:
            return result

    return _order(len(cursor1), len(cursor2))


def string_less(s1: Text, s2: Text) -> bool:
    return compare(s1, s2) is Ordering.LESS


natural_key = cmp_to_key(compare)


def natural_sorted(
    items: Iterable[Text], reverse: bool = False, strict: bool = False
) -> List[Text]:
    if strict:
        key = cmp_to_key(lambda a, b: compare(a, b, strict=True))
    else:
        key = natural_key
    return sorted(items, key=key, reverse=reverse)
