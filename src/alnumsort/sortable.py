# Path: src/alnumsort/sortable.py
import logging
from typing import Callable, Iterator, List, Protocol

from .comparator import compare
from .cursor import Text
from .digit_runs import Ordering

__all__ = ["Sortable", "SortableStrings", "sort_sortable", "sort_strings"]

log = logging.getLogger(__name__)

Comparator = Callable[[Text, Text], int]


class Sortable(Protocol):
    """Minimal contract a generic in-place sorter needs."""

    def __len__(self) -> int: ...

    def swap(self, i: int, j: int) -> None: ...

    def less(self, i: int, j: int) -> bool: ...


class SortableStrings:
    """
    Adapter exposing a mutable list of strings through the Sortable contract.

    Storage and ordering stay separate: `less` delegates to the injected
    three-way comparator.
    """

    def __init__(self, items: List[Text], comparator: Comparator = compare):
        self.items = items
        self.comparator = comparator

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Text:
        return self.items[index]

    def __iter__(self) -> Iterator[Text]:
        return iter(self.items)

    def swap(self, i: int, j: int) -> None:
        self.items[i], self.items[j] = self.items[j], self.items[i]

    def less(self, i: int, j: int) -> bool:
        return self.comparator(self.items[i], self.items[j]) < Ordering.EQUAL


def _sift_down(data: Sortable, root: int, end: int):
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        if child + 1 < end and data.less(child, child + 1):
            child += 1
        if not data.less(root, child):
            return
        data.swap(root, child)
        root = child


def sort_sortable(data: Sortable):
    """In-place heap sort driven only by len/swap/less."""
    n = len(data)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(data, root, n)
    for end in range(n - 1, 0, -1):
        data.swap(0, end)
        _sift_down(data, 0, end)


def sort_strings(items: List[Text], comparator: Comparator = compare) -> List[Text]:
    log.debug(f"Sorting {len(items)} items in place.")
    sort_sortable(SortableStrings(items, comparator))
    return items
