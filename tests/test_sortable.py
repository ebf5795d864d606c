# Path: tests/test_sortable.py
"""Tests for the sortable-collection adapter."""

import random

from src.alnumsort import SortableStrings, compare, sort_sortable, sort_strings


class IntSlice:
    def __init__(self, values):
        self.values = values

    def __len__(self):
        return len(self.values)

    def swap(self, i, j):
        self.values[i], self.values[j] = self.values[j], self.values[i]

    def less(self, i, j):
        return self.values[i] < self.values[j]


class TestSortableStrings:
    """Tests for the SortableStrings adapter."""

    def test_len_swap_less(self):
        data = SortableStrings(["abc10", "abc2"])
        assert len(data) == 2
        assert data.less(1, 0)
        assert not data.less(0, 1)
        assert not data.less(0, 0)

        data.swap(0, 1)
        assert list(data) == ["abc2", "abc10"]
        assert data[0] == "abc2"

    def test_uses_injected_comparator(self):
        descending = SortableStrings(["a1", "a10", "a2"], lambda a, b: compare(b, a))
        sort_sortable(descending)
        assert descending.items == ["a10", "a2", "a1"]


class TestSortSortable:
    """Tests for the generic in-place sorter."""

    def test_sorts_any_sortable(self):
        values = list(range(50))
        random.Random(7).shuffle(values)
        data = IntSlice(values)
        sort_sortable(data)
        assert data.values == list(range(50))

    def test_empty_and_single(self):
        empty = IntSlice([])
        sort_sortable(empty)
        assert empty.values == []

        single = IntSlice([3])
        sort_sortable(single)
        assert single.values == [3]


class TestSortStrings:
    """End-to-end sorting through the adapter."""

    def test_image_file_names(self):
        files = ["img12.png", "img2.png", "img1.png", "img10.png"]
        assert sort_strings(files) == ["img1.png", "img2.png", "img10.png", "img12.png"]

    def test_sorts_in_place(self):
        files = ["ep10", "ep2", "ep1"]
        result = sort_strings(files)
        assert result is files
        assert files == ["ep1", "ep2", "ep10"]

    def test_duplicates_are_kept(self):
        assert sort_strings(["b1", "a", "b1", "a"]) == ["a", "a", "b1", "b1"]
