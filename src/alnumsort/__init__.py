# Path: src/alnumsort/__init__.py
from .comparator import compare, natural_key, natural_sorted, string_less
from .cursor import CodepointCursor, MalformedInputError, advance_codepoint
from .digit_runs import Ordering, compare_digit_runs
from .sortable import Sortable, SortableStrings, sort_sortable, sort_strings

__all__ = [
    "CodepointCursor",
    "MalformedInputError",
    "Ordering",
    "Sortable",
    "SortableStrings",
    "advance_codepoint",
    "compare",
    "compare_digit_runs",
    "natural_key",
    "natural_sorted",
    "sort_sortable",
    "sort_strings",
    "string_less",
]
