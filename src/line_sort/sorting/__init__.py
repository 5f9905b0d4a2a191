"""Range resolution, segmentation, comparators and the sort primitive."""

from .comparators import (
    Comparator,
    compile_pattern,
    is_lower,
    is_lower_case_insensitive,
    is_lower_ignoring_leading_whitespace,
    project,
    projected,
)
from .errors import SortError, SortErrorKind
from .ranges import LineRange, resolve, segment
from .sorter import sort_in_place, sorted_lines

__all__ = [
    "Comparator",
    "LineRange",
    "SortError",
    "SortErrorKind",
    "compile_pattern",
    "is_lower",
    "is_lower_case_insensitive",
    "is_lower_ignoring_leading_whitespace",
    "project",
    "projected",
    "resolve",
    "segment",
    "sort_in_place",
    "sorted_lines",
]
