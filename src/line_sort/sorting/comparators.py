"""Comparison rules used to order lines.

A comparator is a plain ``(lhs, rhs) -> bool`` predicate answering "does
``lhs`` sort strictly before ``rhs``". Every rule here is a strict weak
ordering, which is what :func:`line_sort.sorting.sorter.sort_in_place`
needs for a stable result.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Pattern

from .errors import SortError

Comparator = Callable[[str, str], bool]

_LEADING_BLANKS = re.compile(r"^[^\S\r\n]+")


def is_lower(lhs: str, rhs: str) -> bool:
    return lhs < rhs


def is_lower_case_insensitive(lhs: str, rhs: str) -> bool:
    return lhs.casefold() < rhs.casefold()


def strip_leading_blanks(line: str) -> str:
    """Drop leading spaces and tabs; trailing whitespace is kept."""

    return _LEADING_BLANKS.sub("", line, count=1)


def is_lower_ignoring_leading_whitespace(lhs: str, rhs: str) -> bool:
    return strip_leading_blanks(lhs) < strip_leading_blanks(rhs)


def compile_pattern(source: Optional[str]) -> Pattern[str]:
    """Compile a sort pattern, always case-insensitively.

    Raises :class:`SortError` (``REGEX_ERROR``) when there is no pattern or
    it does not compile.
    """

    if not source:
        raise SortError.regex("no search pattern available")
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as exc:
        raise SortError.regex(f"invalid pattern {source!r}: {exc}") from exc


def project(line: str, pattern: Pattern[str]) -> str:
    """Concatenate the capture groups of every match of ``pattern`` in ``line``.

    Group 0 is ignored; optional groups that did not take part in a match
    contribute nothing. A line without matches projects to ``""``.
    """

    return "".join(
        "".join(group or "" for group in match.groups())
        for match in pattern.finditer(line)
    )


def projected(comparator: Comparator, pattern: Pattern[str]) -> Comparator:
    """Wrap ``comparator`` so it compares regex projections, not raw lines."""

    def compare(lhs: str, rhs: str) -> bool:
        return comparator(project(lhs, pattern), project(rhs, pattern))

    compare.__name__ = f"projected_{getattr(comparator, '__name__', 'comparator')}"
    return compare


__all__ = [
    "Comparator",
    "compile_pattern",
    "is_lower",
    "is_lower_case_insensitive",
    "is_lower_ignoring_leading_whitespace",
    "project",
    "projected",
    "strip_leading_blanks",
]
