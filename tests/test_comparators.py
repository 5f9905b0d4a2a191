import re

import pytest

from line_sort.sorting import (
    SortError,
    SortErrorKind,
    compile_pattern,
    is_lower,
    is_lower_case_insensitive,
    is_lower_ignoring_leading_whitespace,
    project,
    projected,
)
from line_sort.sorting.comparators import strip_leading_blanks


def test_plain_order_is_case_sensitive() -> None:
    assert is_lower("B", "a")
    assert not is_lower("a", "B")
    assert not is_lower("a", "a")


def test_case_insensitive_order_ties_on_case() -> None:
    assert is_lower_case_insensitive("a", "B")
    assert not is_lower_case_insensitive("a", "A")
    assert not is_lower_case_insensitive("A", "a")


def test_leading_whitespace_is_ignored() -> None:
    assert is_lower_ignoring_leading_whitespace("  a", "b")
    assert is_lower_ignoring_leading_whitespace("\tb", " c")
    assert not is_lower_ignoring_leading_whitespace("    x", "x")
    assert not is_lower_ignoring_leading_whitespace("x", "    x")


def test_trailing_whitespace_still_counts() -> None:
    assert strip_leading_blanks(" \t a \t") == "a \t"
    assert is_lower_ignoring_leading_whitespace("a", "a ")


def test_projection_concatenates_groups_of_every_match() -> None:
    pattern = re.compile(r"(\w)=(\d)")

    assert project("a=1 b=2", pattern) == "a1b2"


def test_projection_skips_whole_match_and_unmatched_groups() -> None:
    pattern = re.compile(r"x(\d)?")

    assert project("x1 x", pattern) == "1"
    assert project("no hits", re.compile(r"(\d+)")) == ""


def test_projection_without_groups_is_empty() -> None:
    assert project("item 12", re.compile(r"\d+")) == ""


def test_projected_comparator_compares_captures_as_strings() -> None:
    compare = projected(is_lower, re.compile(r"(\d+)"))

    assert compare("item 10", "item 2")
    assert not compare("item 2", "item 10")
    assert not compare("zzz 1", "aaa 1")


def test_compile_pattern_is_case_insensitive() -> None:
    pattern = compile_pattern(r"ITEM (\d+)")

    assert project("item 7", pattern) == "7"


@pytest.mark.parametrize("source", [None, "", "(", "[a-"])
def test_compile_pattern_rejects_missing_or_invalid(source) -> None:
    with pytest.raises(SortError) as excinfo:
        compile_pattern(source)

    assert excinfo.value.kind is SortErrorKind.REGEX_ERROR
