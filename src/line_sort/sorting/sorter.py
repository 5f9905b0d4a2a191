"""The single sort primitive every command mode funnels through."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, List

from line_sort.buffer.document import LineBuffer
from line_sort.runtime import telemetry

from .comparators import Comparator
from .ranges import LineRange


def _three_way(comparator: Comparator) -> Callable[[str, str], int]:
    def compare(lhs: str, rhs: str) -> int:
        if comparator(lhs, rhs):
            return -1
        if comparator(rhs, lhs):
            return 1
        return 0

    return compare


def sorted_lines(lines: List[str], comparator: Comparator) -> List[str]:
    """Stable sort of ``lines``; ties keep their original relative order."""

    return sorted(lines, key=cmp_to_key(_three_way(comparator)))


def sort_in_place(
    buffer: LineBuffer, line_range: LineRange, comparator: Comparator
) -> bool:
    """Sort the lines of ``line_range`` inside ``buffer``.

    Ranges that are empty or fall outside the buffer are skipped. Nothing is
    written when the range is already in order. Returns whether the buffer
    was written to.
    """

    if line_range.is_empty or not line_range.within(buffer.line_count):
        telemetry.record_event(
            "sort.skipped",
            level="debug",
            data={
                "lo": line_range.lo,
                "hi": line_range.hi,
                "line_count": buffer.line_count,
            },
        )
        return False

    original = [buffer.get_line(index) for index in line_range]
    ordered = sorted_lines(original, comparator)
    if ordered == original:
        return False

    for index in line_range:
        new = ordered[index - line_range.lo]
        if new != original[index - line_range.lo]:
            buffer.set_line(index, new)
    telemetry.record_event(
        "sort.write",
        level="debug",
        data={"lo": line_range.lo, "hi": line_range.hi},
    )
    return True


__all__ = ["sort_in_place", "sorted_lines"]
