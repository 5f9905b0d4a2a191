"""Line ranges: resolving them from selections and splitting at blank lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from line_sort.buffer.document import LineBuffer
from line_sort.buffer.state import Selection


@dataclass(frozen=True, slots=True)
class LineRange:
    """Inclusive ``[lo, hi]`` interval of line indices.

    ``hi < lo`` is allowed and means the range is empty; a selection that
    ends at column 0 of its own start line resolves to such a range.
    """

    lo: int
    hi: int

    @property
    def is_empty(self) -> bool:
        return self.hi < self.lo

    def within(self, line_count: int) -> bool:
        return self.lo >= 0 and self.hi < line_count

    def __len__(self) -> int:
        return max(0, self.hi - self.lo + 1)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.lo, self.hi + 1))


def resolve(selection: Selection) -> LineRange:
    """Return the lines a selection covers.

    An end at column 0 sits at the start of a line the selection does not
    include, so the range stops on the line before it.
    """

    start, end = selection
    last = end.line - 1 if end.column == 0 else end.line
    return LineRange(start.line, last)


def is_blank(line: str) -> bool:
    return not line.strip()


def segment(line_range: LineRange, buffer: LineBuffer) -> List[LineRange]:
    """Split ``line_range`` into the runs of non-blank lines it contains.

    Blank lines only separate groups and belong to none of them. Empty or
    out-of-bounds ranges yield no groups.
    """

    if line_range.is_empty or not line_range.within(buffer.line_count):
        return []

    groups: List[LineRange] = []
    first: int | None = None
    for index in line_range:
        if is_blank(buffer.get_line(index)):
            if first is not None:
                groups.append(LineRange(first, index - 1))
                first = None
        elif first is None:
            first = index
    if first is not None:
        groups.append(LineRange(first, line_range.hi))
    return groups


__all__ = ["LineRange", "is_blank", "resolve", "segment"]
