"""Positions and selections reported by hosts."""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    """Zero-based ``(line, column)`` location inside a buffer."""

    line: int
    column: int


class Selection(NamedTuple):
    start: Position
    end: Position

    @classmethod
    def of(cls, start: tuple[int, int], end: tuple[int, int]) -> "Selection":
        return cls(Position(*start), Position(*end))

    @classmethod
    def lines(cls, first: int, last: int) -> "Selection":
        """Select whole lines ``first..last`` (inclusive) the way editors do.

        The end sits at column 0 of the line after ``last``.
        """

        return cls(Position(first, 0), Position(last + 1, 0))

    def normalized(self) -> "Selection":
        if self.end < self.start:
            return Selection(self.end, self.start)
        return self
