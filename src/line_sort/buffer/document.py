"""Line storage used by the sorter and the hosts that drive it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class LineBuffer(Protocol):
    """Minimal surface the sorting core needs from a host buffer."""

    @property
    def line_count(self) -> int:
        ...

    def get_line(self, index: int) -> str:
        ...

    def set_line(self, index: int, text: str) -> None:
        ...


@dataclass(slots=True)
class BufferDocument:
    """Mutable list-of-lines document.

    Lines never carry their trailing newline. ``version`` increases on every
    effective write so hosts can cheaply detect that a command changed
    something.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        # Only "\n" ends a line; "\r", form feeds and other separators stay
        # part of the line so a rewrite reproduces the input byte for byte.
        return cls(_lines=text.split("\n"))

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "BufferDocument":
        return cls(_lines=list(lines) or [""])

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def set_line(self, index: int, text: str) -> None:
        if self._lines[index] == text:
            return
        self._lines[index] = text
        self.version += 1
        self.dirty = True
