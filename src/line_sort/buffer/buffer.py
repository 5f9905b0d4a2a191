"""High-level buffer façade combining document, registers, and undo."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional, Sequence

from line_sort.runtime import telemetry

from .document import BufferDocument
from .registers import RegisterBank
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_line


class Buffer:
    """Line buffer with registers and grouped, undoable writes.

    Satisfies :class:`~line_sort.buffer.document.LineBuffer`. Writes made
    inside :meth:`transaction` collapse into a single undo entry; a bare
    :meth:`set_line` gets an entry of its own.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        registers: Optional[RegisterBank] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.registers = registers or RegisterBank()
        self.history = undo or UndoTimeline()
        self._active: Optional[Transaction] = None

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @classmethod
    def from_lines(cls, lines: Sequence[str], *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_lines(lines))

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def get_line(self, index: int) -> str:
        return self.document.get_line(ensure_line(self.document, index))

    def set_line(self, index: int, text: str) -> None:
        ensure_line(self.document, index)
        if self._active is None:
            with self.transaction("set_line"):
                self._write(index, text)
            return
        self._write(index, text)

    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    def text(self) -> str:
        return self.document.text()

    def transaction(self, label: str) -> "Transaction":
        return Transaction(self, label)

    def undo(self) -> bool:
        entry = self.history.undo()
        if entry is None:
            return False
        for index, (before, _after) in entry.changes.items():
            self.document.set_line(index, before)
        return True

    def redo(self) -> bool:
        entry = self.history.redo()
        if entry is None:
            return False
        for index, (_before, after) in entry.changes.items():
            self.document.set_line(index, after)
        return True

    def _write(self, index: int, text: str) -> None:
        before = self.document.get_line(index)
        if before == text:
            return
        self.document.set_line(index, text)
        assert self._active is not None
        self._active.entry.record(index, before, text)


class Transaction(AbstractContextManager["Transaction"]):
    """Groups line writes into one undo entry.

    Nested transactions join the outermost one. If the block raises, every
    line written so far is restored and nothing reaches the undo history.
    """

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.entry = UndoEntry(label=label)
        self._span_cm: Optional[ContextManager[object]] = None
        self._joined: Optional[Transaction] = None

    def __enter__(self) -> "Transaction":
        if self.buffer._active is not None:
            self._joined = self.buffer._active
            self.entry = self._joined.entry
            return self
        self.buffer._active = self
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    @property
    def changed(self) -> bool:
        return not self.entry.empty

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._joined is not None:
            return False
        self.buffer._active = None
        try:
            if exc_type is not None:
                self._rollback()
            elif self.changed:
                self.buffer.history.push(self.entry)
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False

    def _rollback(self) -> None:
        for index, (before, _after) in self.entry.changes.items():
            self.buffer.document.set_line(index, before)
