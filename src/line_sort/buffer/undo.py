"""Undo/redo history for line rewrites."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

LineChange = Tuple[str, str]  # (before, after)


@dataclass(slots=True)
class UndoEntry:
    label: str
    changes: Dict[int, LineChange] = field(default_factory=dict)

    def record(self, index: int, before: str, after: str) -> None:
        if index in self.changes:
            before = self.changes[index][0]
        if before == after:
            self.changes.pop(index, None)
            return
        self.changes[index] = (before, after)

    @property
    def empty(self) -> bool:
        return not self.changes


class UndoTimeline:
    """Linear undo/redo history."""

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []
        self._index: int = -1

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: UndoEntry) -> None:
        if self._index < len(self._entries) - 1:
            self._entries = self._entries[: self._index + 1]
        self._entries.append(entry)
        self._index = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]
