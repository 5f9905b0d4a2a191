"""Bridges a Textual ``TextArea`` to the sort commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from line_sort.buffer import RegisterBank, Selection
from line_sort.commands import CommandInvocation, run_command
from line_sort.sorting.errors import SortError


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


class TextAreaLineBuffer:
    """``LineBuffer`` view over a ``TextArea``; each write is one widget edit."""

    def __init__(self, text_area: Any) -> None:
        self.text_area = text_area

    @property
    def line_count(self) -> int:
        return self.text_area.document.line_count

    def get_line(self, index: int) -> str:
        return self.text_area.document.get_line(index)

    def set_line(self, index: int, text: str) -> None:
        old = self.get_line(index)
        self.text_area.replace(text, (index, 0), (index, len(old)))


def selection_from_text_area(text_area: Any) -> Selection:
    """Read the widget selection, ordered start-before-end."""

    start, end = text_area.selection
    return Selection.of(tuple(start), tuple(end)).normalized()


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to surface results in the UI."""

    update_status: Callable[[str], None]
    log: Callable[[str], None] = _noop


class TextualSortAdapter:
    """Runs sort commands against a ``TextArea`` and reports the outcome."""

    def __init__(
        self,
        text_area: Any,
        hooks: TextualUIHooks,
        *,
        registers: Optional[RegisterBank] = None,
    ) -> None:
        self.text_area = text_area
        self.hooks = hooks
        self.registers = registers or RegisterBank()

    def set_pattern(self, pattern: str) -> None:
        if pattern:
            self.registers.set_find_pattern(pattern)
        else:
            self.registers.clear()

    def run(self, command: str) -> Optional[SortError]:
        selection = selection_from_text_area(self.text_area)
        before = self.text_area.text
        invocation = CommandInvocation(
            command_identifier=command,
            buffer=TextAreaLineBuffer(self.text_area),
            selections=[selection],
            register_bank=self.registers,
        )
        self._log_state("command ->", command=command, selection=tuple(selection))
        error = run_command(invocation)
        if error is not None:
            self.hooks.update_status(f"sort failed: {error}")
            self._log_state("error <-", command=command, kind=error.kind.value)
            return error

        changed = self.text_area.text != before
        suffix = "" if changed else " (already sorted)"
        self.hooks.update_status(f"sort::{command}{suffix}")
        self._log_state("result <-", command=command, changed=changed)
        return None

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "lines": self.text_area.document.line_count,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = [
    "TextAreaLineBuffer",
    "TextualSortAdapter",
    "TextualUIHooks",
    "selection_from_text_area",
]
