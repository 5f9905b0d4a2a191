"""What a host hands over when it runs a sort command."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Callable, List, Optional

from line_sort.buffer import Buffer, LineBuffer, RegisterBank, Selection
from line_sort.sorting.errors import SortError

CompletionHandler = Callable[[Optional[SortError]], None]


@dataclass(slots=True)
class CommandInvocation:
    """One command run: identifier, target buffer, selections, registers.

    Without an explicit ``register_bank`` the buffer's own bank is used when
    the buffer is a :class:`~line_sort.buffer.Buffer`, otherwise an empty one.
    """

    command_identifier: str
    buffer: LineBuffer
    selections: List[Selection] = field(default_factory=list)
    register_bank: InitVar[Optional[RegisterBank]] = None
    registers: RegisterBank = field(init=False)

    def __post_init__(self, register_bank: Optional[RegisterBank]) -> None:
        if register_bank is not None:
            self.registers = register_bank
        elif isinstance(self.buffer, Buffer):
            self.registers = self.buffer.registers
        else:
            self.registers = RegisterBank()

    def find_pattern(self) -> Optional[str]:
        return self.registers.find_pattern()
