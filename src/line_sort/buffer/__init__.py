"""Buffer abstractions, registers and undo history."""

from .buffer import Buffer, Transaction
from .document import BufferDocument, LineBuffer
from .registers import RegisterBank
from .state import Position, Selection
from .undo import UndoEntry, UndoTimeline
from .validation import BufferValidationError, ensure_line

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferValidationError",
    "LineBuffer",
    "Position",
    "RegisterBank",
    "Selection",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "ensure_line",
]
