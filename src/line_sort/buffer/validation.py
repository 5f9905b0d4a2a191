"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument


class BufferValidationError(RuntimeError):
    """Raised when a caller addresses a line the document does not have."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


def ensure_line(document: BufferDocument, index: int) -> int:
    if index < 0 or index >= document.line_count:
        raise BufferValidationError("Line out of range", index=index)
    return index
