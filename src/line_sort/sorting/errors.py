"""Error taxonomy reported to hosts when a sort command fails."""

from __future__ import annotations

from enum import Enum


class SortErrorKind(str, Enum):
    # Only REGEX_ERROR is ever produced; bad ranges are skipped silently.
    INVALID_SELECTION = "invalid_selection"
    PARSE_ERROR = "parse_error"
    REGEX_ERROR = "regex_error"


class SortError(RuntimeError):
    """Raised before any buffer write when a command cannot run."""

    def __init__(self, kind: SortErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.value)
        self.kind = kind

    @classmethod
    def regex(cls, message: str) -> "SortError":
        return cls(SortErrorKind.REGEX_ERROR, message)
