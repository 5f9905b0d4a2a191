"""The shared find register regex sorting reads its pattern from."""

from __future__ import annotations

from typing import Optional


class RegisterBank:
    """Holds the search text a host last put on its find pasteboard."""

    def __init__(self) -> None:
        self._find_pattern: Optional[str] = None

    def set_find_pattern(self, pattern: str) -> None:
        self._find_pattern = pattern

    def find_pattern(self) -> Optional[str]:
        return self._find_pattern

    def clear(self) -> None:
        self._find_pattern = None
