"""Textual host adapter."""

from .controller import (
    TextAreaLineBuffer,
    TextualSortAdapter,
    TextualUIHooks,
    selection_from_text_area,
)

__all__ = [
    "TextAreaLineBuffer",
    "TextualSortAdapter",
    "TextualUIHooks",
    "selection_from_text_area",
]
