"""Sort selected lines of a text buffer with pluggable comparison rules."""

from line_sort.commands import CommandInvocation, perform, run_command
from line_sort.sorting import SortError, SortErrorKind

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "runtime",
    "sorting",
    "CommandInvocation",
    "SortError",
    "SortErrorKind",
    "perform",
    "run_command",
]

__version__ = "0.1.0"
