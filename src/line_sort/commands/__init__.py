"""Command invocation model and the dispatch table."""

from .dispatch import (
    COMMAND_NAMES,
    COMMAND_NAMESPACE,
    SortMode,
    lookup,
    perform,
    run_command,
)
from .invocation import CommandInvocation, CompletionHandler

__all__ = [
    "COMMAND_NAMES",
    "COMMAND_NAMESPACE",
    "CommandInvocation",
    "CompletionHandler",
    "SortMode",
    "lookup",
    "perform",
    "run_command",
]
