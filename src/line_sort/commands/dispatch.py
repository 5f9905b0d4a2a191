"""Top-level command dispatch: identifier -> comparator + structural mode."""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import ContextManager, Dict, List, Optional

from line_sort.buffer import Buffer, LineBuffer, Selection
from line_sort.runtime import telemetry
from line_sort.sorting.comparators import (
    Comparator,
    compile_pattern,
    is_lower,
    is_lower_case_insensitive,
    is_lower_ignoring_leading_whitespace,
    projected,
)
from line_sort.sorting.errors import SortError
from line_sort.sorting.ranges import LineRange, resolve, segment
from line_sort.sorting.sorter import sort_in_place

from .invocation import CommandInvocation, CompletionHandler

COMMAND_NAMESPACE = "line_sort.sort"

RANGE = "range"
GROUP = "group"
REGEX = "regex"


@dataclass(frozen=True, slots=True)
class SortMode:
    name: str
    comparator: Comparator
    structure: str = RANGE


_COMMAND_TABLE: Dict[str, SortMode] = {
    "folding": SortMode("folding", is_lower_case_insensitive),
    "ignore": SortMode("ignore", is_lower_ignoring_leading_whitespace),
    "include": SortMode("include", is_lower_case_insensitive, GROUP),
    "normal": SortMode("normal", is_lower),
    "regex": SortMode("regex", is_lower, REGEX),
}

COMMAND_NAMES = tuple(_COMMAND_TABLE)


def lookup(command_identifier: str) -> Optional[SortMode]:
    """Find the mode for a bare (``"normal"``) or namespaced identifier."""

    mode = _COMMAND_TABLE.get(command_identifier)
    if mode is not None:
        return mode
    prefix = f"{COMMAND_NAMESPACE}."
    if command_identifier.startswith(prefix):
        return _COMMAND_TABLE.get(command_identifier[len(prefix) :])
    return None


def run_command(invocation: CommandInvocation) -> Optional[SortError]:
    """Execute ``invocation`` and return the error it failed with, if any.

    Unknown identifiers succeed without touching the buffer.
    """

    mode = lookup(invocation.command_identifier)
    if mode is None:
        telemetry.record_event(
            "command.unknown",
            level="debug",
            data={"command": invocation.command_identifier},
        )
        return None

    with telemetry.span(
        f"commands::{mode.name}",
        component="commands",
        metadata={"selections": len(invocation.selections)},
    ) as handle:
        try:
            comparator = _comparator_for(mode, invocation)
        except SortError as error:
            telemetry.record_event(
                "command.failed",
                level="warning",
                data={"command": mode.name, "kind": error.kind.value},
            )
            return error

        written = 0
        with _grouped_writes(invocation.buffer, mode.name):
            for selection in invocation.selections:
                written += _sort_selection(
                    invocation.buffer, selection, mode, comparator
                )
        handle.finish(ranges_written=written)
    return None


def perform(invocation: CommandInvocation, completion: CompletionHandler) -> None:
    """Run ``invocation`` and report the outcome through ``completion`` once."""

    completion(run_command(invocation))


def _comparator_for(mode: SortMode, invocation: CommandInvocation) -> Comparator:
    if mode.structure != REGEX:
        return mode.comparator
    pattern = compile_pattern(invocation.find_pattern())
    return projected(mode.comparator, pattern)


def _ranges_for(
    buffer: LineBuffer, selection: Selection, mode: SortMode
) -> List[LineRange]:
    line_range = resolve(selection)
    if mode.structure == GROUP:
        return segment(line_range, buffer)
    return [line_range]


def _sort_selection(
    buffer: LineBuffer, selection: Selection, mode: SortMode, comparator: Comparator
) -> int:
    return sum(
        sort_in_place(buffer, line_range, comparator)
        for line_range in _ranges_for(buffer, selection, mode)
    )


def _grouped_writes(buffer: LineBuffer, label: str) -> ContextManager[object]:
    if isinstance(buffer, Buffer):
        return buffer.transaction(f"sort.{label}")
    return nullcontext()


__all__ = [
    "COMMAND_NAMES",
    "COMMAND_NAMESPACE",
    "SortMode",
    "lookup",
    "perform",
    "run_command",
]
