"""``line-sort``: run a sort command over a file or stdin."""

from __future__ import annotations

import argparse
import io
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from line_sort.buffer import Buffer, Selection
from line_sort.commands import COMMAND_NAMES, CommandInvocation, run_command
from line_sort.runtime import telemetry

LineSpan = Tuple[int, int]


def _line_span(value: str) -> LineSpan:
    """Parse ``START:END`` (1-based, inclusive) into a pair of ints."""

    start, sep, end = value.partition(":")
    try:
        first = int(start)
        last = int(end) if sep else first
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected START:END line numbers, got {value!r}"
        ) from exc
    if first < 1 or last < first:
        raise argparse.ArgumentTypeError(
            f"line span must satisfy 1 <= START <= END, got {value!r}"
        )
    return first, last


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="line-sort", description="Sort lines of a file by a comparison rule."
    )
    parser.add_argument("mode", choices=COMMAND_NAMES, help="sort rule to apply")
    parser.add_argument(
        "file", nargs="?", type=Path, help="input file (default: stdin)"
    )
    parser.add_argument(
        "--lines",
        action="append",
        type=_line_span,
        default=[],
        metavar="START:END",
        help="1-based inclusive line span to sort; repeatable (default: all)",
    )
    parser.add_argument(
        "--pattern",
        default=os.environ.get("LINE_SORT_PATTERN"),
        help="regular expression for the 'regex' mode (env: LINE_SORT_PATTERN)",
    )
    parser.add_argument(
        "--in-place",
        action="store_true",
        help="rewrite FILE instead of printing the result",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="log debug telemetry to the console"
    )
    args = parser.parse_args(argv)
    if args.in_place and args.file is None:
        parser.error("--in-place requires FILE")
    return args


def _selections(buffer: Buffer, spans: List[LineSpan], text: str) -> List[Selection]:
    if spans:
        return [Selection.lines(first - 1, last - 1) for first, last in spans]
    last = buffer.line_count - 1
    if text.endswith("\n"):
        last -= 1
    return [Selection.lines(0, max(last, 0))]


def _read_stdin() -> str:
    stream = getattr(sys.stdin, "buffer", None)
    if stream is None:
        return sys.stdin.read()
    return io.TextIOWrapper(stream, encoding="utf-8", newline="").read()


def _read_file(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_file(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(preset="development" if args.verbose else "quiet")

    if args.file is None:
        text = _read_stdin()
        name = "<stdin>"
    else:
        text = _read_file(args.file)
        name = str(args.file)

    buffer = Buffer.from_text(text, name=name)
    if args.pattern:
        buffer.registers.set_find_pattern(args.pattern)

    invocation = CommandInvocation(
        command_identifier=args.mode,
        buffer=buffer,
        selections=_selections(buffer, args.lines, text),
    )
    error = run_command(invocation)
    if error is not None:
        print(f"line-sort: {error}", file=sys.stderr)
        return 1

    if args.in_place:
        if buffer.document.dirty:
            _write_file(args.file, buffer.text())
    else:
        sys.stdout.write(buffer.text())
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
