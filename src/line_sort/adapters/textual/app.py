"""Executable Textual app for sorting lines interactively."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Input, Static, TextArea

from .controller import TextualSortAdapter, TextualUIHooks


class LineSortApp(App[None]):
    """TextArea plus a pattern field; F-keys run the sort commands."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#pattern {
		height: 3;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("f2", "sort('normal')", "Sort"),
        ("f3", "sort('folding')", "Ignore case"),
        ("f4", "sort('ignore')", "Ignore indent"),
        ("f5", "sort('include')", "Sort groups"),
        ("f6", "sort('regex')", "Sort by pattern"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = "", path: Optional[Path] = None) -> None:
        super().__init__()
        self._initial_text = text
        self.path = path
        self.adapter: TextualSortAdapter | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield TextArea(self._initial_text, id="editor")
        yield Input(
            placeholder="regex for F6, capture groups drive the order", id="pattern"
        )
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(update_status=self._update_status, log=self.log)
        self.adapter = TextualSortAdapter(self.query_one("#editor", TextArea), hooks)
        if self.path is not None:
            self.title = str(self.path)

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.adapter and event.input.id == "pattern":
            self.adapter.set_pattern(event.value)

    def action_sort(self, command: str) -> None:
        if self.adapter:
            self.adapter.run(command)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sort lines in a Textual editor.")
    parser.add_argument("file", nargs="?", type=Path, help="file to open")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = args.file.read_text(encoding="utf-8") if args.file else ""
    LineSortApp(text=text, path=args.file).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
