import io
import sys

import pytest

from line_sort.cli import main


@pytest.fixture(autouse=True)
def _no_pattern_env(monkeypatch) -> None:
    monkeypatch.delenv("LINE_SORT_PATTERN", raising=False)


def test_sorts_whole_file_to_stdout(tmp_path, capsys) -> None:
    path = tmp_path / "names.txt"
    path.write_text("carol\nalice\nbob\n", encoding="utf-8")

    assert main(["normal", str(path)]) == 0

    assert capsys.readouterr().out == "alice\nbob\ncarol\n"
    assert path.read_text(encoding="utf-8") == "carol\nalice\nbob\n"


def test_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("B\na\nA"))

    assert main(["folding"]) == 0

    assert capsys.readouterr().out == "a\nA\nB"


def test_line_spans_limit_the_sort(tmp_path, capsys) -> None:
    path = tmp_path / "data.txt"
    path.write_text("z\nc\nb\na\ny\n", encoding="utf-8")

    main(["normal", str(path), "--lines", "2:4"])

    assert capsys.readouterr().out == "z\na\nb\nc\ny\n"


def test_include_mode_in_place(tmp_path) -> None:
    path = tmp_path / "imports.py"
    path.write_text(
        "import os\nimport abc\n\nimport zlib\nimport json\n", encoding="utf-8"
    )

    assert main(["include", str(path), "--in-place"]) == 0

    assert path.read_text(encoding="utf-8") == (
        "import abc\nimport os\n\nimport json\nimport zlib\n"
    )


def test_regex_mode_uses_pattern_option(tmp_path, capsys) -> None:
    path = tmp_path / "items.txt"
    path.write_text("item 2\nitem 10\nitem 1\n", encoding="utf-8")

    main(["regex", str(path), "--pattern", r"(\d+)"])

    assert capsys.readouterr().out == "item 1\nitem 10\nitem 2\n"


def test_regex_mode_reads_pattern_from_environment(
    tmp_path, capsys, monkeypatch
) -> None:
    monkeypatch.setenv("LINE_SORT_PATTERN", r"ITEM (\d)")
    path = tmp_path / "items.txt"
    path.write_text("item 2\nitem 1\n", encoding="utf-8")

    main(["regex", str(path)])

    assert capsys.readouterr().out == "item 1\nitem 2\n"


def test_regex_mode_without_pattern_fails(tmp_path, capsys) -> None:
    path = tmp_path / "items.txt"
    path.write_text("b\na\n", encoding="utf-8")

    assert main(["regex", str(path), "--in-place"]) == 1

    captured = capsys.readouterr()
    assert captured.err.startswith("line-sort: ")
    assert captured.out == ""
    assert path.read_text(encoding="utf-8") == "b\na\n"


@pytest.mark.parametrize("span", ["4:2", "0:3", "x:y"])
def test_bad_line_span_is_a_usage_error(tmp_path, span) -> None:
    path = tmp_path / "data.txt"
    path.write_text("a\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["normal", str(path), "--lines", span])

    assert excinfo.value.code == 2


def test_in_place_requires_file() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["normal", "--in-place"])

    assert excinfo.value.code == 2


def test_form_feed_stays_inside_its_line(tmp_path) -> None:
    path = tmp_path / "paged.txt"
    path.write_bytes("b\x0cpage\na\n".encode("utf-8"))

    assert main(["normal", str(path), "--in-place"]) == 0

    assert path.read_bytes() == "a\nb\x0cpage\n".encode("utf-8")


def test_crlf_line_endings_survive_in_place_sort(tmp_path) -> None:
    path = tmp_path / "windows.txt"
    path.write_bytes(b"b\r\na\r\n")

    assert main(["normal", str(path), "--in-place"]) == 0

    assert path.read_bytes() == b"a\r\nb\r\n"


def test_line_spans_count_only_newlines(tmp_path) -> None:
    path = tmp_path / "paged.py"
    path.write_bytes("x = 1\x0c# page two\nb\na\n".encode("utf-8"))

    main(["normal", str(path), "--lines", "2:3", "--in-place"])

    assert path.read_bytes() == "x = 1\x0c# page two\na\nb\n".encode("utf-8")
