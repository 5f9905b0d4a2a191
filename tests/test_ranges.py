from line_sort.buffer import BufferDocument, Selection
from line_sort.sorting import LineRange, resolve, segment


def make_document(*lines: str) -> BufferDocument:
    return BufferDocument.from_lines(lines)


def test_resolve_keeps_end_line_with_nonzero_column() -> None:
    assert resolve(Selection.of((1, 2), (3, 4))) == LineRange(1, 3)


def test_resolve_drops_end_line_at_column_zero() -> None:
    assert resolve(Selection.of((1, 0), (3, 0))) == LineRange(1, 2)
    assert resolve(Selection.lines(0, 4)) == LineRange(0, 4)


def test_resolve_caret_at_line_start_is_empty() -> None:
    line_range = resolve(Selection.of((2, 0), (2, 0)))

    assert line_range == LineRange(2, 1)
    assert line_range.is_empty
    assert len(line_range) == 0
    assert list(line_range) == []


def test_line_range_bounds() -> None:
    assert LineRange(0, 2).within(3)
    assert not LineRange(0, 3).within(3)
    assert not LineRange(-1, 1).within(3)
    assert list(LineRange(2, 4)) == [2, 3, 4]


def test_segment_splits_at_blank_lines() -> None:
    document = make_document("b", "a", "", "d", "c")

    assert segment(LineRange(0, 4), document) == [LineRange(0, 1), LineRange(3, 4)]


def test_segment_treats_whitespace_only_lines_as_blank() -> None:
    document = make_document("x", "   ", "\t", "y", " \n")

    assert segment(LineRange(0, 4), document) == [LineRange(0, 0), LineRange(3, 3)]


def test_segment_of_blank_range_is_empty() -> None:
    document = make_document("", "  ", "")

    assert segment(LineRange(0, 2), document) == []


def test_segment_respects_range_edges() -> None:
    document = make_document("a", "b", "", "c", "d", "e")

    assert segment(LineRange(1, 4), document) == [LineRange(1, 1), LineRange(3, 4)]


def test_segment_skips_out_of_bounds_and_empty_ranges() -> None:
    document = make_document("a", "b")

    assert segment(LineRange(0, 5), document) == []
    assert segment(LineRange(1, 0), document) == []
