import pytest

from mdextras.tables import ColumnAlignment, RowContent, scan_alignment_row, scan_row


@pytest.mark.parametrize(
    "line, count",
    [("", 0), ("a", 1), ("a | b", 2), ("a | b | c", 3)],
)
def test_should_split_cells(line, count):
    assert len(scan_row(line)) == count


@pytest.mark.parametrize(
    "line, count",
    [
        ("foo | bar", 2),
        ("foo | bar |", 2),
        ("| foo | bar", 2),
        ("| foo | bar |", 2),
        ("| | foo | bar | |", 4),
        ("|", 0),
        ("||", 1),
    ],
)
def test_should_ignore_leading_trailing_empty_cells(line, count):
    assert len(scan_row(line)) == count


@pytest.mark.parametrize("line", ["|foo|", "| foo |", "|\tfoo\t|", "| \t foo \t |"])
def test_should_trim_cell_content(line):
    assert scan_row(line)[0].text == "foo"


@pytest.mark.parametrize(
    "line, expected",
    [
        (r"| foo\bar |", r"foo\bar"),
        (r"| foo\|bar |", r"foo|bar"),
        (r"| foo\\|bar |", r"foo\|bar"),
        (r"| foo\\\|bar |", r"foo\\|bar"),
        (r"| foo\\\\|bar |", r"foo\\\|bar"),
    ],
)
def test_should_process_backslash_escapes(line, expected):
    assert scan_row(line)[0].text == expected


def test_should_trim_cell_content_srcmaps():
    row = scan_row("| foo | \tbar\t |")
    assert row[0].text == "foo"
    assert row[0].srcmap == [(0, 2)]
    assert row[1].text == "bar"
    assert row[1].srcmap == [(0, 9)]


def test_should_process_backslash_escapes_srcmaps():
    row = scan_row(r"|  foo\\|bar\\\|baz\  |")
    assert row[0].text == r"foo\|bar\\|baz\ ".rstrip()
    assert row[0].srcmap == [(0, 3), (4, 8), (10, 15)]


def test_row_content_values():
    assert scan_row("a | b") == [RowContent("a", [(0, 0)]), RowContent("b", [(0, 4)])]


def test_alignment_row_requires_pipe_or_colon():
    assert scan_alignment_row("---") is None


def test_alignment_row_with_leading_pipe():
    assert scan_alignment_row("|---") == [ColumnAlignment.NONE]


def test_alignment_row_with_leading_colon():
    assert scan_alignment_row(":---") == [ColumnAlignment.LEFT]


def test_alignment_row_all_kinds():
    assert scan_alignment_row("| --- | :-- | --: | :-: |") == [
        ColumnAlignment.NONE,
        ColumnAlignment.LEFT,
        ColumnAlignment.RIGHT,
        ColumnAlignment.CENTER,
    ]


@pytest.mark.parametrize("line", ["a | b", "- | -", "| : |", "| -x- |", "|:-:-|a"])
def test_alignment_row_rejects(line):
    assert scan_alignment_row(line) is None


def test_alignment_row_rejects_dash_between_cells_without_content():
    assert scan_alignment_row("| ::|") is None


def test_alignment_styles():
    alignments = scan_alignment_row("| --- | :-- | --: | :-: |")
    assert [alignment.style for alignment in alignments] == [
        None,
        "text-align:left",
        "text-align:right",
        "text-align:center",
    ]