import pytest

from memomark.nodes import Bold, Heading, Paragraph, Table, Text
from memomark.table import TableParser
from memomark.tokenizer import tokenize


def _node(text):
    found = TableParser().match(tokenize(text))
    return None if found is None else found[0]


def test_single_column_table():
    expected = Table(
        header=[Paragraph(children=[Text("header")])],
        delimiter=["---"],
        rows=[[Paragraph(children=[Text("cell")])]],
    )
    assert _node("| header |\n| --- |\n| cell |\n") == expected


def test_two_column_table():
    text = (
        "| **header1** | header2 |\n| --- | ---- |\n"
        "| cell1 | cell2 |\n| cell3 | cell4 |"
    )
    expected = Table(
        header=[
            Paragraph(children=[Bold(symbol="*", children=[Text("header1")])]),
            Paragraph(children=[Text("header2")]),
        ],
        delimiter=["---", "----"],
        rows=[
            [Paragraph(children=[Text("cell1")]), Paragraph(children=[Text("cell2")])],
            [Paragraph(children=[Text("cell3")]), Paragraph(children=[Text("cell4")])],
        ],
    )
    assert _node(text) == expected


def test_size_excludes_trailing_newline():
    _, size = TableParser().match(tokenize("| header |\n| --- |\n| cell |\n"))
    assert size == 19


def test_size_covers_whole_table():
    text = "| a | b |\n| --- | --- |\n| c | d |\n| e | f |"
    _, size = TableParser().match(tokenize(text))
    assert size == len(tokenize(text))


def test_stops_at_row_with_other_cell_count():
    text = "| a |\n| --- |\n| b |\n| c | d |"
    node, size = TableParser().match(tokenize(text))
    assert node.rows == [[Paragraph(children=[Text("b")])]]
    assert size == len(tokenize("| a |\n| --- |\n| b |"))


def test_aligned_delimiters_are_kept():
    node = _node("| a | b | c |\n| :-- | --: | :-: |\n| 1 | 2 | 3 |")
    assert node.delimiter == [":--", "--:", ":-:"]


def test_heading_in_cell():
    node = _node("| # Title |\n| --- |\n| x |")
    assert node.header == [Heading(level=1, children=[Text("Title")])]


@pytest.mark.parametrize(
    "text",
    [
        "| a |\n| --- |",
        "| a |\n| -x- |\n| b |",
        "| a |\n| -- |\n| b |",
        "| a | b |\n| --- |\n| c | d |",
        "|a|\n| --- |\n| b |",
        "| a |\n| --- |\nplain",
        "a | b\n--- | ---\nc | d",
    ],
)
def test_rejects_malformed_tables(text):
    assert TableParser().match(tokenize(text)) is None


def test_restore_round_trip():
    text = "| header |\n| --- |\n| cell |"
    assert _node(text).restore() == text