import pytest

from memomark.core import (
    LineBreakParser,
    ParseError,
    TextParser,
    merge_list_item_nodes,
    merge_text_nodes,
    parse_block_with_parsers,
    parse_inline_with_parsers,
)
from memomark.nodes import (
    Bold,
    LineBreak,
    List,
    ListKind,
    OrderedListItem,
    Paragraph,
    TaskListItem,
    Text,
    UnorderedListItem,
    restore,
)
from memomark.tokenizer import tokenize


def test_text_parser_takes_first_token():
    tokens = tokenize("Hello world")
    node, size = TextParser().match(tokens)
    assert size == 1
    assert node == Text(content=tokens[0].value)


def test_text_parser_empty_input():
    assert TextParser().match([]) is None


def test_line_break_parser_matches_newline():
    node, size = LineBreakParser().match(tokenize("\nabc"))
    assert size == 1
    assert node == LineBreak()


@pytest.mark.parametrize("text", ["", "abc", " \n"])
def test_line_break_parser_rejects(text):
    assert LineBreakParser().match(tokenize(text)) is None


def test_parse_inline_merges_text():
    text = "Hello world!"
    nodes = parse_inline_with_parsers(tokenize(text), [TextParser()])
    assert nodes == [Text(content=text)]


def test_parse_inline_round_trip_with_line_breaks():
    text = "one\ntwo\n\nthree"
    nodes = parse_inline_with_parsers(
        tokenize(text), [LineBreakParser(), TextParser()]
    )
    assert restore(nodes) == text
    assert sum(isinstance(n, LineBreak) for n in nodes) == text.count("\n")


def test_parse_block_raises_when_nothing_matches():
    with pytest.raises(ParseError):
        parse_block_with_parsers(tokenize("Hello"), [LineBreakParser()])


def test_parse_inline_empty():
    assert parse_inline_with_parsers([], [TextParser()]) == []


def test_merge_text_nodes_joins_adjacent_runs():
    bold = Bold(symbol="*", children=[Text(content="b")])
    original = [Text(content="a"), Text(content="c"), bold, Text(content="d")]
    merged = merge_text_nodes(original)
    assert len(merged) == 3
    assert merged[1] is bold
    assert restore(merged) == restore(original)


def test_merge_text_nodes_empty():
    assert merge_text_nodes([]) == []


def test_merge_list_items_siblings():
    first = OrderedListItem(number="1", children=[Text(content="a")])
    second = OrderedListItem(number="2", children=[Text(content="b")])
    br = LineBreak()
    result = merge_list_item_nodes([first, br, second])
    assert len(result) == 1
    lst = result[0]
    assert isinstance(lst, List)
    assert lst.kind == ListKind.ORDERED
    assert lst.children == [first, br, second]


def test_merge_list_items_nested_by_indent():
    outer = UnorderedListItem(symbol="*", children=[Text(content="a")])
    inner = UnorderedListItem(symbol="*", indent=2, children=[Text(content="b")])
    result = merge_list_item_nodes([outer, LineBreak(), inner])
    assert len(result) == 1
    top = result[0]
    nested = top.children[-1]
    assert isinstance(nested, List)
    assert nested.indent == inner.indent
    assert nested.children == [inner]


def test_merge_list_items_different_kinds_make_two_lists():
    ordered = OrderedListItem(number="1", children=[Text(content="a")])
    task = TaskListItem(symbol="-", children=[Text(content="b")])
    result = merge_list_item_nodes([ordered, LineBreak(), task])
    assert [node.kind for node in result] == [ListKind.ORDERED, ListKind.DESCRIPTION]
    assert result[1].children == [task]


def test_merge_list_items_paragraph_resets():
    first = UnorderedListItem(symbol="*", children=[Text(content="a")])
    para = Paragraph(children=[Text(content="p")])
    second = UnorderedListItem(symbol="*", children=[Text(content="b")])
    result = merge_list_item_nodes([first, para, second])
    assert len(result) == 3
    assert result[1] is para
    assert result[2].children == [second]