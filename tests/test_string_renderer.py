import pytest

from memomark.nodes import (
    AutoLink,
    CodeBlock,
    EmbeddedContent,
    HTMLElement,
    Image,
    Link,
    MathBlock,
    Node,
    NodeType,
    Paragraph,
    ReferencedContent,
    Table,
    TaskListItem,
    Text,
)
from memomark.parser import parse
from memomark.string_renderer import StringRenderer
from memomark.tokenizer import tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("Hello world!", "Hello world!\n"),
        ("**Hello** world!", "Hello world!\n"),
        ("Test\n1. Hello\n2. World", "Test\n1. Hello\n2. World"),
    ],
)
def test_render_parsed_text(text, expected):
    nodes = parse(tokenize(text))
    assert StringRenderer().render(nodes) == expected


def test_heading_drops_markup():
    assert StringRenderer().render(parse(tokenize("# Hi"))) == "Hi\n"


def test_tag_keeps_pound_sign():
    assert StringRenderer().render(parse(tokenize("#tag"))) == "#tag\n"


def test_escaping_character_kept():
    assert StringRenderer().render(parse(tokenize("\\#"))) == "\\#\n"


def test_links_render_as_urls():
    nodes = [
        Link(text="label", url="https://example.com/a"),
        AutoLink(url="https://example.com/b", is_raw_text=True),
    ]
    assert (
        StringRenderer().render(nodes) == "https://example.com/ahttps://example.com/b"
    )


def test_invisible_nodes_render_nothing():
    nodes = [
        Image(alt_text="alt", url="https://example.com/i.png"),
        EmbeddedContent(resource_name="memos/1"),
        ReferencedContent(resource_name="memos/2"),
    ]
    assert StringRenderer().render(nodes) == ""


def test_html_element_renders_newline():
    assert StringRenderer().render([HTMLElement(tag_name="br")]) == "\n"


def test_code_and_math_blocks():
    nodes = [CodeBlock(language="go", content="x := 1"), MathBlock(content="a=3")]
    assert StringRenderer().render(nodes) == "x := 1a=3\n"


def test_task_list_item_uses_symbol():
    item = TaskListItem(symbol="-", complete=True, children=[Text(content="done")])
    assert StringRenderer().render([item]) == "-done"


def test_output_accumulates_across_calls():
    renderer = StringRenderer()
    assert renderer.render([Paragraph(children=[Text(content="one")])]) == "one\n"
    assert renderer.render([Text(content="two")]) == "one\ntwo"


def test_unknown_node_renders_nothing():
    class Custom(Node):
        node_type = NodeType.TEXT

        def restore(self) -> str:
            return "custom"

    assert StringRenderer().render([Custom()]) == ""