import pytest

from memomark.html_renderer import HTMLRenderer
from memomark.nodes import (
    AutoLink,
    CodeBlock,
    EmbeddedContent,
    HorizontalRule,
    HTMLElement,
    Image,
    LineBreak,
    Link,
    MathBlock,
    Paragraph,
    ReferencedContent,
    Spoiler,
    Text,
)
from memomark.parser import parse
from memomark.tokenizer import tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello world!", "<p>Hello world!</p>"),
        ("# Hello world!", "<h1>Hello world!</h1>"),
        ("> Hello\n> world!", "<blockquote><p>Hello</p><p>world!</p></blockquote>"),
        ("*Hello* world!", "<p><em>Hello</em> world!</p>"),
        (
            "Hello world!\n\nNew paragraph.",
            "<p>Hello world!</p><br><p>New paragraph.</p>",
        ),
        ("**Hello** world!", "<p><strong>Hello</strong> world!</p>"),
        ("#article #memo", "<p><span>#article</span> <span>#memo</span></p>"),
        ("#article \\#memo", "<p><span>#article</span> \\#memo</p>"),
        ("* Hello\n* world!", "<ul><li>Hello</li><br><li>world!</li></ul>"),
        (
            "- [ ] hello\n- [x] world",
            '<dl><li><input type="checkbox" disabled />hello</li><br>'
            '<li><input type="checkbox" checked disabled />world</li></dl>',
        ),
    ],
)
def test_render_parsed_markdown(text, expected):
    assert HTMLRenderer().render(parse(tokenize(text))) == expected


def test_table_rendering():
    nodes = parse(tokenize("| a | b |\n| --- | --- |\n| c | d |"))
    assert HTMLRenderer().render(nodes) == (
        "<table><thead><tr><th><p>a</p></th><th><p>b</p></th></tr></thead>"
        "<tbody><tr><td><p>c</p></td><td><p>d</p></td></tr></tbody></table>"
    )


@pytest.mark.parametrize(
    "node, expected",
    [
        (CodeBlock(language="go", content="x := 1"), "<pre><code>x := 1</code></pre>"),
        (MathBlock(content="a=3"), "<pre><code>a=3</code></pre>"),
        (HorizontalRule(symbol="-"), "<hr>"),
        (
            Image(alt_text="alt", url="https://example.com/a.png"),
            '<img src="https://example.com/a.png" alt="alt" />',
        ),
        (
            Link(text="site", url="https://example.com"),
            '<a href="https://example.com">site</a>',
        ),
        (
            AutoLink(url="https://example.com"),
            '<a href="https://example.com">https://example.com</a>',
        ),
        (
            EmbeddedContent(resource_name="resources/101", params="align=center"),
            "<div>resources/101?align=center</div>",
        ),
        (ReferencedContent(resource_name="memos/1"), "<div>memos/1</div>"),
        (Spoiler(content="secret"), "<details><summary>secret</summary></details>"),
        (HTMLElement(tag_name="br"), "<br >"),
    ],
)
def test_render_single_node(node, expected):
    assert HTMLRenderer().render([node]) == expected


def test_line_break_after_inline_is_kept():
    nodes = [Text("a"), LineBreak(), Text("b")]
    assert HTMLRenderer().render(nodes) == "a<br>b"


def test_only_first_line_break_after_block_is_dropped():
    nodes = [Paragraph(children=[Text("a")]), LineBreak(), LineBreak(), LineBreak()]
    assert HTMLRenderer().render(nodes) == "<p>a</p><br><br>"


def test_output_accumulates_across_render_calls():
    renderer = HTMLRenderer()
    renderer.render([Text("one")])
    assert renderer.render([Text("two")]) == "onetwo"


def test_render_empty():
    assert HTMLRenderer().render([]) == ""