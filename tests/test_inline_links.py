import pytest

from memomark.inline_links import (
    AutoLinkParser,
    HTMLElementParser,
    ImageParser,
    LinkParser,
    ReferencedContentParser,
)
from memomark.nodes import AutoLink, HTMLElement, Image, Link, ReferencedContent
from memomark.tokenizer import tokenize


def _node(parser, text):
    found = parser.match(tokenize(text))
    return None if found is None else found[0]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<https://example.com)", None),
        ("<https://example.com>", AutoLink(url="https://example.com")),
        (
            "https://example.com",
            AutoLink(url="https://example.com", is_raw_text=True),
        ),
    ],
)
def test_auto_link(text, expected):
    assert _node(AutoLinkParser(), text) == expected


def test_auto_link_rejects_relative_text():
    assert _node(AutoLinkParser(), "hello world") is None


def test_auto_link_size_stops_at_space():
    text = "https://example.com rest"
    node, size = AutoLinkParser().match(tokenize(text))
    assert node.restore() == "https://example.com"
    assert size == len(tokenize("https://example.com"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("![](https://example.com)", Image(alt_text="", url="https://example.com")),
        ("! [](https://example.com)", None),
        ("![alte]( htt ps :/ /example.com)", None),
        (
            "![al te](https://example.com)",
            Image(alt_text="al te", url="https://example.com"),
        ),
    ],
)
def test_image(text, expected):
    assert _node(ImageParser(), text) == expected


def test_image_size_covers_whole_input():
    text = "![al te](https://example.com)"
    tokens = tokenize(text)
    node, size = ImageParser().match(tokens)
    assert size == len(tokens)
    assert node.restore() == text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[](https://example.com)", Link(text="", url="https://example.com")),
        ("! [](https://example.com)", None),
        ("[alte]( htt ps :/ /example.com)", None),
        (
            "[your/slash](https://example.com)",
            Link(text="your/slash", url="https://example.com"),
        ),
        (
            "[hello world](https://example.com)",
            Link(text="hello world", url="https://example.com"),
        ),
    ],
)
def test_link(text, expected):
    assert _node(LinkParser(), text) == expected


def test_link_size_covers_whole_input():
    text = "[hello world](https://example.com)"
    tokens = tokenize(text)
    node, size = LinkParser().match(tokens)
    assert size == len(tokens)
    assert node.restore() == text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[[Hello world]", None),
        ("[[Hello world]]", ReferencedContent(resource_name="Hello world")),
        ("[[memos/1]]", ReferencedContent(resource_name="memos/1")),
        ("[[resources/101]]111\n123", ReferencedContent(resource_name="resources/101")),
        (
            "[[resources/101?align=center]]",
            ReferencedContent(resource_name="resources/101", params="align=center"),
        ),
        (
            "[[resources/6uxnhT98q8vN8anBbUbRGu?align=center]]",
            ReferencedContent(
                resource_name="resources/6uxnhT98q8vN8anBbUbRGu",
                params="align=center",
            ),
        ),
    ],
)
def test_referenced_content(text, expected):
    assert _node(ReferencedContentParser(), text) == expected


def test_referenced_content_round_trip():
    text = "[[resources/101?align=center]]"
    tokens = tokenize(text)
    node, size = ReferencedContentParser().match(tokens)
    assert size == len(tokens)
    assert node.restore() == text


def test_html_element():
    assert _node(HTMLElementParser(), "<br />") == HTMLElement(
        tag_name="br", attributes={}
    )


@pytest.mark.parametrize("text", ["<br>", "<div />", "<br class />", "br />"])
def test_html_element_rejects(text):
    assert _node(HTMLElementParser(), text) is None


def test_html_element_size():
    tokens = tokenize("<br /> tail")
    node, size = HTMLElementParser().match(tokens)
    assert size == len(tokenize("<br />"))
    assert node.restore() == "<br />"