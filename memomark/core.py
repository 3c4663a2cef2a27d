"""Parsing driver: runs block and inline parsers over tokens and tidies the result."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .nodes import (
    LineBreak,
    List,
    Node,
    NodeType,
    Text,
    is_list_item_node,
    list_item_kind_and_indent,
)
from .tokenizer import Token, TokenType

Match = Optional[tuple[Node, int]]


class ParseError(ValueError):
    """Raised when no parser accepts the tokens at the current position."""


class Parser(Protocol):
    """Anything that can recognise a node at the start of a token sequence."""

    def match(self, tokens: Sequence[Token]) -> Match:
        """Return the node found and the number of tokens it used, or None."""


class TextParser:
    """Turns the first token into plain text; matches anything non-empty."""

    def match(self, tokens: Sequence[Token]) -> Match:
        if not tokens:
            return None
        return Text(content=str(tokens[0])), 1


class LineBreakParser:
    """Matches a single newline token."""

    def match(self, tokens: Sequence[Token]) -> Match:
        if not tokens or tokens[0].type != TokenType.NEW_LINE:
            return None
        return LineBreak(), 1


def _run_parsers(tokens: Sequence[Token], parsers: Sequence[Parser]) -> list[Node]:
    nodes: list[Node] = []
    position = 0
    while position < len(tokens):
        remaining = tokens[position:]
        for parser in parsers:
            found = parser.match(remaining)
            if found is not None and found[1] != 0:
                node, size = found
                nodes.append(node)
                position += size
                break
        else:
            raise ParseError(
                f"no parser matches the tokens at position {position}"
            )
    return nodes


def parse_block_with_parsers(
    tokens: Sequence[Token], parsers: Sequence[Parser]
) -> list[Node]:
    """Parse block nodes with the given parsers, trying them in order."""
    return merge_list_item_nodes(_run_parsers(tokens, parsers))


def parse_inline_with_parsers(
    tokens: Sequence[Token], parsers: Sequence[Parser]
) -> list[Node]:
    """Parse inline nodes with the given parsers, trying them in order."""
    return merge_text_nodes(_run_parsers(tokens, parsers))


def merge_list_item_nodes(nodes: Iterable[Node]) -> list[Node]:
    """Gather consecutive list items into (possibly nested) list nodes."""
    result: list[Node] = []
    stack: list[List] = []

    for node in nodes:
        if node.node_type == NodeType.LINE_BREAK:
            if stack and result and result[-1].node_type == NodeType.LIST:
                stack[-1].children.append(node)
            else:
                result.append(node)
            continue

        if not is_list_item_node(node):
            result.append(node)
            stack = []
            continue

        kind, indent = list_item_kind_and_indent(node)
        if not stack or kind != stack[-1].kind or indent > stack[-1].indent:
            new_list = List(kind=kind, indent=indent, children=[node])
            if stack and indent > stack[-1].indent:
                stack[-1].children.append(new_list)
            else:
                result.append(new_list)
            stack.append(new_list)
        else:
            while stack and (kind != stack[-1].kind or indent < stack[-1].indent):
                stack.pop()
            if stack:
                stack[-1].children.append(node)
            else:
                result.append(node)

    return result


def merge_text_nodes(nodes: Iterable[Node]) -> list[Node]:
    """Join runs of adjacent text nodes into single text nodes."""
    result: list[Node] = []
    for node in nodes:
        if result and isinstance(node, Text) and isinstance(result[-1], Text):
            result[-1] = Text(content=result[-1].content + node.content)
        else:
            result.append(node)
    return result