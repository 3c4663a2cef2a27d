"""Block-level parsing with the default parsers, and the top-level entry points."""

from __future__ import annotations

from typing import Sequence

from .blocks import (
    BlockquoteParser,
    CodeBlockParser,
    EmbeddedContentParser,
    HeadingParser,
    HorizontalRuleParser,
    MathBlockParser,
    OrderedListItemParser,
    ParagraphParser,
    TaskListItemParser,
    UnorderedListItemParser,
)
from .core import LineBreakParser, parse_block_with_parsers
from .nodes import Node
from .table import TableParser
from .tokenizer import Token, tokenize

_DEFAULT_BLOCK_PARSERS = (
    CodeBlockParser(),
    TableParser(),
    HorizontalRuleParser(),
    HeadingParser(),
    BlockquoteParser(),
    OrderedListItemParser(),
    TaskListItemParser(),
    UnorderedListItemParser(),
    MathBlockParser(),
    EmbeddedContentParser(),
    ParagraphParser(),
    LineBreakParser(),
)


def parse_block(tokens: Sequence[Token]) -> list[Node]:
    """Parse tokens into block nodes using every block parser, in priority order."""
    return parse_block_with_parsers(tokens, _DEFAULT_BLOCK_PARSERS)


def parse(tokens: Sequence[Token]) -> list[Node]:
    """Parse a token sequence into a list of syntax tree nodes."""
    return parse_block(tokens)


def parse_markdown(markdown: str) -> list[Node]:
    """Tokenize and parse markdown text into a list of syntax tree nodes."""
    return parse(tokenize(markdown))