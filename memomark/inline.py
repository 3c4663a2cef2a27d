"""Inline parsing with the default set of inline parsers."""

from __future__ import annotations

from typing import Sequence

from .core import LineBreakParser, TextParser, parse_inline_with_parsers
from .inline_links import (
    AutoLinkParser,
    HTMLElementParser,
    ImageParser,
    LinkParser,
    ReferencedContentParser,
)
from .inline_marks import (
    BoldItalicParser,
    BoldParser,
    CodeParser,
    EscapingCharacterParser,
    HighlightParser,
    ItalicParser,
    MathParser,
    SpoilerParser,
    StrikethroughParser,
    SubscriptParser,
    SuperscriptParser,
    TagParser,
)
from .nodes import Node
from .tokenizer import Token

_DEFAULT_INLINE_PARSERS = (
    EscapingCharacterParser(),
    HTMLElementParser(),
    BoldItalicParser(),
    ImageParser(),
    LinkParser(),
    AutoLinkParser(),
    BoldParser(),
    ItalicParser(),
    SpoilerParser(),
    HighlightParser(),
    CodeParser(),
    SubscriptParser(),
    SuperscriptParser(),
    MathParser(),
    ReferencedContentParser(),
    TagParser(),
    StrikethroughParser(),
    LineBreakParser(),
    TextParser(),
)


def parse_inline(tokens: Sequence[Token]) -> list[Node]:
    """Parse tokens into inline nodes using every inline parser, in priority order."""
    return parse_inline_with_parsers(tokens, _DEFAULT_INLINE_PARSERS)