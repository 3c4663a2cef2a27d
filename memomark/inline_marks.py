"""Inline parsers for emphasis, code, math, scripts, tags and escapes."""

from __future__ import annotations

from typing import Optional, Sequence

from .core import Match, ParseError, TextParser, parse_inline_with_parsers
from .inline_links import LinkParser
from .nodes import (
    Bold,
    BoldItalic,
    Code,
    EscapingCharacter,
    Highlight,
    Italic,
    Math,
    Spoiler,
    Strikethrough,
    Subscript,
    Superscript,
    Tag,
)
from .tokenizer import Token, TokenType, find_unescaped, first_line, stringify


def _enclosed_by_single(
    tokens: Sequence[Token], symbol: TokenType
) -> Optional[list[Token]]:
    """Content between a leading symbol and the next one on the first line."""
    matched = first_line(tokens)
    if len(matched) < 3 or matched[0].type != symbol:
        return None
    content: list[Token] = []
    for token in matched[1:]:
        if token.type == symbol:
            break
        content.append(token)
    else:
        return None
    return content or None


def _enclosed_by_double(
    tokens: Sequence[Token], symbol: TokenType
) -> Optional[Sequence[Token]]:
    """Tokens from a doubled symbol up to and including the next doubled one."""
    matched = first_line(tokens)
    if len(matched) < 5:
        return None
    if matched[0].type != symbol or matched[1].type != symbol:
        return None
    for cursor in range(2, len(matched) - 1):
        if matched[cursor].type == symbol and matched[cursor + 1].type == symbol:
            return matched[: cursor + 2]
    return None


class BoldParser:
    """Matches ``**text**``; the content may hold links."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = _enclosed_by_double(tokens, TokenType.ASTERISK)
        if matched is None:
            return None
        try:
            children = parse_inline_with_parsers(
                matched[2:-2], [LinkParser(), TextParser()]
            )
        except ParseError:
            return None
        if not children:
            return None
        return Bold(symbol=TokenType.ASTERISK.value, children=children), len(matched)


class BoldItalicParser:
    """Matches ``***text***``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if len(matched) < 7:
            return None
        if any(token.type != TokenType.ASTERISK for token in matched[:3]):
            return None
        for cursor in range(3, len(matched) - 2):
            if all(
                token.type == TokenType.ASTERISK
                for token in matched[cursor : cursor + 3]
            ):
                matched = matched[: cursor + 3]
                break
        else:
            return None
        content = matched[3:-3]
        if not content:
            return None
        return (
            BoldItalic(symbol=TokenType.ASTERISK.value, content=stringify(content)),
            len(matched),
        )


class ItalicParser:
    """Matches ``*text*``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        content = _enclosed_by_single(tokens, TokenType.ASTERISK)
        if content is None:
            return None
        return (
            Italic(symbol=TokenType.ASTERISK.value, content=stringify(content)),
            len(content) + 2,
        )


class SpoilerParser:
    """Matches ``||text||``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = _enclosed_by_double(tokens, TokenType.PIPE)
        if matched is None:
            return None
        return Spoiler(content=stringify(matched[2:-2])), len(matched)


class HighlightParser:
    """Matches ``==text==``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = _enclosed_by_double(tokens, TokenType.EQUAL_SIGN)
        if matched is None:
            return None
        return Highlight(content=stringify(matched[2:-2])), len(matched)


class CodeParser:
    """Matches inline code between backticks."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if len(matched) < 3 or matched[0].type != TokenType.BACKTICK:
            return None
        close = find_unescaped(matched[1:], TokenType.BACKTICK)
        if close < 0:
            return None
        matched = matched[: close + 2]
        content = matched[1:-1]
        if not content:
            return None
        return Code(content=stringify(content)), len(matched)


class SubscriptParser:
    """Matches ``~text~``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        content = _enclosed_by_single(tokens, TokenType.TILDE)
        if content is None:
            return None
        return Subscript(content=stringify(content)), len(content) + 2


class SuperscriptParser:
    """Matches ``^text^``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        content = _enclosed_by_single(tokens, TokenType.CARET)
        if content is None:
            return None
        return Superscript(content=stringify(content)), len(content) + 2


class MathParser:
    """Matches inline math ``$formula$``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        content = _enclosed_by_single(tokens, TokenType.DOLLAR_SIGN)
        if content is None:
            return None
        return Math(content=stringify(content)), len(content) + 2


class StrikethroughParser:
    """Matches ``~~text~~``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = _enclosed_by_double(tokens, TokenType.TILDE)
        if matched is None:
            return None
        content = matched[2:-2]
        if not content:
            return None
        return Strikethrough(content=stringify(content)), len(content) + 4


_NOT_ESCAPABLE = frozenset(
    {TokenType.NEW_LINE, TokenType.SPACE, TokenType.TEXT, TokenType.NUMBER}
)


class EscapingCharacterParser:
    """Matches a backslash followed by a symbol."""

    def match(self, tokens: Sequence[Token]) -> Match:
        if len(tokens) < 2 or tokens[0].type != TokenType.BACKSLASH:
            return None
        if tokens[1].type in _NOT_ESCAPABLE:
            return None
        return EscapingCharacter(symbol=tokens[1].value), 2


_TAG_TERMINATORS = frozenset(
    {TokenType.SPACE, TokenType.POUND_SIGN, TokenType.BACKSLASH}
)


class TagParser:
    """Matches ``#tag``, ending at a space, another ``#`` or a backslash."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if len(matched) < 2 or matched[0].type != TokenType.POUND_SIGN:
            return None
        content: list[Token] = []
        for token in matched[1:]:
            if token.type in _TAG_TERMINATORS:
                break
            content.append(token)
        if not content:
            return None
        return Tag(content=stringify(content)), len(content) + 1