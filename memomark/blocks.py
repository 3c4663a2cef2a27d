"""Block parsers: headings, rules, quotes, list items, fenced blocks, paragraphs."""

from __future__ import annotations

from typing import Sequence

from .core import Match, ParseError, parse_block_with_parsers
from .inline import parse_inline
from .nodes import (
    Blockquote,
    CodeBlock,
    EmbeddedContent,
    Heading,
    HorizontalRule,
    MathBlock,
    OrderedListItem,
    Paragraph,
    TaskListItem,
    UnorderedListItem,
)
from .tokenizer import Token, TokenType, find_unescaped, first_line, split, stringify

_LIST_SYMBOLS = frozenset({TokenType.HYPHEN, TokenType.ASTERISK, TokenType.PLUS_SIGN})
_RULE_SYMBOLS = frozenset({TokenType.HYPHEN, TokenType.ASTERISK})
_LANGUAGE_TOKEN_TYPES = frozenset(
    {TokenType.TEXT, TokenType.NUMBER, TokenType.UNDERSCORE}
)


def _leading_spaces(tokens: Sequence[Token]) -> int:
    count = 0
    for token in tokens:
        if token.type != TokenType.SPACE:
            break
        count += 1
    return count


def _is_row_of(row: Sequence[Token], symbol: TokenType, count: int) -> bool:
    return len(row) == count and all(token.type == symbol for token in row)


def _join_rows(rows: Sequence[Sequence[Token]]) -> list[Token]:
    """Concatenate rows, putting a newline token between consecutive rows."""
    joined: list[Token] = []
    for index, row in enumerate(rows):
        if index:
            joined.append(Token(TokenType.NEW_LINE, "\n"))
        joined.extend(row)
    return joined


class HeadingParser:
    """Matches ``# text`` through ``###### text``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        level = find_unescaped(matched, TokenType.SPACE)
        if level < 0:
            return None
        if any(token.type != TokenType.POUND_SIGN for token in matched[:level]):
            return None
        if level == 0 or level > 6:
            return None
        content = matched[level + 1 :]
        if not content:
            return None
        try:
            children = parse_inline(content)
        except ParseError:
            return None
        return Heading(level=level, children=children), len(content) + level + 1


class HorizontalRuleParser:
    """Matches a line of exactly ``---`` or ``***``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if len(matched) < 3:
            return None
        if len(matched) > 3 and matched[3].type != TokenType.NEW_LINE:
            return None
        first = matched[0].type
        if matched[1].type != first or matched[2].type != first:
            return None
        if first not in _RULE_SYMBOLS:
            return None
        return HorizontalRule(symbol=first.value), 3


class BlockquoteParser:
    """Matches consecutive ``> text`` lines; quotes may nest."""

    def match(self, tokens: Sequence[Token]) -> Match:
        rows: list[list[Token]] = []
        for row in split(tokens, TokenType.NEW_LINE):
            if (
                len(row) < 3
                or row[0].type != TokenType.GREATER_THAN
                or row[1].type != TokenType.SPACE
            ):
                break
            rows.append(row)
        if not rows:
            return None

        children = []
        for row in rows:
            try:
                nodes = parse_block_with_parsers(
                    row[2:], [BlockquoteParser(), ParagraphParser()]
                )
            except ParseError:
                return None
            if len(nodes) != 1:
                return None
            children.append(nodes[0])
        size = sum(len(row) for row in rows) + len(rows) - 1
        return Blockquote(children=children), size


class OrderedListItemParser:
    """Matches ``1. text``, optionally indented with spaces."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        indent = _leading_spaces(matched)
        if len(matched) < indent + 3:
            return None
        if (
            matched[indent].type != TokenType.NUMBER
            or matched[indent + 1].type != TokenType.DOT
            or matched[indent + 2].type != TokenType.SPACE
        ):
            return None
        content = matched[indent + 3 :]
        if not content:
            return None
        try:
            children = parse_inline(content)
        except ParseError:
            return None
        return (
            OrderedListItem(
                number=matched[indent].value, indent=indent, children=children
            ),
            indent + 3 + len(content),
        )


class TaskListItemParser:
    """Matches ``- [ ] text`` or ``- [x] text`` with ``-``, ``*`` or ``+``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        indent = _leading_spaces(matched)
        if len(matched) < indent + 6:
            return None
        symbol = matched[indent]
        if symbol.type not in _LIST_SYMBOLS:
            return None
        if matched[indent + 1].type != TokenType.SPACE:
            return None
        mark = matched[indent + 3]
        if (
            matched[indent + 2].type != TokenType.LEFT_SQUARE_BRACKET
            or (mark.type != TokenType.SPACE and mark.value != "x")
            or matched[indent + 4].type != TokenType.RIGHT_SQUARE_BRACKET
        ):
            return None
        if matched[indent + 5].type != TokenType.SPACE:
            return None
        content = matched[indent + 6 :]
        if not content:
            return None
        try:
            children = parse_inline(content)
        except ParseError:
            return None
        return (
            TaskListItem(
                symbol=symbol.type.value,
                indent=indent,
                complete=mark.value == "x",
                children=children,
            ),
            indent + len(content) + 6,
        )


class UnorderedListItemParser:
    """Matches ``- text``, ``* text`` or ``+ text``, optionally indented."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        indent = _leading_spaces(matched)
        if len(matched) < indent + 2:
            return None
        symbol = matched[indent]
        if symbol.type not in _LIST_SYMBOLS or matched[indent + 1].type != TokenType.SPACE:
            return None
        content = matched[indent + 2 :]
        if not content:
            return None
        try:
            children = parse_inline(content)
        except ParseError:
            return None
        return (
            UnorderedListItem(
                symbol=symbol.type.value, indent=indent, children=children
            ),
            indent + len(content) + 2,
        )


class CodeBlockParser:
    """Matches a fenced code block with an optional language name."""

    def match(self, tokens: Sequence[Token]) -> Match:
        rows = split(tokens, TokenType.NEW_LINE)
        if len(rows) < 3:
            return None
        opening = rows[0]
        if len(opening) < 3 or any(
            token.type != TokenType.BACKTICK for token in opening[:3]
        ):
            return None
        language = opening[3:]
        if any(token.type not in _LANGUAGE_TOKEN_TYPES for token in language):
            return None

        content_rows: list[list[Token]] = []
        for row in rows[1:]:
            if _is_row_of(row, TokenType.BACKTICK, 3):
                break
            content_rows.append(row)
        else:
            return None

        content = _join_rows(content_rows)
        return (
            CodeBlock(language=stringify(language), content=stringify(content)),
            4 + len(language) + len(content) + 4,
        )


class MathBlockParser:
    """Matches a block of math between lines holding only ``$$``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        rows = split(tokens, TokenType.NEW_LINE)
        if len(rows) < 3:
            return None
        if not _is_row_of(rows[0], TokenType.DOLLAR_SIGN, 2):
            return None

        content_rows: list[list[Token]] = []
        for row in rows[1:]:
            if _is_row_of(row, TokenType.DOLLAR_SIGN, 2):
                break
            content_rows.append(row)
        else:
            return None

        content = _join_rows(content_rows)
        return MathBlock(content=stringify(content)), 3 + len(content) + 3


class EmbeddedContentParser:
    """Matches a whole line of ``![[resource]]`` or ``![[resource?params]]``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if len(matched) < 6:
            return None
        if (
            matched[0].type != TokenType.EXCLAMATION_MARK
            or matched[1].type != TokenType.LEFT_SQUARE_BRACKET
            or matched[2].type != TokenType.LEFT_SQUARE_BRACKET
        ):
            return None
        if (
            matched[-2].type != TokenType.RIGHT_SQUARE_BRACKET
            or matched[-1].type != TokenType.RIGHT_SQUARE_BRACKET
        ):
            return None

        content = matched[3:-2]
        resource_name, params = stringify(content), ""
        question = find_unescaped(content, TokenType.QUESTION_MARK)
        if question > 0:
            resource_name = stringify(content[:question])
            params = stringify(content[question + 1 :])
        return (
            EmbeddedContent(resource_name=resource_name, params=params),
            len(matched),
        )


class ParagraphParser:
    """Matches the rest of the current line as inline content."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if not matched:
            return None
        try:
            children = parse_inline(matched)
        except ParseError:
            return None
        return Paragraph(children=children), len(matched)