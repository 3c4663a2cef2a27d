"""Inline parsers for links, images, auto links, references and HTML elements."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urlsplit

from .core import Match
from .nodes import AutoLink, HTMLElement, Image, Link, ReferencedContent
from .tokenizer import Token, TokenType, find_unescaped, first_line, stringify

_AVAILABLE_HTML_ELEMENTS = frozenset({"br"})


def _is_absolute_url(text: str) -> bool:
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    return bool(parts.scheme) and bool(host)


def _split_params(tokens: Sequence[Token]) -> tuple[str, str]:
    index = find_unescaped(tokens, TokenType.QUESTION_MARK)
    if index > 0:
        return stringify(tokens[:index]), stringify(tokens[index + 1 :])
    return stringify(tokens), ""


class AutoLinkParser:
    """Matches ``<url>`` or a bare absolute URL."""

    def match(self, tokens: Sequence[Token]) -> Match:
        if len(tokens) < 3:
            return None
        matched = first_line(tokens)
        if not matched:
            return None

        if matched[0].type == TokenType.LESS_THAN:
            close = find_unescaped(matched, TokenType.GREATER_THAN)
            if close < 0:
                return None
            matched = matched[: close + 1]
            return AutoLink(url=stringify(matched[1:-1]), is_raw_text=False), len(
                matched
            )

        content: list[Token] = []
        for token in matched:
            if token.type == TokenType.SPACE:
                break
            content.append(token)
        if not content:
            return None
        url = stringify(content)
        if not _is_absolute_url(url):
            return None
        return AutoLink(url=url, is_raw_text=True), len(content)


class ImageParser:
    """Matches ``![alt](url)``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if len(matched) < 5:
            return None
        if (
            matched[0].type != TokenType.EXCLAMATION_MARK
            or matched[1].type != TokenType.LEFT_SQUARE_BRACKET
        ):
            return None

        cursor = 2
        alt: list[Token] = []
        while cursor < len(matched) - 2:
            if matched[cursor].type == TokenType.RIGHT_SQUARE_BRACKET:
                break
            alt.append(matched[cursor])
            cursor += 1
        if matched[cursor + 1].type != TokenType.LEFT_PARENTHESIS:
            return None

        url: list[Token] = []
        for token in matched[cursor + 2 :]:
            if token.type == TokenType.SPACE:
                return None
            if token.type == TokenType.RIGHT_PARENTHESIS:
                break
            url.append(token)
        else:
            return None
        if not url:
            return None
        return Image(alt_text=stringify(alt), url=stringify(url)), 5 + len(alt) + len(
            url
        )


class LinkParser:
    """Matches ``[text](url)``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if len(matched) < 5 or matched[0].type != TokenType.LEFT_SQUARE_BRACKET:
            return None

        text: list[Token] = []
        for token in matched[1:]:
            if token.type == TokenType.RIGHT_SQUARE_BRACKET:
                break
            text.append(token)
        if len(text) + 4 >= len(matched):
            return None
        if matched[2 + len(text)].type != TokenType.LEFT_PARENTHESIS:
            return None

        url: list[Token] = []
        for token in matched[3 + len(text) :]:
            if token.type == TokenType.SPACE:
                return None
            if token.type == TokenType.RIGHT_PARENTHESIS:
                break
            url.append(token)
        else:
            return None
        if not url:
            return None
        return Link(text=stringify(text), url=stringify(url)), 4 + len(text) + len(url)


class ReferencedContentParser:
    """Matches ``[[resource]]`` or ``[[resource?params]]``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        matched = first_line(tokens)
        if len(matched) < 5:
            return None
        if (
            matched[0].type != TokenType.LEFT_SQUARE_BRACKET
            or matched[1].type != TokenType.LEFT_SQUARE_BRACKET
        ):
            return None

        content: list[Token] = []
        for index, token in enumerate(matched[2:-1], start=2):
            if (
                token.type == TokenType.RIGHT_SQUARE_BRACKET
                and matched[index + 1].type == TokenType.RIGHT_SQUARE_BRACKET
            ):
                break
            content.append(token)
        else:
            return None

        resource_name, params = _split_params(content)
        return (
            ReferencedContent(resource_name=resource_name, params=params),
            len(content) + 4,
        )


class HTMLElementParser:
    """Matches a self-closing element without attributes, such as ``<br />``."""

    def match(self, tokens: Sequence[Token]) -> Match:
        if len(tokens) < 5 or tokens[0].type != TokenType.LESS_THAN:
            return None
        tag_name = tokens[1].value
        if tag_name not in _AVAILABLE_HTML_ELEMENTS:
            return None

        close = find_unescaped(tokens, TokenType.GREATER_THAN)
        if (
            close + 1 < 5
            or tokens[close - 1].type != TokenType.SLASH
            or tokens[close - 2].type != TokenType.SPACE
        ):
            return None
        if close - 2 > 2:
            # Attributes are not supported.
            return None
        return HTMLElement(tag_name=tag_name, attributes={}), close + 1