"""Splitting of markdown text into tokens and helpers over token sequences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class TokenType(str, Enum):
    """Kind of a token; symbol tokens use the symbol itself as value."""

    __str__ = str.__str__
    __format__ = str.__format__

    UNDERSCORE = "_"
    ASTERISK = "*"
    POUND_SIGN = "#"
    BACKTICK = "`"
    LEFT_SQUARE_BRACKET = "["
    RIGHT_SQUARE_BRACKET = "]"
    LEFT_PARENTHESIS = "("
    RIGHT_PARENTHESIS = ")"
    EXCLAMATION_MARK = "!"
    QUESTION_MARK = "?"
    TILDE = "~"
    HYPHEN = "-"
    PLUS_SIGN = "+"
    DOT = "."
    LESS_THAN = "<"
    GREATER_THAN = ">"
    DOLLAR_SIGN = "$"
    EQUAL_SIGN = "="
    PIPE = "|"
    COLON = ":"
    CARET = "^"
    APOSTROPHE = "'"
    BACKSLASH = "\\"
    SLASH = "/"
    NEW_LINE = "\n"
    SPACE = " "
    # Text based tokens.
    NUMBER = "number"
    TEXT = ""


_SYMBOLS = {
    member.value: member
    for member in TokenType
    if member not in (TokenType.NUMBER, TokenType.TEXT)
}


@dataclass
class Token:
    """A single token: its type and the text it covers."""

    type: TokenType
    value: str

    def __str__(self) -> str:
        return self.value


def tokenize(text: str) -> list[Token]:
    """Split text into tokens.

    Symbol characters become single tokens; runs of ASCII digits become
    number tokens and runs of other characters become text tokens.
    """
    tokens: list[Token] = []
    for char in text:
        symbol = _SYMBOLS.get(char)
        if symbol is not None:
            tokens.append(Token(symbol, char))
            continue
        is_number = "0" <= char <= "9"
        if tokens:
            previous = tokens[-1]
            if (previous.type == TokenType.TEXT and not is_number) or (
                previous.type == TokenType.NUMBER and is_number
            ):
                previous.value += char
                continue
        tokens.append(Token(TokenType.NUMBER if is_number else TokenType.TEXT, char))
    return tokens


def stringify(tokens: Sequence[Token]) -> str:
    """Join the values of tokens back into text."""
    return "".join(token.value for token in tokens)


def split(tokens: Sequence[Token], delimiter: TokenType) -> list[list[Token]]:
    """Split tokens on every token of the delimiter type.

    An empty input gives an empty list.
    """
    if not tokens:
        return []
    result: list[list[Token]] = []
    current: list[Token] = []
    for token in tokens:
        if token.type == delimiter:
            result.append(current)
            current = []
        else:
            current.append(token)
    result.append(current)
    return result


def find(tokens: Sequence[Token], target: TokenType) -> int:
    """Index of the first token of the target type, or -1."""
    return next((i for i, token in enumerate(tokens) if token.type == target), -1)


def find_unescaped(tokens: Sequence[Token], target: TokenType) -> int:
    """Index of the first target token not preceded by a backslash, or -1."""
    previous_type = None
    for index, token in enumerate(tokens):
        if token.type == target and previous_type != TokenType.BACKSLASH:
            return index
        previous_type = token.type
    return -1


def first_line(tokens: Sequence[Token]) -> Sequence[Token]:
    """Tokens up to, not including, the first newline token."""
    index = find(tokens, TokenType.NEW_LINE)
    return tokens if index < 0 else tokens[:index]