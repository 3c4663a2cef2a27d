"""Parser for pipe tables with a header, a delimiter row and body rows."""

from __future__ import annotations

from typing import Optional, Sequence

from .blocks import HeadingParser, ParagraphParser
from .core import Match, ParseError, parse_block_with_parsers
from .nodes import Node, Table, Text
from .tokenizer import Token, TokenType, split, stringify

_DELIMITER_EDGES = frozenset({TokenType.COLON, TokenType.HYPHEN})


def _count_cells(tokens: Sequence[Token]) -> Optional[int]:
    """Number of pipe-separated parts of a row, or None if the row is malformed.

    A well-formed row starts and ends with a pipe, and every cell between pipes
    is non-empty and padded by a space on each side.
    """
    if not tokens:
        return None
    cells = split(tokens, TokenType.PIPE)
    if cells[0] or cells[-1]:
        return None
    for cell in cells[1:-1]:
        if (
            not cell
            or cell[0].type != TokenType.SPACE
            or cell[-1].type != TokenType.SPACE
        ):
            return None
    return len(cells) - 1


def _valid_delimiter_cell(cell: Sequence[Token]) -> bool:
    """Check a cell shaped like `` --- ``, `` :-- ``, `` --: `` or `` :-: ``."""
    if len(cell) < 5:
        return False
    inner = cell[1:-1]
    if len(inner) < 3:
        return False
    if inner[0].type not in _DELIMITER_EDGES or inner[-1].type not in _DELIMITER_EDGES:
        return False
    return all(token.type == TokenType.HYPHEN for token in inner[1:-1])


def _parse_cell(cell: Sequence[Token]) -> Optional[Node]:
    if len(cell) < 3:
        return Text()
    try:
        nodes = parse_block_with_parsers(
            cell[1:-1], [HeadingParser(), ParagraphParser()]
        )
    except ParseError:
        return None
    return nodes[0] if len(nodes) == 1 else None


class TableParser:
    """Matches a table of at least a header, a delimiter row and one body row."""

    def match(self, tokens: Sequence[Token]) -> Match:
        raw_rows = split(tokens, TokenType.NEW_LINE)
        if len(raw_rows) < 3:
            return None
        header_tokens, delimiter_tokens = raw_rows[0], raw_rows[1]
        if len(header_tokens) < 5 or len(delimiter_tokens) < 5:
            return None

        header_cells = _count_cells(header_tokens)
        if not header_cells:
            return None
        if _count_cells(delimiter_tokens) != header_cells:
            return None
        for index, part in enumerate(split(delimiter_tokens, TokenType.PIPE)):
            if index in (0, header_cells):
                if part:
                    return None
            elif not _valid_delimiter_cell(part):
                return None

        rows: list[list[Token]] = []
        for row in raw_rows[2:]:
            if _count_cells(row) != header_cells:
                break
            rows.append(row)
        if not rows:
            return None

        header_parts = split(header_tokens, TokenType.PIPE)
        cols = len(header_parts) - 2

        header: list[Node] = []
        for part in header_parts[1 : cols + 1]:
            node = _parse_cell(part)
            if node is None:
                return None
            header.append(node)

        delimiter = [
            stringify(part[1:-1]) if len(part) >= 3 else ""
            for part in split(delimiter_tokens, TokenType.PIPE)[1 : cols + 1]
        ]

        body: list[list[Node]] = []
        for row in rows:
            cells: list[Node] = []
            for part in split(row, TokenType.PIPE)[1 : cols + 1]:
                node = _parse_cell(part)
                if node is None:
                    return None
                cells.append(node)
            body.append(cells)

        size = (
            len(header_tokens)
            + len(delimiter_tokens)
            + 2
            + sum(len(row) for row in rows)
            + len(rows)
            - 1
        )
        return Table(header=header, delimiter=delimiter, rows=body), size