"""Rendering of syntax tree nodes to plain text with markup removed."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from .nodes import (
    AutoLink,
    Blockquote,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    EmbeddedContent,
    EscapingCharacter,
    Heading,
    Highlight,
    HorizontalRule,
    HTMLElement,
    Image,
    Italic,
    LineBreak,
    Link,
    List,
    Math,
    MathBlock,
    Node,
    NodeType,
    OrderedListItem,
    Paragraph,
    ReferencedContent,
    Spoiler,
    Strikethrough,
    Subscript,
    Superscript,
    Table,
    Tag,
    TaskListItem,
    Text,
    UnorderedListItem,
    is_block_node,
)


class StringRenderer:
    """Converts syntax tree nodes to raw text; output accumulates across calls."""

    def __init__(self) -> None:
        self._output: list[str] = []
        self._handlers: dict[type, Callable[[Node], None]] = {
            LineBreak: self._newline,
            Paragraph: self._children_then_newline,
            CodeBlock: self._content,
            Heading: self._children_then_newline,
            HorizontalRule: self._newline,
            Blockquote: self._children_then_newline,
            List: self._list,
            UnorderedListItem: self._symbol_item,
            OrderedListItem: self._ordered_item,
            TaskListItem: self._symbol_item,
            MathBlock: self._math_block,
            Table: self._table,
            EmbeddedContent: self._nothing,
            Text: self._content,
            Bold: self._children,
            Italic: self._content,
            BoldItalic: self._content,
            Code: self._content,
            Image: self._nothing,
            Link: self._url,
            AutoLink: self._url,
            Tag: self._tag,
            Strikethrough: self._content,
            EscapingCharacter: self._escaping_character,
            Math: self._content,
            Highlight: self._content,
            Subscript: self._content,
            Superscript: self._content,
            ReferencedContent: self._nothing,
            Spoiler: self._content,
            HTMLElement: self._newline,
        }

    def render_node(self, node: Node) -> None:
        """Render a single node; nodes of unknown kind produce nothing."""
        handler = self._handlers.get(type(node))
        if handler is not None:
            handler(node)

    def render_nodes(self, nodes: Sequence[Node]) -> None:
        """Render nodes in order, dropping the first line break after a block."""
        previous: Optional[Node] = None
        skip_line_break = False
        for node in nodes:
            if node.node_type == NodeType.LINE_BREAK and skip_line_break:
                if previous is not None and is_block_node(previous):
                    skip_line_break = False
                    continue
            self.render_node(node)
            previous = node
            skip_line_break = True

    def render(self, nodes: Sequence[Node]) -> str:
        """Render nodes and return all text produced so far."""
        self.render_nodes(nodes)
        return "".join(self._output)

    def _write(self, *parts: str) -> None:
        self._output.extend(parts)

    def _nothing(self, _node: Node) -> None:
        pass

    def _newline(self, _node: Node) -> None:
        self._write("\n")

    def _content(self, node) -> None:
        self._write(node.content)

    def _children(self, node) -> None:
        self.render_nodes(node.children)

    def _children_then_newline(self, node) -> None:
        self.render_nodes(node.children)
        self._write("\n")

    def _list(self, node: List) -> None:
        for item in node.children:
            self.render_nodes([item])

    def _symbol_item(self, node) -> None:
        self._write(node.symbol)
        self.render_nodes(node.children)

    def _ordered_item(self, node: OrderedListItem) -> None:
        self._write(f"{node.number}. ")
        self.render_nodes(node.children)

    def _math_block(self, node: MathBlock) -> None:
        self._write(node.content, "\n")

    def _table(self, node: Table) -> None:
        for cell in node.header:
            self.render_nodes([cell])
            self._write("\t")
        self._write("\n")
        for row in node.rows:
            for cell in row:
                self.render_nodes([cell])
                self._write("\t")
            self._write("\n")

    def _url(self, node) -> None:
        self._write(node.url)

    def _tag(self, node: Tag) -> None:
        self._write("#", node.content)

    def _escaping_character(self, node: EscapingCharacter) -> None:
        self._write("\\", node.symbol)