"""Rendering of syntax tree nodes to HTML."""

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
    ListKind,
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

_LIST_TAGS = {
    ListKind.ORDERED: "ol",
    ListKind.UNORDERED: "ul",
    ListKind.DESCRIPTION: "dl",
}


class HTMLRenderer:
    """Converts syntax tree nodes to HTML; output accumulates across calls."""

    def __init__(self) -> None:
        self._output: list[str] = []
        self._handlers: dict[type, Callable[[Node], None]] = {
            LineBreak: self._line_break,
            Paragraph: self._paragraph,
            CodeBlock: self._code_block,
            Heading: self._heading,
            HorizontalRule: self._horizontal_rule,
            Blockquote: self._blockquote,
            List: self._list,
            UnorderedListItem: self._list_item,
            OrderedListItem: self._list_item,
            TaskListItem: self._task_list_item,
            MathBlock: self._code_block,
            Table: self._table,
            EmbeddedContent: self._resource,
            Text: self._text,
            Bold: self._bold,
            Italic: lambda n: self._wrap("em", n.content),
            BoldItalic: self._bold_italic,
            Code: lambda n: self._wrap("code", n.content),
            Image: self._image,
            Link: self._link,
            AutoLink: self._auto_link,
            Tag: self._tag,
            Strikethrough: lambda n: self._wrap("del", n.content),
            EscapingCharacter: self._escaping_character,
            Math: lambda n: self._wrap("code", n.content),
            Highlight: lambda n: self._wrap("mark", n.content),
            Subscript: lambda n: self._wrap("sub", n.content),
            Superscript: lambda n: self._wrap("sup", n.content),
            ReferencedContent: self._resource,
            Spoiler: self._spoiler,
            HTMLElement: self._html_element,
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
        """Render nodes and return all HTML produced so far."""
        self.render_nodes(nodes)
        return "".join(self._output)

    def _write(self, *parts: str) -> None:
        self._output.extend(parts)

    def _wrap(self, element: str, content: str) -> None:
        self._write(f"<{element}>", content, f"</{element}>")

    def _wrap_children(self, element: str, children: Sequence[Node]) -> None:
        self._write(f"<{element}>")
        self.render_nodes(children)
        self._write(f"</{element}>")

    def _line_break(self, _node: LineBreak) -> None:
        self._write("<br>")

    def _paragraph(self, node: Paragraph) -> None:
        self._wrap_children("p", node.children)

    def _code_block(self, node) -> None:
        self._write("<pre><code>", node.content, "</code></pre>")

    def _heading(self, node: Heading) -> None:
        self._wrap_children(f"h{node.level}", node.children)

    def _horizontal_rule(self, _node: HorizontalRule) -> None:
        self._write("<hr>")

    def _blockquote(self, node: Blockquote) -> None:
        self._wrap_children("blockquote", node.children)

    def _list(self, node: List) -> None:
        element = _LIST_TAGS.get(node.kind) if node.kind is not None else None
        if element:
            self._write(f"<{element}>")
        for item in node.children:
            self.render_nodes([item])
        if element:
            self._write(f"</{element}>")

    def _list_item(self, node) -> None:
        self._wrap_children("li", node.children)

    def _task_list_item(self, node: TaskListItem) -> None:
        self._write("<li>", '<input type="checkbox"')
        if node.complete:
            self._write(" checked")
        self._write(" disabled />")
        self.render_nodes(node.children)
        self._write("</li>")

    def _table(self, node: Table) -> None:
        self._write("<table>", "<thead>", "<tr>")
        for cell in node.header:
            self._write("<th>")
            self.render_nodes([cell])
            self._write("</th>")
        self._write("</tr>", "</thead>", "<tbody>")
        for row in node.rows:
            self._write("<tr>")
            for cell in row:
                self._write("<td>")
                self.render_nodes([cell])
                self._write("</td>")
            self._write("</tr>")
        self._write("</tbody>", "</table>")

    def _resource(self, node) -> None:
        self._write("<div>", node.resource_name)
        if node.params:
            self._write("?", node.params)
        self._write("</div>")

    def _text(self, node: Text) -> None:
        self._write(node.content)

    def _bold(self, node: Bold) -> None:
        self._wrap_children("strong", node.children)

    def _bold_italic(self, node: BoldItalic) -> None:
        self._write("<strong><em>", node.content, "</em></strong>")

    def _image(self, node: Image) -> None:
        self._write('<img src="', node.url, '" alt="', node.alt_text, '" />')

    def _link(self, node: Link) -> None:
        self._write('<a href="', node.url, '">', node.text, "</a>")

    def _auto_link(self, node: AutoLink) -> None:
        self._write('<a href="', node.url, '">', node.url, "</a>")

    def _tag(self, node: Tag) -> None:
        self._write("<span>", "#", node.content, "</span>")

    def _escaping_character(self, node: EscapingCharacter) -> None:
        self._write("\\", node.symbol)

    def _spoiler(self, node: Spoiler) -> None:
        self._write("<details><summary>", node.content, "</summary></details>")

    def _html_element(self, node: HTMLElement) -> None:
        self._write(f"<{node.tag_name} >")