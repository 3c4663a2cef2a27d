# memomark

memomark is a small Markdown parser for short notes and has no dependencies.
It turns text into a tree of node objects. You can render that tree as HTML or
as plain text, or restore it to Markdown.

## Installation

```
pip install memomark
```

## Usage

```python
from memomark.parser import parse_markdown
from memomark.nodes import restore
from memomark.html_renderer import HTMLRenderer
from memomark.string_renderer import StringRenderer

nodes = parse_markdown("# Hello\n**bold** and #tag")

print(HTMLRenderer().render(nodes))
# <h1>Hello</h1><p><strong>bold</strong> and <span>#tag</span></p>

print(StringRenderer().render(nodes))
# Hello
# bold and #tag

print(restore(nodes))  # back to Markdown
```

To drive the parser yourself, work at the token level:

```python
from memomark.tokenizer import tokenize
from memomark.parser import parse

nodes = parse(tokenize("- [x] done\n- [ ] todo"))
```

## Modules

- `memomark.tokenizer`: `tokenize`, `Token` and `TokenType`, and helpers over
  token sequences: `stringify`, `split`, `find`, `find_unescaped` and
  `first_line`.
- `memomark.nodes`: the node dataclasses (`Paragraph`, `Heading`, `List`,
  `Table`, `Text`, `Bold`, `Link` and the others), the `NodeType` and
  `ListKind` enums, `is_block_node`, `is_list_item_node`,
  `list_item_kind_and_indent` and `restore`.
- `memomark.parser`: `parse_markdown(text)`, `parse(tokens)` and
  `parse_block(tokens)`, which use the default block parsers.
- `memomark.inline`: `parse_inline(tokens)`, which uses the default inline
  parsers.
- `memomark.core`: `parse_block_with_parsers` and `parse_inline_with_parsers`
  for running your own list of parsers, plus `merge_list_item_nodes`,
  `merge_text_nodes` and `ParseError`. A parser is any object with a
  `match(tokens)` method. The method returns `(node, size)` or `None`. If no
  parser in the list matches at some position, `ParseError` is raised. The
  default lists end with `TextParser`, which matches any token, so
  `parse_markdown` does not raise it.
- `memomark.blocks`, `memomark.table`, `memomark.inline_marks` and
  `memomark.inline_links` hold the individual parser classes, such as
  `HeadingParser`, `TableParser`, `BoldParser` and `LinkParser`.
- `memomark.html_renderer.HTMLRenderer` and
  `memomark.string_renderer.StringRenderer` each provide `render(nodes)`,
  `render_nodes(nodes)` and `render_node(node)`.

## Supported syntax

Block elements:

- headings `#` to `######`
- horizontal rules (`---`, `***`)
- blockquotes `> text`, which can be nested
- ordered, unordered and task lists, nested by indent
- fenced code blocks with an optional language
- `$$` math blocks
- pipe tables with a delimiter row
- embedded content `![[name?params]]`
- paragraphs

Inline elements:

- bold `**x**`, italic `*x*` and bold-italic `***x***`
- code `` `x` ``
- links `[text](url)`, images `![alt](url)` and auto links (`<url>` or a bare absolute URL)
- tags `#tag`
- strikethrough `~~x~~`
- highlight `==x==`
- subscript `~x~` and superscript `^x^`
- inline math `$x$`
- spoilers `||x||`
- referenced content `[[name?params]]`
- escaped characters `\#`
- `<br />`

## Limitations

- The renderers do not escape HTML. Text content is written to the output as is.
- A renderer instance keeps its output between calls. `render` returns
  everything rendered so far, so use a new instance for each document.
- HTML elements other than `<br />`, and HTML elements with attributes, are
  treated as plain text.
- This is a library only. It has no command-line tool.

## Development

```
pip install -e ".[test]"
pytest
```