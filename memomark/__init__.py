"""Parse Markdown into a node tree and render it as HTML, plain text or Markdown."""

__version__ = "0.1.0"