"""adf2md - Convert Atlassian Document Format (ADF) trees to Markdown.

ADF is the JSON rich-text format used for Jira issue descriptions and
comments and for Confluence page bodies. adf2md reads an ADF tree into a
typed AST and renders it to Markdown: headings, nested bullet, ordered and
task lists, tables, code blocks, block quotes, panels, expands, decisions,
media references, smart links, mentions, emoji, dates and status lozenges,
with inline marks (bold, italic, code, strike, underline, links,
sub/superscript and text colour).

Conversion is permissive: unknown node types and malformed attributes
degrade to empty output and are reported as warnings. Only an invalid
document root raises (``InvalidRootError``).

Examples
--------
Convert a decoded ADF tree:

    >>> from adf2md import to_markdown
    >>> to_markdown({
    ...     "type": "doc",
    ...     "version": 1,
    ...     "content": [{"type": "paragraph", "content": [
    ...         {"type": "text", "text": "wow", "marks": [{"type": "strong"}, {"type": "em"}]}
    ...     ]}],
    ... })
    '***wow***'

Work with the typed AST directly:

    >>> from adf2md import to_ast, MarkdownRenderer
    >>> doc = to_ast('{"type": "doc", "version": 1, "content": []}')
    >>> MarkdownRenderer().render_to_string(doc)
    ''

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from adf2md.api import to_ast, to_markdown
from adf2md.exceptions import (
    Adf2MdError,
    InvalidOptionsError,
    InvalidRootError,
    ParsingError,
    ValidationError,
)
from adf2md.options import AdfParserOptions, MarkdownRendererOptions
from adf2md.parsers import AdfParser
from adf2md.renderers import MarkdownRenderer, apply_marks

__version__ = "0.1.0"

__all__ = [
    "to_ast",
    "to_markdown",
    "apply_marks",
    "AdfParser",
    "MarkdownRenderer",
    "AdfParserOptions",
    "MarkdownRendererOptions",
    "Adf2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "InvalidRootError",
]
