#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Typed AST for Atlassian Document Format trees.

Examples
--------
Build a document by hand and render it:

    >>> from adf2md.ast import Document, Heading, Text
    >>> from adf2md.renderers.markdown import MarkdownRenderer
    >>> doc = Document(content=[Heading(level=2, content=[Text(text="Hi")])])
    >>> MarkdownRenderer().render_to_string(doc)
    '## Hi'

"""

from adf2md.ast.nodes import (
    BlockCard,
    BlockQuote,
    BulletList,
    CodeBlock,
    CodeMark,
    Date,
    DecisionItem,
    DecisionList,
    Document,
    Em,
    Emoji,
    Expand,
    HardBreak,
    Heading,
    InlineCard,
    Link,
    ListItem,
    Mark,
    Media,
    MediaGroup,
    MediaSingle,
    Mention,
    Node,
    OrderedList,
    Panel,
    Paragraph,
    Rule,
    Status,
    Strike,
    Strong,
    SubSup,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    TaskList,
    Text,
    TextColor,
    Underline,
    UnsupportedMark,
    UnsupportedNode,
)
from adf2md.ast.visitors import NodeVisitor

__all__ = [
    "Mark",
    "Strong",
    "Em",
    "CodeMark",
    "Strike",
    "Underline",
    "Link",
    "SubSup",
    "TextColor",
    "UnsupportedMark",
    "Node",
    "Document",
    "Paragraph",
    "Heading",
    "BulletList",
    "OrderedList",
    "ListItem",
    "TaskList",
    "TaskItem",
    "CodeBlock",
    "BlockQuote",
    "Rule",
    "Table",
    "TableRow",
    "TableCell",
    "Panel",
    "MediaSingle",
    "MediaGroup",
    "Media",
    "Expand",
    "DecisionList",
    "DecisionItem",
    "BlockCard",
    "Text",
    "HardBreak",
    "Mention",
    "Emoji",
    "Date",
    "Status",
    "InlineCard",
    "UnsupportedNode",
    "NodeVisitor",
]
