#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/markdown.py
"""Markdown rendering from the typed ADF AST.

This module provides the MarkdownRenderer class which converts a parsed ADF
Document to Markdown text. Every visit method returns the Markdown fragment
for its node; fragments are concatenated in document order and the final
result is stripped of leading and trailing whitespace.

List nesting depth and ordered-list counters live in a ConversionContext
that is created fresh for each ``render_to_string`` call.

"""

from __future__ import annotations

import logging
from typing import Sequence

from adf2md.ast.nodes import (
    BlockCard,
    BlockQuote,
    BulletList,
    CodeBlock,
    Date,
    DecisionItem,
    DecisionList,
    Document,
    Emoji,
    Expand,
    HardBreak,
    Heading,
    InlineCard,
    ListItem,
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
    Table,
    TableCell,
    TableRow,
    TaskItem,
    TaskList,
    Text,
    UnsupportedNode,
)
from adf2md.ast.visitors import NodeVisitor
from adf2md.constants import (
    DECISION_STATE_DECIDED,
    DEFAULT_EXPAND_TITLE,
    DEFAULT_MEDIA_ALT,
    DEFAULT_MENTION_TEXT,
    DEFAULT_PANEL_TYPE,
    HARD_BREAK,
    LIST_INDENT,
    MEDIA_URI_SCHEME,
    RULE_MARKDOWN,
    TABLE_SEPARATOR_CELL,
    TASK_STATE_DONE,
)
from adf2md.exceptions import InvalidRootError
from adf2md.options.markdown import MarkdownRendererOptions
from adf2md.renderers.base import BaseRenderer
from adf2md.renderers.context import ConversionContext
from adf2md.renderers.marks import apply_marks
from adf2md.utils.dates import format_timestamp

logger = logging.getLogger(__name__)


def _prefix_lines(content: str, prefix: str) -> str:
    return "\n".join(f"{prefix}{line}" for line in content.split("\n"))


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render typed ADF nodes to Markdown text.

    The renderer is reusable: each ``render_to_string`` call starts from a
    fresh ConversionContext and an empty ``warnings`` list. A single
    instance must not be shared between threads.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Attributes
    ----------
    warnings : list of str
        Diagnostics recorded during the last ``render_to_string`` call, one
        per node that had no rendering rule

    Examples
    --------
    Basic usage:

        >>> from adf2md.ast import Document, Heading, Text
        >>> from adf2md.renderers.markdown import MarkdownRenderer
        >>> doc = Document(content=[
        ...     Heading(level=1, content=[Text(text="Title")])
        ... ])
        >>> MarkdownRenderer().render_to_string(doc)
        '# Title'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._context = ConversionContext()
        self.warnings: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a Markdown string.

        Rendering recurses once per nesting level. Trees produced by
        AdfParser are bounded by ``AdfParserOptions.max_nesting_depth``; a
        Document built by hand carries no such bound and must stay within
        the interpreter recursion limit.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Markdown text without leading or trailing whitespace

        Raises
        ------
        InvalidRootError
            If ``doc`` is not a Document

        """
        if not isinstance(doc, Document):
            raise InvalidRootError(
                f"Root node must be a Document, got {type(doc).__name__}",
                root_type=type(doc).__name__,
            )

        self._context = ConversionContext()
        self.warnings = []

        return doc.accept(self).strip()

    def _render_nodes(self, nodes: Sequence[Node]) -> str:
        """Render nodes in document order and concatenate the fragments."""
        return "".join(node.accept(self) for node in nodes)

    def _list_indent(self) -> str:
        return LIST_INDENT * (self._context.list_depth - 1)

    # Block nodes

    def visit_document(self, node: Document) -> str:
        """Render a Document node."""
        return self._render_nodes(node.content)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node; an empty paragraph is a lone newline."""
        if not node.content:
            return "\n"
        return self._render_nodes(node.content) + "\n\n"

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node.

        The level is not clamped to 1-6; ADF validates it upstream.
        """
        return f"{'#' * node.level} {self._render_nodes(node.content)}\n\n"

    def visit_bullet_list(self, node: BulletList) -> str:
        """Render a BulletList node.

        Only the outermost list of a nesting chain is followed by a blank line.
        """
        with self._context.list_scope():
            result = self._render_nodes(node.content)
        return result + ("\n" if self._context.list_depth == 0 else "")

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Render an OrderedList node, numbering items from ``node.order``."""
        with self._context.list_scope(order=node.order):
            result = self._render_nodes(node.content)
        return result + ("\n" if self._context.list_depth == 0 else "")

    def visit_task_list(self, node: TaskList) -> str:
        """Render a TaskList node."""
        with self._context.list_scope():
            result = self._render_nodes(node.content)
        return result + ("\n" if self._context.list_depth == 0 else "")

    def visit_list_item(self, node: ListItem) -> str:
        """Render a ListItem node.

        The item is numbered when an ordered-list counter exists at the
        current depth, otherwise it gets a ``-`` bullet. The first paragraph
        carries the marker; later paragraphs are continuation lines. Nested
        lists render at the depth they open. Any other block is indented
        under the item.

        Parameters
        ----------
        node : ListItem
            List item to render

        """
        indent = self._list_indent()
        if self._context.in_ordered_list:
            marker = f"{self._context.next_ordinal()}."
        else:
            marker = "-"

        parts: list[str] = []
        marker_used = False
        for child in node.content:
            if isinstance(child, Paragraph):
                text = self._render_nodes(child.content).strip()
                if not marker_used:
                    parts.append(f"{indent}{marker} {text}\n")
                    marker_used = True
                else:
                    parts.append(f"{indent}  {text}\n")
            elif isinstance(child, (BulletList, OrderedList, TaskList)):
                parts.append(child.accept(self))
            else:
                block = child.accept(self).strip()
                if block:
                    parts.append(_prefix_lines(block, f"{indent}  ") + "\n")

        return "".join(parts)

    def visit_task_item(self, node: TaskItem) -> str:
        """Render a TaskItem node as a checkbox bullet."""
        checked = "x" if node.state == TASK_STATE_DONE else " "
        content = self._render_nodes(node.content).strip()
        return f"{self._list_indent()}- [{checked}] {content}\n"

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a CodeBlock node as a fenced block; code is emitted verbatim."""
        return f"```{node.language}\n{node.code}\n```\n\n"

    def visit_block_quote(self, node: BlockQuote) -> str:
        """Render a BlockQuote node, prefixing every line with ``> ``."""
        content = self._render_nodes(node.content).strip()
        return _prefix_lines(content, "> ") + "\n\n"

    def visit_rule(self, node: Rule) -> str:
        """Render a Rule node."""
        return RULE_MARKDOWN

    def visit_table(self, node: Table) -> str:
        """Render a Table node.

        The first row is assumed to be the header row: a separator with one
        ``---`` per cell of that row follows it. Cell content is not escaped,
        so a ``|`` inside a cell breaks the row.

        Parameters
        ----------
        node : Table
            Table to render

        """
        parts: list[str] = []
        with self._context.table_scope():
            for i, row in enumerate(node.content):
                parts.append(row.accept(self))
                if i == 0:
                    header_cells = len(row.content) if isinstance(row, TableRow) else 0
                    parts.append("| " + " | ".join([TABLE_SEPARATOR_CELL] * header_cells) + " |\n")
        return "".join(parts) + "\n"

    def visit_table_row(self, node: TableRow) -> str:
        """Render a TableRow node."""
        cells = [cell.accept(self) for cell in node.content]
        return "| " + " | ".join(cells) + " |\n"

    def visit_table_cell(self, node: TableCell) -> str:
        """Render a TableCell node; header and body cells render alike."""
        return self._render_nodes(node.content).strip()

    def visit_panel(self, node: Panel) -> str:
        """Render a Panel node as a block quote whose lines start with the panel icon."""
        icons = self.options.panel_icons
        icon = icons.get(node.panel_type, icons[DEFAULT_PANEL_TYPE])
        content = self._render_nodes(node.content).strip()
        return _prefix_lines(content, f"> {icon} ") + "\n\n"

    def visit_media_single(self, node: MediaSingle) -> str:
        """Render a MediaSingle node by delegating to its first child."""
        if not node.content:
            return ""
        return node.content[0].accept(self)

    def visit_media_group(self, node: MediaGroup) -> str:
        """Render a MediaGroup node."""
        return self._render_nodes(node.content)

    def visit_media(self, node: Media) -> str:
        """Render a Media node as an image reference to a ``media://`` URI."""
        alt = node.alt or DEFAULT_MEDIA_ALT
        target = f"{MEDIA_URI_SCHEME}{node.id}" if node.id else ""
        return f"![{alt}]({target})\n\n"

    def visit_expand(self, node: Expand) -> str:
        """Render an Expand node as a ``<details>`` block."""
        title = node.title or DEFAULT_EXPAND_TITLE
        content = self._render_nodes(node.content).strip()
        return f"<details>\n<summary>{title}</summary>\n\n{content}\n</details>\n\n"

    def visit_decision_list(self, node: DecisionList) -> str:
        """Render a DecisionList node."""
        return self._render_nodes(node.content) + "\n"

    def visit_decision_item(self, node: DecisionItem) -> str:
        """Render a DecisionItem node."""
        if node.state == DECISION_STATE_DECIDED:
            glyph = self.options.decided_glyph
        else:
            glyph = self.options.undecided_glyph
        content = self._render_nodes(node.content).strip()
        return f"- {glyph} {content}\n"

    def visit_block_card(self, node: BlockCard) -> str:
        """Render a BlockCard node."""
        return f"[{node.url}]({node.url})\n\n" if node.url else ""

    # Inline nodes

    def visit_text(self, node: Text) -> str:
        """Render a Text node with its marks."""
        return apply_marks(node.text, node.marks)

    def visit_hard_break(self, node: HardBreak) -> str:
        """Render a HardBreak node."""
        return HARD_BREAK

    def visit_mention(self, node: Mention) -> str:
        """Render a Mention node as its display text."""
        return node.text or DEFAULT_MENTION_TEXT

    def visit_emoji(self, node: Emoji) -> str:
        """Render an Emoji node."""
        return node.text or node.short_name or ""

    def visit_date(self, node: Date) -> str:
        """Render a Date node according to ``date_format_mode``."""
        if node.timestamp is None:
            return ""
        return format_timestamp(node.timestamp, self.options.date_format_mode, self.options.date_strftime_pattern)

    def visit_status(self, node: Status) -> str:
        """Render a Status node; the colour is dropped."""
        return f"[{node.text}]"

    def visit_inline_card(self, node: InlineCard) -> str:
        """Render an InlineCard node."""
        return f"[{node.url}]({node.url})" if node.url else ""

    def visit_unsupported(self, node: UnsupportedNode) -> str:
        """Record an unsupported node and render nothing."""
        message = f"Unsupported node type: {node.kind}"
        logger.warning(message)
        self.warnings.append(message)
        return ""


__all__ = ["MarkdownRenderer"]
