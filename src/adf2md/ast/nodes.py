#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/ast/nodes.py
"""Typed AST node classes for Atlassian Document Format trees.

Raw ADF is a JSON tree of ``{"type", "content", "text", "marks", "attrs"}``
records whose ``attrs`` differ per node type. This module replaces those
open-ended attribute maps with one dataclass per node type, each carrying
only the fields that type uses, with its default declared on the field.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Paragraph, Heading, CodeBlock, BlockQuote, Rule
    - BulletList, OrderedList, ListItem, TaskList, TaskItem
    - Table, TableRow, TableCell
    - Panel, Expand, DecisionList, DecisionItem, BlockCard
    - MediaSingle, MediaGroup, Media

Inline nodes:
    - Text, HardBreak, Mention, Emoji, Date, Status, InlineCard

Fallback:
    - UnsupportedNode, for node types this library does not render

Marks are modelled the same way: Strong, Em, CodeMark, Strike, Underline,
Link, SubSup, TextColor, with UnsupportedMark as the fallback.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from adf2md.constants import (
    DEFAULT_DECISION_STATE,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_ORDERED_LIST_START,
    DEFAULT_PANEL_TYPE,
    DEFAULT_STATUS_COLOR,
    DEFAULT_TASK_STATE,
)

# ============================================================================
# Marks
# ============================================================================


class Mark(ABC):
    """Base class for inline style annotations attached to Text nodes."""


@dataclass
class Strong(Mark):
    """Bold text (ADF ``strong``)."""


@dataclass
class Em(Mark):
    """Emphasised text (ADF ``em``)."""


@dataclass
class CodeMark(Mark):
    """Inline code (ADF ``code``)."""


@dataclass
class Strike(Mark):
    """Struck-through text (ADF ``strike``)."""


@dataclass
class Underline(Mark):
    """Underlined text (ADF ``underline``)."""


@dataclass
class Link(Mark):
    """Hyperlink (ADF ``link``).

    Parameters
    ----------
    href : str or None, default = None
        Link target; a link without one renders as plain text

    """

    href: Optional[str] = None


@dataclass
class SubSup(Mark):
    """Subscript or superscript (ADF ``subsup``).

    Parameters
    ----------
    type : str or None, default = None
        "sub" or "sup"; any other value renders as plain text

    """

    type: Optional[str] = None


@dataclass
class TextColor(Mark):
    """Coloured text (ADF ``textColor``).

    Parameters
    ----------
    color : str or None, default = None
        CSS colour value, e.g. ``#ff0000``

    """

    color: Optional[str] = None


@dataclass
class UnsupportedMark(Mark):
    """A mark type this library does not render (e.g. ``border``)."""

    kind: str = ""


# ============================================================================
# Base Node
# ============================================================================


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node (ADF ``doc``).

    Parameters
    ----------
    content : list of Node, default = empty list
        Block-level nodes in the document
    version : int, default = 1
        ADF schema version declared by the document

    """

    content: list[Node] = field(default_factory=list)
    version: int = 1

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int, default = 1
        Heading level. Not clamped: level 7 yields seven ``#`` characters.
    content : list of Node, default = empty list
        Inline content of the heading

    """

    level: int = DEFAULT_HEADING_LEVEL
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class BulletList(Node):
    """Unordered list of ListItem nodes."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Node):
    """Ordered list of ListItem nodes.

    Parameters
    ----------
    order : int, default = 1
        Number of the first item
    content : list of Node, default = empty list
        List items

    """

    order: int = DEFAULT_ORDERED_LIST_START
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_ordered_list(self)


@dataclass
class ListItem(Node):
    """Item of a bullet or ordered list.

    The first paragraph carries the list marker; nested lists are children.

    """

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class TaskList(Node):
    """List of TaskItem nodes (and nested TaskList nodes)."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this task list."""
        return visitor.visit_task_list(self)


@dataclass
class TaskItem(Node):
    """Checkbox item.

    Parameters
    ----------
    state : str, default = "TODO"
        "DONE" renders a checked box; anything else renders unchecked
    content : list of Node, default = empty list
        Inline content of the task

    """

    state: str = DEFAULT_TASK_STATE
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this task item."""
        return visitor.visit_task_item(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block.

    Parameters
    ----------
    code : str, default = ""
        Literal code; taken from the first text child of the ADF node
    language : str, default = ""
        Language hint written after the opening fence

    """

    code: str = ""
    language: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level nodes."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class Rule(Node):
    """Horizontal rule."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this rule."""
        return visitor.visit_rule(self)


@dataclass
class Table(Node):
    """Table whose first row is treated as the header row."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Row of TableCell nodes."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell (ADF ``tableCell`` or ``tableHeader``).

    Parameters
    ----------
    content : list of Node, default = empty list
        Block-level content of the cell
    header : bool, default = False
        True for ``tableHeader`` cells

    """

    content: list[Node] = field(default_factory=list)
    header: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this cell."""
        return visitor.visit_table_cell(self)


@dataclass
class Panel(Node):
    """Callout panel.

    Parameters
    ----------
    panel_type : str, default = "info"
        One of info, note, warning, error, success
    content : list of Node, default = empty list
        Block-level content of the panel

    """

    panel_type: str = DEFAULT_PANEL_TYPE
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this panel."""
        return visitor.visit_panel(self)


@dataclass
class MediaSingle(Node):
    """Wrapper around a single media node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this media wrapper."""
        return visitor.visit_media_single(self)


@dataclass
class MediaGroup(Node):
    """Wrapper around several media nodes (usually file attachments)."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this media group."""
        return visitor.visit_media_group(self)


@dataclass
class Media(Node):
    """Reference to an attachment stored by the Atlassian media service.

    Parameters
    ----------
    id : str or None, default = None
        Media identifier, rendered as a ``media://`` URI
    alt : str or None, default = None
        Alternative text

    """

    id: Optional[str] = None
    alt: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this media node."""
        return visitor.visit_media(self)


@dataclass
class Expand(Node):
    """Collapsible section (ADF ``expand`` or ``nestedExpand``).

    Parameters
    ----------
    title : str or None, default = None
        Summary line shown when collapsed
    content : list of Node, default = empty list
        Block-level content
    nested : bool, default = False
        True for ``nestedExpand``

    """

    title: Optional[str] = None
    content: list[Node] = field(default_factory=list)
    nested: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this expand."""
        return visitor.visit_expand(self)


@dataclass
class DecisionList(Node):
    """List of DecisionItem nodes."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this decision list."""
        return visitor.visit_decision_list(self)


@dataclass
class DecisionItem(Node):
    """Decision entry; ``state`` is "DECIDED" unless stated otherwise."""

    state: str = DEFAULT_DECISION_STATE
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this decision item."""
        return visitor.visit_decision_item(self)


@dataclass
class BlockCard(Node):
    """Smart link rendered as a block."""

    url: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this card."""
        return visitor.visit_block_card(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Text run with an ordered list of marks.

    Parameters
    ----------
    text : str, default = ""
        Literal text, never escaped
    marks : list of Mark, default = empty list
        Marks in document order; the first mark is the outermost wrapper

    """

    text: str = ""
    marks: list[Mark] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class HardBreak(Node):
    """Hard line break."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_hard_break(self)


@dataclass
class Mention(Node):
    """Mention of a user; rendered as its display ``text``."""

    id: Optional[str] = None
    text: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this mention."""
        return visitor.visit_mention(self)


@dataclass
class Emoji(Node):
    """Emoji; rendered as ``text``, falling back to ``short_name``."""

    short_name: Optional[str] = None
    text: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emoji."""
        return visitor.visit_emoji(self)


@dataclass
class Date(Node):
    """Date stamp.

    Parameters
    ----------
    timestamp : int or None, default = None
        Milliseconds since the Unix epoch (UTC)

    """

    timestamp: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this date."""
        return visitor.visit_date(self)


@dataclass
class Status(Node):
    """Status lozenge; ``color`` is kept but not rendered."""

    text: str = ""
    color: str = DEFAULT_STATUS_COLOR

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this status."""
        return visitor.visit_status(self)


@dataclass
class InlineCard(Node):
    """Smart link rendered inline."""

    url: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this card."""
        return visitor.visit_inline_card(self)


# ============================================================================
# Fallback
# ============================================================================


@dataclass
class UnsupportedNode(Node):
    """Placeholder for a node type without a rendering rule.

    Parameters
    ----------
    kind : str, default = ""
        The raw ADF ``type`` tag (empty if the node had none)

    """

    kind: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this placeholder."""
        return visitor.visit_unsupported(self)


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
]
