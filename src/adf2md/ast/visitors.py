#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

``NodeVisitor`` declares one abstract ``visit_*`` method per node class in
:mod:`adf2md.ast.nodes`. Because every method is abstract, a visitor that
does not handle every node type cannot be instantiated, which keeps the set
of rendering rules exhaustive. ``visit_unsupported`` is the explicit arm for
node types the parser did not recognise.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for every node type. Visit
    methods return Any; the Markdown renderer returns string fragments.

    Examples
    --------
    Visitor that collects plain text:

        >>> class TextCollector(MarkdownRenderer):
        ...     def visit_text(self, node):
        ...         return node.text

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_task_list(self, node: TaskList) -> Any:
        """Visit a TaskList node."""
        pass

    @abstractmethod
    def visit_task_item(self, node: TaskItem) -> Any:
        """Visit a TaskItem node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_rule(self, node: Rule) -> Any:
        """Visit a Rule node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node (header or body)."""
        pass

    @abstractmethod
    def visit_panel(self, node: Panel) -> Any:
        """Visit a Panel node."""
        pass

    @abstractmethod
    def visit_media_single(self, node: MediaSingle) -> Any:
        """Visit a MediaSingle node."""
        pass

    @abstractmethod
    def visit_media_group(self, node: MediaGroup) -> Any:
        """Visit a MediaGroup node."""
        pass

    @abstractmethod
    def visit_media(self, node: Media) -> Any:
        """Visit a Media node."""
        pass

    @abstractmethod
    def visit_expand(self, node: Expand) -> Any:
        """Visit an Expand node (expand or nestedExpand)."""
        pass

    @abstractmethod
    def visit_decision_list(self, node: DecisionList) -> Any:
        """Visit a DecisionList node."""
        pass

    @abstractmethod
    def visit_decision_item(self, node: DecisionItem) -> Any:
        """Visit a DecisionItem node."""
        pass

    @abstractmethod
    def visit_block_card(self, node: BlockCard) -> Any:
        """Visit a BlockCard node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""
        pass

    @abstractmethod
    def visit_mention(self, node: Mention) -> Any:
        """Visit a Mention node."""
        pass

    @abstractmethod
    def visit_emoji(self, node: Emoji) -> Any:
        """Visit an Emoji node."""
        pass

    @abstractmethod
    def visit_date(self, node: Date) -> Any:
        """Visit a Date node."""
        pass

    @abstractmethod
    def visit_status(self, node: Status) -> Any:
        """Visit a Status node."""
        pass

    @abstractmethod
    def visit_inline_card(self, node: InlineCard) -> Any:
        """Visit an InlineCard node."""
        pass

    @abstractmethod
    def visit_unsupported(self, node: UnsupportedNode) -> Any:
        """Visit a placeholder for an unrecognised node type."""
        pass


__all__ = ["NodeVisitor"]
