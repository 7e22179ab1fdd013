#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/context.py
"""Traversal state carried through a single Markdown rendering pass.

List depth and ordered-list counters are only ever changed through the
``list_scope`` and ``table_scope`` context managers, which restore the
previous state in a ``finally`` block on every exit path.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Generator, Optional


@dataclass
class ConversionContext:
    """Transient state for one ``render_to_string`` call.

    Parameters
    ----------
    list_depth : int, default = 0
        Number of currently open bullet, ordered or task lists
    ordered_counters : list of int, default = empty list
        Next number for each currently open ordered list, innermost last
    in_table : bool, default = False
        True while a table is being rendered

    """

    list_depth: int = 0
    ordered_counters: list[int] = field(default_factory=list)
    in_table: bool = False

    @contextmanager
    def list_scope(self, order: Optional[int] = None) -> Generator[None, None, None]:
        """Enter a list for the duration of the ``with`` block.

        Parameters
        ----------
        order : int or None, default = None
            Starting number for an ordered list; None for bullet and task lists

        """
        self.list_depth += 1
        if order is not None:
            self.ordered_counters.append(order)
        try:
            yield
        finally:
            if order is not None:
                self.ordered_counters.pop()
            self.list_depth -= 1

    @contextmanager
    def table_scope(self) -> Generator[None, None, None]:
        """Mark the ``with`` block as being inside a table."""
        was_in_table = self.in_table
        self.in_table = True
        try:
            yield
        finally:
            self.in_table = was_in_table

    @property
    def in_ordered_list(self) -> bool:
        """Whether an ordered-list counter exists at the current nesting level."""
        return self.list_depth > 0 and len(self.ordered_counters) >= self.list_depth

    def next_ordinal(self) -> int:
        """Return the innermost ordered-list number and advance it."""
        value = self.ordered_counters[-1]
        self.ordered_counters[-1] = value + 1
        return value
