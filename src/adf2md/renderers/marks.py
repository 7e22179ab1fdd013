#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/marks.py
"""Inline mark rendering.

Marks are applied in list order: the first mark becomes the outermost
wrapper, so its closing token is emitted last. Text is never escaped.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from adf2md.ast.nodes import (
    CodeMark,
    Em,
    Link,
    Mark,
    Strike,
    Strong,
    SubSup,
    TextColor,
    Underline,
)

logger = logging.getLogger(__name__)


def mark_tokens(mark: Mark) -> Optional[tuple[str, str]]:
    """Return the opening and closing tokens for a mark.

    Parameters
    ----------
    mark : Mark
        The mark to look up

    Returns
    -------
    tuple of (str, str) or None
        ``(opening, closing)``, or None when the mark contributes nothing:
        unknown mark types, links without ``href``, colours without
        ``color`` and sub/sup marks whose type is neither "sub" nor "sup"

    """
    if isinstance(mark, Strong):
        return "**", "**"
    elif isinstance(mark, Em):
        return "*", "*"
    elif isinstance(mark, CodeMark):
        return "`", "`"
    elif isinstance(mark, Strike):
        return "~~", "~~"
    elif isinstance(mark, Underline):
        return "<u>", "</u>"
    elif isinstance(mark, SubSup):
        if mark.type in ("sub", "sup"):
            return f"<{mark.type}>", f"</{mark.type}>"
        return None
    elif isinstance(mark, Link):
        return ("[", f"]({mark.href})") if mark.href else None
    elif isinstance(mark, TextColor):
        return (f'<span style="color: {mark.color}">', "</span>") if mark.color else None

    logger.debug(f"Skipping unsupported mark: {mark!r}")
    return None


def apply_marks(text: str, marks: Optional[Sequence[Mark]] = None) -> str:
    """Wrap text in the Markdown/HTML syntax of its marks.

    Parameters
    ----------
    text : str
        Literal text
    marks : sequence of Mark or None
        Marks in document order

    Returns
    -------
    str
        ``opening tokens + text + closing tokens``, with closing tokens in
        reverse order so that wrappers nest correctly

    Examples
    --------
        >>> apply_marks("wow", [Strong(), Em()])
        '***wow***'
        >>> apply_marks("docs", [Link(href="https://example.com"), CodeMark()])
        '[`docs`](https://example.com)'

    """
    if not marks:
        return text

    opening: list[str] = []
    closing: list[str] = []
    for mark in marks:
        tokens = mark_tokens(mark)
        if tokens is None:
            continue
        opening.append(tokens[0])
        closing.insert(0, tokens[1])

    return "".join(opening) + text + "".join(closing)


__all__ = ["apply_marks", "mark_tokens"]
