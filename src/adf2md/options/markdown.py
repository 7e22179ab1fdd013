#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering.

This module defines the options controlling how the typed ADF tree is
rendered to Markdown: date formatting, panel icons and decision glyphs.
"""
# src/adf2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from adf2md.constants import (
    DEFAULT_DATE_FORMAT_MODE,
    DEFAULT_DATE_STRFTIME_PATTERN,
    DEFAULT_DECIDED_GLYPH,
    DEFAULT_PANEL_ICONS,
    DEFAULT_PANEL_TYPE,
    DEFAULT_UNDECIDED_GLYPH,
    DateFormatMode,
)
from adf2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Markdown rendering.

    Parameters
    ----------
    date_format_mode : {"iso8601", "locale", "strftime"}, default "iso8601"
        How ``date`` nodes are rendered. Timestamps are interpreted as UTC
        epoch milliseconds.

        - "iso8601": calendar date, e.g. ``2020-02-19``
        - "locale": the current locale's date representation (``%x``)
        - "strftime": ``date_strftime_pattern``
    date_strftime_pattern : str, default "%Y-%m-%d"
        Pattern used when ``date_format_mode`` is "strftime".
    panel_icons : dict[str, str]
        Icon prefixed to each line of a panel, keyed by ``panelType``.
        Unknown panel types use the "info" icon.
    decided_glyph : str, default "✓"
        Marker for decision items in the DECIDED state.
    undecided_glyph : str, default "○"
        Marker for decision items in any other state.

    Examples
    --------
    Render dates in a long format:
        >>> options = MarkdownRendererOptions(
        ...     date_format_mode="strftime",
        ...     date_strftime_pattern="%B %d, %Y",
        ... )

    """

    date_format_mode: DateFormatMode = field(
        default=DEFAULT_DATE_FORMAT_MODE,
        metadata={
            "help": "Date formatting mode: iso8601, locale, or strftime",
            "importance": "core",
        },
    )
    date_strftime_pattern: str = field(
        default=DEFAULT_DATE_STRFTIME_PATTERN,
        metadata={
            "help": "Custom strftime pattern when date_format_mode is 'strftime'",
            "importance": "advanced",
        },
    )
    panel_icons: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_PANEL_ICONS),
        metadata={
            "help": "Icon used for each panel type; must include 'info'",
            "importance": "advanced",
        },
    )
    decided_glyph: str = field(
        default=DEFAULT_DECIDED_GLYPH,
        metadata={"help": "Marker for decided decision items", "importance": "advanced"},
    )
    undecided_glyph: str = field(
        default=DEFAULT_UNDECIDED_GLYPH,
        metadata={"help": "Marker for undecided decision items", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate Markdown rendering options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.date_format_mode not in get_args(DateFormatMode):
            raise ValueError(
                f"date_format_mode must be one of {get_args(DateFormatMode)}, got {self.date_format_mode!r}"
            )

        if self.date_format_mode == "strftime" and not self.date_strftime_pattern:
            raise ValueError("date_strftime_pattern cannot be empty when date_format_mode is 'strftime'")

        if DEFAULT_PANEL_TYPE not in self.panel_icons:
            raise ValueError(f"panel_icons must define an icon for '{DEFAULT_PANEL_TYPE}' panels")
