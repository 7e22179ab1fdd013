#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the adf2md library.

This module centralizes the hardcoded values used across adf2md: the
Literal types accepted by options, the fallback values for missing ADF
attributes, and the glyph tables used by the Markdown renderer.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. ADF Document Constants - node tags and supported versions
3. Attribute Defaults - values used when an ADF attribute is missing
4. Rendering Defaults - glyphs, icons and date formatting
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DateFormatMode = Literal["iso8601", "locale", "strftime"]
PanelType = Literal["info", "note", "warning", "error", "success"]
SubSupType = Literal["sub", "sup"]

# =============================================================================
# ADF Document Constants
# =============================================================================

ADF_ROOT_TYPE = "doc"
SUPPORTED_ADF_VERSIONS: frozenset[int] = frozenset({1})

# Nodes nested deeper than this are dropped by the parser
DEFAULT_MAX_NESTING_DEPTH = 100
DEFAULT_VALIDATE_VERSION = True

# =============================================================================
# Attribute Defaults
# =============================================================================

DEFAULT_HEADING_LEVEL = 1
DEFAULT_ORDERED_LIST_START = 1
DEFAULT_TASK_STATE = "TODO"
TASK_STATE_DONE = "DONE"
DEFAULT_DECISION_STATE = "DECIDED"
DECISION_STATE_DECIDED = "DECIDED"
DEFAULT_PANEL_TYPE: PanelType = "info"
DEFAULT_MEDIA_ALT = "image"
DEFAULT_EXPAND_TITLE = "Expand"
DEFAULT_MENTION_TEXT = "@unknown"
DEFAULT_STATUS_COLOR = "neutral"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_PANEL_ICONS: dict[str, str] = {
    "info": "ℹ️",
    "note": "\U0001f4dd",
    "warning": "⚠️",
    "error": "❌",
    "success": "✅",
}
DEFAULT_DECIDED_GLYPH = "✓"
DEFAULT_UNDECIDED_GLYPH = "○"

MEDIA_URI_SCHEME = "media://"
HARD_BREAK = "  \n"
RULE_MARKDOWN = "---\n\n"
TABLE_SEPARATOR_CELL = "---"
LIST_INDENT = "  "

DEFAULT_DATE_FORMAT_MODE: DateFormatMode = "iso8601"
DEFAULT_DATE_STRFTIME_PATTERN = "%Y-%m-%d"
