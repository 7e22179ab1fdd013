"""Utility helpers for adf2md."""

from adf2md.utils.dates import format_timestamp
from adf2md.utils.decorators import debug_timer

__all__ = ["debug_timer", "format_timestamp"]
