"""Options classes for adf2md parsing and rendering."""

from adf2md.options.adf import AdfParserOptions
from adf2md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from adf2md.options.markdown import MarkdownRendererOptions

__all__ = [
    "AdfParserOptions",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
]
