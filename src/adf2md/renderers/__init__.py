#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/__init__.py
"""Renderers turning the adf2md typed AST into output text."""

from adf2md.renderers.base import BaseRenderer
from adf2md.renderers.context import ConversionContext
from adf2md.renderers.markdown import MarkdownRenderer
from adf2md.renderers.marks import apply_marks

__all__ = ["BaseRenderer", "ConversionContext", "MarkdownRenderer", "apply_marks"]
