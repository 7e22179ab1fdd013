#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/parsers/__init__.py
"""Parsers turning input documents into the adf2md typed AST."""

from adf2md.parsers.adf import AdfParser
from adf2md.parsers.base import BaseParser

__all__ = ["AdfParser", "BaseParser"]
