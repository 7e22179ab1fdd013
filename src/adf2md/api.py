#  Copyright (c) 2025 Tom Villani, Ph.D.
"""High-level entry points for ADF to Markdown conversion."""

from __future__ import annotations

import logging
from typing import Any

from adf2md.ast import Document
from adf2md.options.adf import AdfParserOptions
from adf2md.options.markdown import MarkdownRendererOptions
from adf2md.parsers.adf import AdfParser
from adf2md.renderers.markdown import MarkdownRenderer
from adf2md.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def to_ast(adf: Any, options: AdfParserOptions | None = None) -> Document:
    """Parse an ADF document into the typed AST.

    Parameters
    ----------
    adf : Mapping, str, or bytes
        Decoded ADF tree, or ADF JSON text
    options : AdfParserOptions or None, default = None
        Parser options

    Returns
    -------
    Document
        Typed AST document

    Raises
    ------
    InvalidRootError
        If the root is not a valid ``doc`` node
    ParsingError
        If JSON text cannot be decoded

    """
    parser = AdfParser(options)
    with debug_timer(logger, "Parsing (adf)"):
        return parser.parse(adf)


def to_markdown(
    adf: Any,
    parser_options: AdfParserOptions | None = None,
    renderer_options: MarkdownRendererOptions | None = None,
) -> str:
    """Convert an ADF document to Markdown.

    Parameters
    ----------
    adf : Mapping, str, bytes, or Document
        Decoded ADF tree, ADF JSON text, or an already parsed Document
    parser_options : AdfParserOptions or None, default = None
        Parser options (ignored when ``adf`` is a Document)
    renderer_options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Returns
    -------
    str
        Markdown text without leading or trailing whitespace

    Raises
    ------
    InvalidRootError
        If the root is not a valid ``doc`` node; no output is produced
    ParsingError
        If JSON text cannot be decoded

    Examples
    --------
        >>> to_markdown({
        ...     "type": "doc",
        ...     "version": 1,
        ...     "content": [
        ...         {"type": "heading", "attrs": {"level": 2}, "content": [{"type": "text", "text": "Hi"}]}
        ...     ],
        ... })
        '## Hi'

    """
    doc = adf if isinstance(adf, Document) else to_ast(adf, parser_options)

    renderer = MarkdownRenderer(renderer_options)
    with debug_timer(logger, "Rendering (markdown)"):
        markdown = renderer.render_to_string(doc)

    if renderer.warnings:
        logger.debug(f"Conversion finished with {len(renderer.warnings)} unsupported node(s)")
    return markdown


__all__ = ["to_ast", "to_markdown"]
