#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from.
A renderer turns an adf2md Document into an output representation.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from adf2md.ast import Document
from adf2md.exceptions import InvalidOptionsError
from adf2md.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from adf2md.renderers.base import BaseRenderer
        >>>
        >>> class WordCountRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return str(len(doc.content))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document as a string

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
