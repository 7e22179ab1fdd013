#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from. A
parser turns some input representation into the adf2md typed AST.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from adf2md.ast import Document
from adf2md.exceptions import InvalidOptionsError
from adf2md.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Any) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : Any
            The input document to parse

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        Raises
        ------
        ParsingError
            If the input cannot be read

        """
        pass
