#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the adf2md library.

This module defines the exception classes raised by adf2md. The conversion
engine itself is permissive: unknown node kinds and malformed attributes
degrade to empty output instead of raising. The only fatal input condition
is an invalid document root.

Exception Hierarchy
-------------------
- Adf2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - ParsingError (input document could not be read)
    - InvalidRootError (root is missing, not a ``doc`` node, or has a bad version)

"""

from typing import Any


class Adf2MdError(Exception):
    """Base exception class for all adf2md-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Adf2MdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is supplied.

    For example, passing ``MarkdownRendererOptions`` to ``AdfParser``.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Adf2MdError):
    """Exception raised when an ADF document cannot be read.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage where parsing failed (e.g. "json_parsing", "root_validation")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class InvalidRootError(ParsingError):
    """Exception raised when the document root is not a valid ``doc`` node.

    Raised before any traversal begins, so no partial output is produced.

    Parameters
    ----------
    message : str, optional
        Custom error message
    root_type : any, optional
        The ``type`` value found at the root, if any

    """

    def __init__(self, message: str | None = None, root_type: Any = None):
        """Initialize the invalid root error."""
        if message is None:
            message = f'Root node must be of type "doc", got {root_type!r}'
        super().__init__(message, parsing_stage="root_validation")
        self.root_type = root_type


__all__ = [
    "Adf2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "InvalidRootError",
]
