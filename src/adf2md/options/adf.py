#  Copyright (c) 2025 Tom Villani, Ph.D.

# adf2md/options/adf.py
"""Configuration options for ADF (Atlassian Document Format) parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from adf2md.constants import DEFAULT_MAX_NESTING_DEPTH, DEFAULT_VALIDATE_VERSION
from adf2md.options.base import BaseParserOptions


@dataclass(frozen=True)
class AdfParserOptions(BaseParserOptions):
    """Configuration options for ADF-to-AST parsing.

    Parameters
    ----------
    max_nesting_depth : int, default 100
        Maximum depth of nested nodes below the document root. Deeper
        subtrees are dropped with a warning so that parsing and rendering
        stay well within the interpreter's recursion limit.
    validate_version : bool, default True
        When True, a missing, non-integer or unsupported root ``version``
        raises ``InvalidRootError``. When False the version is only logged
        if it is not a supported one.

    Examples
    --------
    Accept documents from newer ADF revisions:
        >>> options = AdfParserOptions(validate_version=False)

    """

    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={
            "help": "Maximum nesting depth of ADF nodes; deeper subtrees are dropped",
            "type": int,
            "importance": "security",
        },
    )
    validate_version: bool = field(
        default=DEFAULT_VALIDATE_VERSION,
        metadata={
            "help": "Reject documents whose root version is missing or unsupported",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate ADF parser options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if isinstance(self.max_nesting_depth, bool) or not isinstance(self.max_nesting_depth, int):
            raise ValueError(f"max_nesting_depth must be an integer, got {self.max_nesting_depth!r}")
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}")
