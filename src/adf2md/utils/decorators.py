#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Context managers shared by the adf2md entry points."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long a conversion stage took, at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger that receives the timing record
    operation : str
        Stage name used in the message, e.g. "Rendering (markdown)"

    Yields
    ------
    None
        Control flow to the stage being timed

    Notes
    -----
    Nothing is measured when the logger is not enabled for DEBUG. A stage
    that raises is logged as failed and the exception propagates.

    Examples
    --------
        >>> with debug_timer(logger, "Parsing (adf)"):
        ...     doc = parser.parse(adf)
        ... # Logs: "Parsing (adf) completed in 0.0012s"

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    try:
        yield
    except Exception:
        logger.debug(f"{operation} failed after {time.perf_counter() - started:.4f}s")
        raise
    logger.debug(f"{operation} completed in {time.perf_counter() - started:.4f}s")
