"""Logging helpers for applications embedding adf2md.

adf2md only creates module loggers below the ``adf2md`` package logger and
never installs handlers on import. Applications that want conversion
diagnostics on the console or in a file call :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER_NAME = "adf2md"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    """Turn a level name into its number; unknown names mean WARNING."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Route adf2md diagnostics to the console and, optionally, a file.

    Handlers previously attached to the ``adf2md`` logger are closed and
    replaced, so calling this more than once does not duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "WARNING" to see
        unsupported node types, "DEBUG" for timings and skipped input).
    log_file : str, optional
        Path of a file that receives the same records, appended to.
    trace_mode : bool, default False
        Include timestamps and logger names in each record.
    stream : file-like, optional
        Console stream; defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The ``adf2md`` package logger.

    """
    level = _resolve_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for old_handler in list(package_logger.handlers):
        package_logger.removeHandler(old_handler)
        old_handler.close()

    _attach(package_logger, logging.StreamHandler(stream or sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            _attach(package_logger, file_handler, level, formatter)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
