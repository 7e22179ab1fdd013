#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Formatting of ADF date stamps."""

from __future__ import annotations

import datetime
import logging

from adf2md.constants import DateFormatMode

logger = logging.getLogger(__name__)


def format_timestamp(timestamp_ms: int, mode: DateFormatMode, strftime_pattern: str) -> str:
    """Format an epoch-millisecond timestamp as a calendar date.

    Parameters
    ----------
    timestamp_ms : int
        Milliseconds since the Unix epoch, interpreted as UTC
    mode : {"iso8601", "locale", "strftime"}
        Formatting mode
    strftime_pattern : str
        Pattern used when ``mode`` is "strftime"

    Returns
    -------
    str
        Formatted date, or an empty string if the timestamp is out of range

    Examples
    --------
        >>> format_timestamp(1582152559000, "iso8601", "%Y-%m-%d")
        '2020-02-19'

    """
    try:
        dt = datetime.datetime.fromtimestamp(timestamp_ms / 1000, tz=datetime.timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        logger.warning(f"Cannot render date timestamp {timestamp_ms}: {e}")
        return ""

    if mode == "iso8601":
        return dt.date().isoformat()
    elif mode == "locale":
        return dt.strftime("%x")
    else:  # strftime mode
        return dt.strftime(strftime_pattern)
