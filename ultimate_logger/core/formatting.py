# ultimate_logger/core/formatting.py
"""
Line formatting.

Every emitted line has the shape

    [YYYY-MM-DD HH:MM:SS.mmm] [<name>] [<label>] <message>

The plain form goes to files; the console form colors the "[<label>] <message>"
segment. Both are built from the same timestamp so a line written to both
destinations is identical apart from color codes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ultimate_logger.core.colors import render
from ultimate_logger.log_level import LogLevel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def format_timestamp(moment: datetime) -> str:
    """Render `moment` with millisecond precision."""
    return moment.strftime(TIMESTAMP_FORMAT)[:-3]  # ms precision


def current_timestamp() -> str:
    """Local wall-clock time, formatted for a log line."""
    return format_timestamp(datetime.now())


def format_line(
    level: LogLevel,
    name: str,
    message: str,
    timestamp: Optional[str] = None,
    colored: bool = False,
) -> str:
    """
    Build one log line (without the trailing newline).

    Args:
        level: Level of the message; supplies the label and color.
        name: Logger name, written verbatim.
        message: Caller text, written verbatim.
        timestamp: Pre-rendered timestamp; defaults to now.
        colored: Color the "[<label>] <message>" segment for the console.
    """
    if timestamp is None:
        timestamp = current_timestamp()

    tail = f"[{level.label()}] {message}"
    if colored:
        tail = render(tail, level.color())

    return f"[{timestamp}] [{name}] {tail}"
