# ultimate_logger/log_level.py
"""
Log levels.

Six fixed severities ranked Trace < Debug < Info < Warning < Error < Critical.
A level tags each emitted line and gates whether it is emitted at all: a
Logger drops every message whose ordinal is below its minimum level.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Ordered log severity. Members compare by `ordinal()`."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    def ordinal(self) -> int:
        """Integer rank used for filtering (TRACE=0 ... CRITICAL=5)."""
        return self.value

    def label(self) -> str:
        """Lowercase display label, e.g. "warning"."""
        return self.name.lower()

    def color(self) -> str:
        """Console color identifier for this level (see `core.colors.PALETTE`)."""
        return _COLOR_TABLE[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal() < other.ordinal()

    def __str__(self) -> str:
        return self.label()

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Look a level up by label, case-insensitively ("Info", " WARNING ")."""
        normalized = (name or "").strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


_COLOR_TABLE = {
    LogLevel.TRACE: "dim",
    LogLevel.DEBUG: "cyan",
    LogLevel.INFO: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bright_red",
}


__all__ = ["LogLevel"]
