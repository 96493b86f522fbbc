# ultimate_logger/core/errors.py
"""
Error types raised by ultimate_logger.

Everything here derives from OSError so callers can keep catching the
built-in I/O error while still getting the log file path for context.
"""

from __future__ import annotations

from typing import Optional


class LoggerIOError(OSError):
    """Base I/O error carrying the log file path."""

    def __init__(self, detail: str, path: str, cause: Optional[BaseException] = None):
        errno = getattr(cause, "errno", None)
        super().__init__(errno, detail, path)
        self.detail = detail
        self.path = path

    def __str__(self) -> str:
        return f"{self.detail}: {self.path}"


class LogFileOpenError(LoggerIOError):
    """The log file could not be opened or created."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        reason = "cannot open"
        if cause is not None:
            reason = getattr(cause, "strerror", None) or str(cause) or reason
        super().__init__(f"Error opening log file ({reason})", path, cause)


class LogFileWriteError(LoggerIOError):
    """A formatted line could not be written to the log file."""

    def __init__(self, path: str, line: str, cause: Optional[BaseException] = None):
        reason = "write failed"
        if cause is not None:
            reason = getattr(cause, "strerror", None) or str(cause) or reason
        super().__init__(f"Error writing to log file ({reason})", path, cause)
        self.line = line
