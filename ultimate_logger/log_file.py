# ultimate_logger/log_file.py
"""
Owned, line-oriented log file handle.

A LogFile is opened once (append or truncate) and keeps its handle until
`close()`. Each `write_line` call writes a whole line and flushes it, so an
external reader sees the line as soon as the call returns. Newlines are
written untranslated, so a bare line feed ends a line on every platform.
"""

from __future__ import annotations

import codecs
import os
from typing import Optional, TextIO, Union

from ultimate_logger.core.config import settings
from ultimate_logger.core.errors import LogFileOpenError, LogFileWriteError
from ultimate_logger.core.logging import get_logger

logger = get_logger("log_file")


class LogFile:
    """An exclusively owned, writable log file."""

    def __init__(self, path: Union[str, "os.PathLike[str]"], append: bool = True):
        self.path = os.fspath(path)
        self.append = append
        self._file: Optional[TextIO] = None

        mode = "a" if append else "w"
        encoding = settings.FILE_ENCODING
        try:
            # resolved before open() so a bad encoding never truncates the file
            codecs.lookup(encoding)
            self._file = open(self.path, mode, encoding=encoding, newline="")
        except (OSError, LookupError) as exc:
            raise LogFileOpenError(self.path, exc) from exc

        logger.debug("Opened log file %s (mode=%s)", self.path, mode)

    @property
    def closed(self) -> bool:
        return self._file is None or self._file.closed

    def write_line(self, line: str) -> None:
        """Write `line` plus a newline and flush it to the OS."""
        if self._file is None or self._file.closed:
            raise LogFileWriteError(self.path, line)
        try:
            self._file.write(line + "\n")
            self._file.flush()
        except (OSError, ValueError) as exc:
            raise LogFileWriteError(self.path, line, exc) from exc

    def close(self) -> None:
        if self._file is None or self._file.closed:
            return
        self._file.close()
        logger.debug("Closed log file %s", self.path)

    def __enter__(self) -> "LogFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"LogFile(path={self.path!r}, append={self.append}, {state})"
