# ultimate_logger/logger.py
"""
Named, leveled loggers writing to the console and/or a file.

Purpose:
- Filter messages below a minimum level
- Format every line as `[timestamp] [name] [level] message`
- Fan each line out to the console (colored) and/or a log file (plain)

Loggers are ordinary objects: there is no registry and no global default.
Two loggers with different names are simply two instances held side by side.
"""

from __future__ import annotations

import os
import sys
import threading
from enum import Enum
from typing import Optional, Union

from ultimate_logger.core.colors import color_enabled
from ultimate_logger.core.errors import LoggerIOError
from ultimate_logger.core.formatting import current_timestamp, format_line
from ultimate_logger.log_file import LogFile
from ultimate_logger.log_level import LogLevel

DEFAULT_NAME = "default"


class Destination(Enum):
    """Where a Logger writes its lines."""

    CONSOLE = "console"
    FILE = "file"
    BOTH = "both"

    @property
    def to_console(self) -> bool:
        return self in (Destination.CONSOLE, Destination.BOTH)

    @property
    def to_file(self) -> bool:
        return self in (Destination.FILE, Destination.BOTH)


class Logger:
    """
    A logger with a fixed name, minimum level and destination.

    Build one with `Logger.new_default()`, `Logger.new(name, level)` or
    `Logger.new_to_file(name, level, path, append)`. Configuration cannot be
    changed afterwards.

    Example:
        with Logger.new_to_file("svc", LogLevel.INFO, "svc.log", append=True) as log:
            log.info("service started")
            log.debug("not written: below INFO")
    """

    def __init__(
        self,
        name: str,
        minimum_level: LogLevel,
        destination: Destination = Destination.CONSOLE,
        log_file: Optional[LogFile] = None,
    ):
        if destination.to_file and log_file is None:
            raise ValueError(f"Destination {destination.value!r} requires an open log file")
        if not destination.to_file and log_file is not None:
            raise ValueError(f"Destination {destination.value!r} does not write to a file")

        self._name = str(name)
        self._minimum_level = minimum_level
        self._destination = destination
        self._log_file = log_file
        # Serializes the write path so concurrent calls never interleave lines.
        self._lock = threading.Lock()

    # -------------------------
    # Constructors
    # -------------------------
    @classmethod
    def new_default(cls) -> "Logger":
        """Console logger named "default" that lets every level through."""
        return cls(DEFAULT_NAME, LogLevel.TRACE, Destination.CONSOLE)

    @classmethod
    def new(cls, name: str, level: LogLevel) -> "Logger":
        """Console logger with the given name and minimum level."""
        return cls(name, level, Destination.CONSOLE)

    @classmethod
    def new_to_file(
        cls,
        name: str,
        level: LogLevel,
        path: Union[str, "os.PathLike[str]"],
        append: bool,
        *,
        mirror_to_console: bool = True,
    ) -> "Logger":
        """
        Logger writing to `path` and, unless `mirror_to_console` is False, to the console.

        Args:
            name: Logger name.
            level: Minimum level.
            path: Log file path. Created if missing; the parent must exist.
            append: Keep existing content (True) or truncate the file (False).
            mirror_to_console: Also write every line to stdout (default).

        Raises:
            LogFileOpenError: the file cannot be opened or created.
        """
        log_file = LogFile(path, append=append)
        destination = Destination.BOTH if mirror_to_console else Destination.FILE
        try:
            return cls(name, level, destination, log_file)
        except Exception:
            log_file.close()
            raise

    # -------------------------
    # Read-only configuration
    # -------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def minimum_level(self) -> LogLevel:
        return self._minimum_level

    @property
    def destination(self) -> Destination:
        return self._destination

    @property
    def path(self) -> Optional[str]:
        return self._log_file.path if self._log_file is not None else None

    @property
    def append(self) -> Optional[bool]:
        return self._log_file.append if self._log_file is not None else None

    # -------------------------
    # Emission
    # -------------------------
    def is_enabled_for(self, level: LogLevel) -> bool:
        return level.ordinal() >= self._minimum_level.ordinal()

    def log(self, level: LogLevel, message: str) -> bool:
        """
        Log `message` at `level`.

        Returns True if the line was written, False if it was filtered out
        because `level` is below the minimum level. Filtered calls do no I/O.

        The file copy is written (and flushed) before the console copy. If the
        file write fails the console copy is still attempted, then
        LogFileWriteError is raised. Console write errors propagate; when the
        file write failed as well, the file error is chained as their cause.
        Without a stdout (e.g. pythonw) the console copy is skipped, as print() does.
        """
        if not self.is_enabled_for(level):
            return False

        file_error: Optional[LoggerIOError] = None

        with self._lock:
            # taken under the lock so file order matches timestamp order
            timestamp = current_timestamp()

            if self._destination.to_file:
                try:
                    self._log_file.write_line(format_line(level, self._name, message, timestamp))
                except LoggerIOError as exc:
                    file_error = exc

            if self._destination.to_console:
                try:
                    self._write_console(level, message, timestamp)
                except Exception as exc:
                    if file_error is not None:
                        raise exc from file_error
                    raise

        if file_error is not None:
            raise file_error
        return True

    def _write_console(self, level: LogLevel, message: str, timestamp: str) -> None:
        stream = sys.stdout
        if stream is None:
            return
        colored = color_enabled(stream)
        stream.write(format_line(level, self._name, message, timestamp, colored=colored) + "\n")
        stream.flush()

    def trace(self, message: str) -> bool:
        return self.log(LogLevel.TRACE, message)

    def debug(self, message: str) -> bool:
        return self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> bool:
        return self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> bool:
        return self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> bool:
        return self.log(LogLevel.ERROR, message)

    def critical(self, message: str) -> bool:
        return self.log(LogLevel.CRITICAL, message)

    # -------------------------
    # Lifecycle
    # -------------------------
    def close(self) -> None:
        """Release the log file handle, if any. Safe to call twice."""
        if self._log_file is not None:
            with self._lock:
                self._log_file.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        log_file = getattr(self, "_log_file", None)
        if log_file is not None:
            log_file.close()

    def __repr__(self) -> str:
        return (
            f"Logger(name={self._name!r}, minimum_level={self._minimum_level.label()}, "
            f"destination={self._destination.value}, path={self.path!r})"
        )
