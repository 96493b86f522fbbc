# scripts/two_loggers.py
"""
Two independently configured loggers sharing one log file.

The first logger only lets warnings and above through; the second logs
everything. Both append to the same file and mirror their lines to stdout.

Usage:
    python scripts/two_loggers.py [path]
"""

from __future__ import annotations

import sys

from ultimate_logger import Logger, LogLevel


def log_every_level(logger: Logger) -> None:
    for level in LogLevel:
        logger.log(level, f"This is a {level.label()} message")


def main(path: str = "log.txt") -> None:
    with Logger.new_to_file("First logger", LogLevel.WARNING, path, append=True) as first:
        log_every_level(first)

    with Logger.new_to_file("Second logger", LogLevel.TRACE, path, append=True) as second:
        log_every_level(second)


if __name__ == "__main__":
    main(*sys.argv[1:2])
