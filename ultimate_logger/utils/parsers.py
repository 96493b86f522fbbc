# ultimate_logger/utils/parsers.py
"""
Reading log lines back.

Lines written by a Logger look like:

    [2024-03-01 12:30:45.123] [svc] [warning] disk almost full

`parse_line` turns one such line into a ParsedLine; `read_log_file` parses a
whole file written by the file destination. Console captures contain color
codes, so run them through `strip_ansi` first.

The message is everything after the level tag, kept verbatim (it may itself
contain brackets).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Union

from dateutil import parser as dtparser

from ultimate_logger.core.config import settings
from ultimate_logger.log_level import LogLevel

# [timestamp] [name] [label] message
# The name is matched lazily; a name containing "] [" still parses as long as
# it is not followed by something that looks like a level tag.
_LINE_RE = re.compile(
    r"^\[(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3})\] "
    r"\[(?P<name>.*?)\] "
    r"\[(?P<label>trace|debug|info|warning|error|critical)\] "
    r"(?P<message>.*)$",
    re.DOTALL,
)

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True)
class ParsedLine:
    """In-memory representation of one emitted log line."""
    timestamp: datetime  # naive local time, millisecond precision
    name: str
    level: LogLevel
    message: str


def strip_ansi(text: str) -> str:
    """Remove ANSI color sequences from captured console output."""
    return _ANSI_RE.sub("", text)


def parse_line(line: str) -> ParsedLine:
    """
    Parse a single log line (a trailing newline is ignored).

    Raises:
        ValueError: if the line does not have the log line shape.
    """
    text = line[:-1] if line.endswith("\n") else line
    return _parse_record(text)


def _parse_record(text: str) -> ParsedLine:
    match = _LINE_RE.match(text)
    if match is None:
        raise ValueError(f"Not a log line: {text!r}")

    return ParsedLine(
        timestamp=dtparser.isoparse(match.group("timestamp")),
        name=match.group("name"),
        level=LogLevel.from_name(match.group("label")),
        message=match.group("message"),
    )


def read_log_file(path: Union[str, "os.PathLike[str]"]) -> List[ParsedLine]:
    """
    Parse every record of a log file.

    Messages are written verbatim, so one record may span several physical
    lines. A line that does not start a record is folded back into the
    previous record's message. Blank lines before the first record are skipped.
    A continuation line that itself looks like a record starts a new one.

    Raises:
        OSError: if the file cannot be read.
        ValueError: if the first non-blank line is not a log line.
    """
    with open(path, "r", encoding=settings.FILE_ENCODING, newline="") as fh:
        text = fh.read()

    physical = text.split("\n")
    if text.endswith("\n"):
        physical.pop()

    records: List[str] = []
    for ln in physical:
        if records and _LINE_RE.match(ln) is None:
            records[-1] += "\n" + ln
        elif records or ln.strip():
            records.append(ln)

    return [_parse_record(rec) for rec in records]
