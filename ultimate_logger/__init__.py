"""
ultimate_logger: a small leveled logger writing to the console and/or a file.

    from ultimate_logger import Logger, LogLevel

    log = Logger.new("svc", LogLevel.WARNING)
    log.info("dropped")
    log.error("printed in red")
"""

from ultimate_logger.core.errors import LogFileOpenError, LogFileWriteError, LoggerIOError
from ultimate_logger.core.logging import configure_logging
from ultimate_logger.log_level import LogLevel
from ultimate_logger.logger import DEFAULT_NAME, Destination, Logger

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_NAME",
    "Destination",
    "LogFileOpenError",
    "LogFileWriteError",
    "LogLevel",
    "Logger",
    "LoggerIOError",
    "configure_logging",
]
