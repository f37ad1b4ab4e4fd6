"""
Logging setup and in-memory capture.

Warnings raised while loading a file are kept in a bounded buffer so the
command line front end can report them after the fact.
"""

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

PACKAGE_LOGGER = "serializable_dict_tool"


@dataclass
class LogRecord:
    """A captured log record."""

    timestamp: datetime
    level: str
    logger_name: str
    message: str
    level_no: int

    def format(self, show_timestamp: bool = False) -> str:
        """Format the record for display."""
        parts = []
        if show_timestamp:
            parts.append(self.timestamp.strftime("%H:%M:%S"))
        parts.append(f"[{self.level}]")
        parts.append(self.message)
        return " ".join(parts)


class MemoryLogHandler(logging.Handler):
    """
    Logging handler that stores records in memory.

    Uses a circular buffer to limit memory usage.
    """

    _instance: Optional["MemoryLogHandler"] = None

    def __init__(self, max_records: int = 1000):
        super().__init__()
        self._records: deque[LogRecord] = deque(maxlen=max_records)
        self.setLevel(logging.DEBUG)
        self.setFormatter(logging.Formatter("%(message)s"))

    @classmethod
    def get_instance(cls, max_records: int = 1000) -> "MemoryLogHandler":
        """Get or create the singleton instance."""
        if cls._instance is None:
            cls._instance = cls(max_records)
        return cls._instance

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._records.append(
                LogRecord(
                    timestamp=datetime.fromtimestamp(record.created),
                    level=record.levelname,
                    logger_name=record.name,
                    message=self.format(record),
                    level_no=record.levelno,
                )
            )
        except Exception:
            self.handleError(record)

    def get_records(
        self,
        min_level: int = logging.DEBUG,
        logger_filter: Optional[str] = None,
    ) -> list[LogRecord]:
        """
        Get stored records with optional filtering.

        Args:
            min_level: Minimum log level to include
            logger_filter: If set, only include loggers containing this string

        Returns:
            List of matching LogRecord objects
        """
        return [
            record
            for record in self._records
            if record.level_no >= min_level
            and (not logger_filter or logger_filter in record.logger_name)
        ]

    def count(self, min_level: int = logging.WARNING) -> int:
        return len(self.get_records(min_level=min_level))

    def clear(self) -> None:
        """Clear all stored records."""
        self._records.clear()


def setup_logging(level: int = logging.WARNING, console: bool = True) -> MemoryLogHandler:
    """
    Setup logging for the package logger.

    Args:
        level: Level for console output
        console: Whether to also log to stderr

    Returns:
        The MemoryLogHandler instance
    """
    handler = MemoryLogHandler.get_instance()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)

    # Replace handlers from a previous call
    for h in package_logger.handlers[:]:
        package_logger.removeHandler(h)

    package_logger.addHandler(handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        )
        package_logger.addHandler(console_handler)

    return handler
