"""Logging configuration for the rotcheck command-line tool.

The kernel never logs; only the runner configures and uses logging.
"""

import logging
import sys


class ColorFormatter(logging.Formatter):
    """Colored console formatter for better readability."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        if record.levelname in self.COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"

        return super().format(record)


def setup_logging(level: str = "WARNING", colored: bool | None = None) -> None:
    """Set up logging to stderr for the rotcheck logger tree.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        colored: Force colored level names on or off. Default: on when
            stderr is a TTY.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    if colored is None:
        colored = sys.stderr.isatty()

    logger = logging.getLogger("rotcheck")
    logger.handlers.clear()
    logger.setLevel(numeric_level)
    logger.propagate = False

    fmt = "%(levelname)s %(name)s: %(message)s"
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(ColorFormatter(fmt) if colored else logging.Formatter(fmt))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)
