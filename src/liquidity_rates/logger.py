"""Console logging for liquidity-rates, shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Define TRACE level (lower than DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty at DEBUG: per-request RPC payloads, connection pool and access lines.
NOISY_LOGGERS = ("web3", "urllib3", "uvicorn.access")


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI colors."""

    LEVEL_COLORS = {
        TRACE: "\033[90m",  # Dark gray
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Other handlers may share the record.
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{self.BOLD}{record.levelname}{self.RESET}"
        return super().format(colored)


def resolve_level(log_level: str) -> int:
    """Map a level name (including TRACE) to its numeric value, INFO if unknown."""
    name = log_level.upper()
    if name == "TRACE":
        return TRACE
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: str = "INFO",
    *,
    stream: TextIO | None = None,
    use_colors: bool | None = None,
) -> None:
    """Configure root logging for the process.

    Args:
        log_level: Level name; TRACE enables everything including noisy libraries
        stream: Destination for log lines, stdout by default
        use_colors: Force colors on or off; by default only a TTY gets colors

    At DEBUG the web3, urllib3 and uvicorn access loggers stay at WARNING.
    """
    stream = stream or sys.stdout
    if use_colors is None:
        use_colors = hasattr(stream, "isatty") and stream.isatty()

    formatter_cls = ColoredFormatter if use_colors else logging.Formatter
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter_cls(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    level = resolve_level(log_level)
    logging.basicConfig(level=level, handlers=[handler], force=True)

    if level == logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    elif level == TRACE:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(TRACE)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
