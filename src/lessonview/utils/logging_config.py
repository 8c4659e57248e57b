"""
lessonview Logging Configuration

Provides centralized logging setup for consistent log formatting.
Log records go to stderr so they never mix with rendered output on stdout.

Usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.debug("Message")

At startup:
    from lessonview.utils.logging_config import setup_logging
    setup_logging(level=logging.DEBUG)
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

# Default format
DEFAULT_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s | %(name)s:%(lineno)d | %(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

LEVEL_COLORS = {
    'DEBUG': '\033[36m',     # Cyan
    'INFO': '\033[32m',      # Green
    'WARNING': '\033[33m',   # Yellow
    'ERROR': '\033[31m',     # Red
    'CRITICAL': '\033[35m',  # Magenta
}
RESET = '\033[0m'

_handlers = []


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to log levels for terminal output."""

    def __init__(self, fmt=None, datefmt=None, use_colors=True, stream=None):
        super().__init__(fmt, datefmt)
        stream = stream or sys.stderr
        self.use_colors = use_colors and hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record):
        if self.use_colors and record.levelname in LEVEL_COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{LEVEL_COLORS[record.levelname]}{record.levelname}{RESET}"
        return super().format(record)


def parse_level(level: Union[int, str]) -> int:
    """Turn 'debug'/'INFO'/10 into a logging level, defaulting to WARNING."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[str] = None,
    use_colors: bool = True,
    max_bytes: int = 1 * 1024 * 1024,  # 1MB
    backup_count: int = 3,
) -> None:
    """
    Configure the lessonview logger.

    Safe to call more than once; handlers from a previous call are replaced.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional file path for logging
        use_colors: Enable colored level names when stderr is a terminal
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    level = parse_level(level)
    pkg_logger = logging.getLogger('lessonview')
    # the file handler records everything at DEBUG
    pkg_logger.setLevel(logging.DEBUG if log_file else level)

    for handler in _handlers:
        pkg_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    log_format = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    if use_colors:
        console_handler.setFormatter(ColoredFormatter(log_format, stream=sys.stderr))
    else:
        console_handler.setFormatter(logging.Formatter(log_format))
    _handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        _handlers.append(file_handler)

    for handler in _handlers:
        pkg_logger.addHandler(handler)
