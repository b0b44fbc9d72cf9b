"""Logging configuration utilities."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path


FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


class ColoredFormatter(logging.Formatter):
    """Console formatter that wraps each record in its level's ANSI color."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_color: bool = True):
        super().__init__(FILE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self.use_color:
            return text
        return f"{self.COLORS.get(record.levelname, '')}{text}{self.RESET}"

def get_file_handler(log_file: str | Path) -> logging.handlers.RotatingFileHandler:
    """Create a rotating, plain-text file handler, creating its directory."""
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return file_handler

def setup_logging(level: str = 'WARNING', verbose: bool = False, log_file: str | None = None) -> None:
    """Set up logging configuration.

    Args:
        level: Console level name used when not verbose
        verbose: Log everything down to DEBUG on the console
        log_file: Optional path of a rotating log file (always DEBUG)
    """
    console_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else console_level)
    root_logger.handlers.clear()

    # stderr keeps rendered calendars on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ColoredFormatter(use_color=sys.stderr.isatty()))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = get_file_handler(log_file)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
