"""Logging configuration for pdfprinter."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "pdfprinter"

# Console prefixes by level; INFO prints the bare message
_LEVEL_PREFIXES = {
    logging.DEBUG: "[debug] ",
    logging.WARNING: "Warning: ",
    logging.ERROR: "Error: ",
    logging.CRITICAL: "Error: ",
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the pdfprinter namespace.

    Args:
        name: Module name (usually __name__). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class ConsoleFormatter(logging.Formatter):
    """Short, user-facing console output.

    Printer names and command lines are shown as-is, so INFO records carry
    no decoration at all.
    """

    def format(self, record: logging.LogRecord) -> str:
        prefix = _LEVEL_PREFIXES.get(record.levelno, "")
        return f"{prefix}{record.getMessage()}"


class BelowWarningFilter(logging.Filter):
    """Pass only records below WARNING (routes them to stdout)."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(
    verbosity: int = 0,
    quiet: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure logging for the pdfp CLI.

    Args:
        verbosity: 0=normal, 1 or more enables debug output (command lines)
        quiet: If True, only errors reach the console
        log_file: Optional file receiving every record
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)

    if quiet:
        console_level = logging.ERROR
    elif verbosity >= 1:
        console_level = logging.DEBUG
    else:
        console_level = logging.INFO

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(console_level)
    stdout_handler.setFormatter(ConsoleFormatter())
    stdout_handler.addFilter(BelowWarningFilter())
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stderr_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
