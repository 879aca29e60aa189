"""Structured logging configuration for the search category engine."""

import logging
import sys
from pathlib import Path
from typing import Optional


LOGGER_NAMESPACE = "search_categories"
DEFAULT_LOG_DIR = Path("logs")
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_file: Optional[Path] = None,
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    console: bool = True,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """Configure logging for the category engine.

    Classification itself never writes files, so a log file is only opened
    when one is requested.

    Args:
        log_file: Path to log file; relative paths are placed under ``log_dir``
        log_dir: Directory for relative log files (default: logs/)
        level: Logging level (default: INFO)
        console: Whether to also log to stderr (default: True)
        format_string: Custom log format string

    Returns:
        The package root logger
    """
    fmt = format_string or DEFAULT_FORMAT
    formatter = logging.Formatter(fmt, datefmt=DEFAULT_DATE_FORMAT)

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    if log_file is not None:
        if not log_file.is_absolute():
            log_file = (log_dir or DEFAULT_LOG_DIR) / log_file
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # stdout carries the CLI's JSON output
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.propagate = False

    logger.debug(f"Logging initialized (file: {log_file})")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically module name)

    Returns:
        Logger instance under the search_categories namespace
    """
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
