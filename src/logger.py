"""Logging configuration for the phrase flashcards pipeline."""

import logging
import sys
from datetime import datetime
from pathlib import Path

import config


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a given level."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def setup_logger(
    name: str = "flashcards",
    log_file: str | None = None,
    level: int = logging.INFO,
    logs_dir: Path | None = None,
) -> logging.Logger:
    """
    Set up and return a configured logger.

    Args:
        name: Logger name
        log_file: Optional specific log file name. If None, generates timestamp-based name.
        level: Logging level
        logs_dir: Directory for the run log file. Defaults to config.LOGS_DIR.

    Returns:
        Configured logger instance
    """
    if logs_dir is None:
        logs_dir = config.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = f"run_{timestamp}.log"

    log_path = logs_dir / log_file

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Clear existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(message)s")

    # File handler - captures everything
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # Console handlers - user-facing output on stdout, problems on stderr
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.addFilter(_BelowLevelFilter(logging.WARNING))
    stdout_handler.setFormatter(console_formatter)
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(max(level, logging.WARNING))
    stderr_handler.setFormatter(console_formatter)
    logger.addHandler(stderr_handler)

    logger.debug(f"Log file: {log_path}")

    return logger


def get_logger(name: str = "flashcards") -> logging.Logger:
    """Get an existing logger by name."""
    return logging.getLogger(name)
