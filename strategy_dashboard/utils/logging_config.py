"""Centralized logging configuration for the strategy dashboard.

Provides consistent logging across all modules with optional file rotation
and configurable log levels.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str,
    log_file: Optional[Path] = None,
    level: str = "INFO",
    console: bool = True,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Set up a logger with file and console handlers.

    Args:
        name: Logger name (typically the package name)
        log_file: Path to log file (if None, only console logging)
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        console: Whether to log to console
        max_bytes: Maximum log file size before rotation (default 5MB)
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance

    Example:
        >>> from pathlib import Path
        >>> logger = setup_logger('strategy_dashboard', Path('logs/dashboard.log'))
        >>> logger.info("Dashboard started")
    """
    logger = logging.getLogger(name)
    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # get_logger() may already have attached a console handler
    for handler in logger.handlers:
        handler.setLevel(log_level)

    has_console = any(
        type(h) is logging.StreamHandler for h in logger.handlers
    )
    has_file = any(
        isinstance(h, RotatingFileHandler)
        and log_file is not None
        and Path(h.baseFilename).resolve() == Path(log_file).resolve()
        for h in logger.handlers
    )

    if console and not has_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file is not None and not has_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_file),
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with standard configuration.

    Module loggers under the ``strategy_dashboard`` package propagate to the
    package logger, so only that one gets a handler. Any other name gets a
    console handler of its own.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance

    Example:
        >>> from strategy_dashboard.utils.logging_config import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Generating series")
    """
    logger = logging.getLogger(name)

    root_name = name.split('.')[0]
    target = logging.getLogger(root_name)

    if not target.handlers:
        target.setLevel(logging.INFO)

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        target.addHandler(console_handler)

    return logger
