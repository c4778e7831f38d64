"""
Logging Configuration for game narration

This module provides logging configuration with:
- Rotating file handlers (prevents unbounded log growth)
- Colored console output
- Module-specific loggers for granular control

Usage Example:
    from logging_config import setup_logging, get_logger

    # Setup logging at application startup
    setup_logging(level="INFO", log_dir="logs")

    # Get logger in any module
    logger = get_logger(__name__)
    logger.info("Simulation started")

Log Files Created:
- logs/narration.log: Main log (INFO+)
- logs/narration_debug.log: Debug log (DEBUG+)
- logs/narration_error.log: Error log (ERROR+)

Each file rotates at 10MB with 5 backup files.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from config.narration_settings import NarrationSettings


# Log format templates
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "narration"


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Adds ANSI color codes to log levels for better readability.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        """Add color to levelname without leaking it into other handlers"""
        original = record.levelname
        if original in self.COLORS:
            record.levelname = f"{self.COLORS[original]}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _rotating_handler(log_dir: str, suffix: str, level: int, fmt: str,
                      max_bytes: int, backup_count: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Setup application-wide logging configuration.

    This function should be called once at application startup.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to console
        enable_file: Whether to log to file
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup files to keep
        format_style: "detailed" or "simple" format
    """
    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    log_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        root_logger.addHandler(_rotating_handler(
            log_dir, "", logging.INFO, log_format, max_bytes, backup_count))
        root_logger.addHandler(_rotating_handler(
            log_dir, "_debug", logging.DEBUG, DETAILED_FORMAT, max_bytes, backup_count))
        root_logger.addHandler(_rotating_handler(
            log_dir, "_error", logging.ERROR, DETAILED_FORMAT, max_bytes, backup_count))

    root_logger.info(
        "Logging initialized - Level: %s, Console: %s, File: %s",
        level, enable_console, enable_file
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Configure logging for a specific module.

    Args:
        module_name: Module name (e.g., "game_management.play_by_play_logger")
        level: Log level for this module (None = inherit from root)
        propagate: Whether to propagate to parent loggers
    """
    logger = logging.getLogger(module_name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    logger.propagate = propagate

    return logger


class LogContext:
    """
    Context manager for temporary log level changes.

    Example:
        >>> logger = get_logger("game_management.play_by_play_logger")
        >>> with LogContext(logger, "DEBUG"):
        ...     pbp.log_event(PlayType.RUN, ...)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = getattr(logging, level.upper())
        self.original_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)


def setup_narration_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the narration modules.

    Args:
        level: Log level (defaults to NarrationSettings.LOG_LEVEL)
    """
    level = level or NarrationSettings.LOG_LEVEL
    configure_module_logger("game_management", level=level)
    configure_module_logger("game_management.play_by_play_logger", level=level)
    configure_module_logger("game_management.scoring_summary", level=level)


# Quick setup presets

def setup_production_logging(log_dir: str = "logs") -> None:
    """INFO, file only, simple format"""
    setup_logging(
        level="INFO",
        log_dir=log_dir,
        enable_console=False,
        enable_file=True,
        format_style="simple"
    )


def setup_development_logging(log_dir: str = "logs") -> None:
    """DEBUG, colored console and files, detailed format"""
    setup_logging(
        level="DEBUG",
        log_dir=log_dir,
        enable_console=True,
        enable_file=True,
        format_style="detailed"
    )


def setup_testing_logging() -> None:
    """WARNING, console only"""
    setup_logging(
        level="WARNING",
        enable_console=True,
        enable_file=False,
        format_style="simple"
    )
