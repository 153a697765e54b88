"""
================================================================================
Global Logging Configuration for Automation Tools
================================================================================

This module provides centralized Loguru logging setup for the test suites.

Features:
    - One-time logger initialisation shared by every test session
    - Consistent console format
    - Optional rotating file sink

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: str = "INFO",
    format_str: Optional[str] = None,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Subsequent calls are no-ops.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_str: Custom log format string
        log_file: Optional path of a rotating log file
        rotation: Rotation policy for the file sink
        retention: Retention policy for the file sink
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or "INFO").upper()
    log_format = format_str or DEFAULT_LOG_FORMAT

    # Remove default logger and add configured one
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),  # Remove padding for file
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "init_logger",
]
