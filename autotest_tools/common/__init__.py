"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared logging setup for the test suites.

Exports:
    - init_logger: Initialize loguru with standard settings

Usage:
    from autotest_tools.common import init_logger

    init_logger(level="DEBUG")

================================================================================
"""

from .global_config import DEFAULT_LOG_FORMAT, init_logger

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "init_logger",
]
