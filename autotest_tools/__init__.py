"""
================================================================================
Autotest Tools
================================================================================

Infrastructure helpers shared by the test suites.

Modules:
    - common: Loguru logging setup
    - report_tools: Allure attachment helpers

Example:
    from autotest_tools.common import init_logger
    from autotest_tools.report_tools.allure_utils import attach_json

    init_logger(level="INFO")
    attach_json({"healed": 1}, name="Self-Healing Summary")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
