"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, initializes logging and auto-marks tests by
directory.

================================================================================
"""

import pytest

from autotest_tools.common.global_config import init_logger
from testsuites.ui_testing.framework.config_loader import ConfigLoader


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live SauceDemo site"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests against a fake page"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "self_healing: Tests exercising selector healing"
    )
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to the shopping cart and checkout"
    )

    loader = ConfigLoader()
    init_logger(
        level=loader.get("logging.level", "INFO"),
        log_file=loader.get("logging.file"),
    )


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds markers to tests dynamically based on their directory.
    """
    for item in items:
        # Auto-add 'ui' and 'e2e' markers to tests in ui_testing directory
        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)

        # Auto-add 'unit' marker to tests in unit directory
        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "SauceDemo Self-Healing UI Automation",
        "=" * 60,
        "",
    ]
