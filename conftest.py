"""
Repository-level pytest configuration.

Provides:
  - Defaults for the public SauceDemo environment (no secrets embedded)
  - A fixture that keeps the configuration singleton from leaking between unit tests
"""

from __future__ import annotations

import os
from typing import Generator

import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader


@pytest.fixture(scope="session", autouse=True)
def _demo_env_defaults() -> Generator[None, None, None]:
    """
    Set SauceDemo environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "UI_BASE_URL": "https://www.saucedemo.com",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield


@pytest.fixture
def fresh_config() -> Generator[None, None, None]:
    """Drop the cached configuration before and after a test."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
