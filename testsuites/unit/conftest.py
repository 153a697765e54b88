"""
Fixtures for the offline unit tests (no browser required).
"""

import pytest

from testsuites.ui_testing.framework.healing_config import ResolutionTimeouts, SelfHealingConfig
from testsuites.unit.fake_page import FakePage


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def fast_config() -> SelfHealingConfig:
    return SelfHealingConfig(max_retries=3, retry_delay_ms=100)


@pytest.fixture
def fast_timeouts() -> ResolutionTimeouts:
    return ResolutionTimeouts(primary=30, fallback=40, heuristic=20)
