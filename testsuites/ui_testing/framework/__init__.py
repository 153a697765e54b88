"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework with self-healing element resolution.

Components:
    - selector_strategy: Selector strategies and heuristic candidate generation
    - smart_locator: Resolution engine (primary -> fallbacks -> heuristics)
    - element_actions: Intent-level actions with retries and escalating tactics
    - healing_log: Healing log and JSON report
    - retry: Bounded retry with exponential backoff
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, UISettings
from .healing_config import ResolutionTimeouts, SelfHealingConfig
from .healing_log import HealingLog, HealingLogEntry, HealingStatus
from .retry import backoff_delays, retry_async
from .selector_strategy import ElementType, SelectorStrategy
from .smart_locator import (
    ElementNotFoundError,
    ResolutionOutcome,
    ResolvedVia,
    SmartLocator,
)
from .element_actions import ActionFailedError, ElementActions
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
    "SelfHealingConfig",
    "ResolutionTimeouts",
    "HealingLog",
    "HealingLogEntry",
    "HealingStatus",
    "backoff_delays",
    "retry_async",
    "ElementType",
    "SelectorStrategy",
    "SmartLocator",
    "ElementNotFoundError",
    "ResolvedVia",
    "ResolutionOutcome",
    "ElementActions",
    "ActionFailedError",
    "BasePage",
    "BrowserManager",
]
