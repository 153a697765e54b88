"""
================================================================================
Self-Healing Configuration
================================================================================

Immutable configuration snapshots for the self-healing engine:
    - SelfHealingConfig: retry/backoff, logging and screenshot switches
    - ResolutionTimeouts: per-tier wait budgets for locator discovery

Resolution tiers use fixed timeouts while action retries use exponential
backoff; the two are configured separately on purpose.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config_loader import ConfigLoader
    from .selector_strategy import SelectorStrategy


@dataclass(frozen=True)
class SelfHealingConfig:
    """
    Self-healing behaviour switches.

    Attributes:
        max_retries: Total attempts for a standard action (>= 1)
        retry_delay_ms: Base backoff delay in milliseconds (>= 0)
        enable_logging: Emit healing activity to the log
        screenshot_on_failure: Capture a full-page screenshot when
            resolution fails outright
    """

    max_retries: int = 3
    retry_delay_ms: int = 1000
    enable_logging: bool = True
    screenshot_on_failure: bool = True

    def __post_init__(self) -> None:
        if int(self.max_retries) < 1:
            raise ValueError(f"max_retries must be >= 1, got {self.max_retries}")
        if int(self.retry_delay_ms) < 0:
            raise ValueError(f"retry_delay_ms must be >= 0, got {self.retry_delay_ms}")

    def to_dict(self) -> Dict[str, Any]:
        """Render the config the way the healing report stores it."""
        return {
            "maxRetries": self.max_retries,
            "retryDelayMs": self.retry_delay_ms,
            "enableLogging": self.enable_logging,
            "screenshotOnFailure": self.screenshot_on_failure,
        }

    @classmethod
    def from_loader(cls, loader: "ConfigLoader") -> "SelfHealingConfig":
        """Build from the `self_healing.*` configuration keys."""
        defaults = cls()
        return cls(
            max_retries=loader.get_int("self_healing.max_retries", defaults.max_retries),
            retry_delay_ms=loader.get_int("self_healing.retry_delay_ms", defaults.retry_delay_ms),
            enable_logging=loader.get_bool("self_healing.enable_logging", defaults.enable_logging),
            screenshot_on_failure=loader.get_bool(
                "self_healing.screenshot_on_failure", defaults.screenshot_on_failure
            ),
        )


@dataclass(frozen=True)
class ResolutionTimeouts:
    """
    Per-candidate wait budgets in milliseconds.

    Primary attempts fail fast, fallbacks tolerate more latency and
    heuristic candidates are many and cheap to reject.
    """

    primary: int = 3000
    fallback: int = 4000
    heuristic: int = 2000

    def __post_init__(self) -> None:
        for name in ("primary", "fallback", "heuristic"):
            if int(getattr(self, name)) <= 0:
                raise ValueError(f"{name} timeout must be > 0")
        if not self.heuristic <= self.primary < self.fallback:
            raise ValueError(
                "timeouts must satisfy heuristic <= primary < fallback, got "
                f"heuristic={self.heuristic}, primary={self.primary}, fallback={self.fallback}"
            )

    def total_budget(
        self,
        strategy: "SelectorStrategy",
        heuristic_count: Optional[int] = None,
    ) -> int:
        """
        Worst-case time for one resolve call of `strategy`.

        Args:
            strategy: Strategy to be resolved
            heuristic_count: Override for the number of heuristic candidates
        """
        if heuristic_count is None:
            heuristic_count = len(strategy.heuristic_candidates())
        return (
            self.primary
            + self.fallback * len(strategy.fallbacks)
            + self.heuristic * heuristic_count
        )

    @classmethod
    def from_loader(cls, loader: "ConfigLoader") -> "ResolutionTimeouts":
        """Build from the `self_healing.timeouts.*` configuration keys."""
        defaults = cls()
        return cls(
            primary=loader.get_int("self_healing.timeouts.primary", defaults.primary),
            fallback=loader.get_int("self_healing.timeouts.fallback", defaults.fallback),
            heuristic=loader.get_int("self_healing.timeouts.heuristic", defaults.heuristic),
        )


__all__ = [
    "SelfHealingConfig",
    "ResolutionTimeouts",
]
