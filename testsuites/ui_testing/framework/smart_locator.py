"""
================================================================================
Smart Locator with Self-Healing Element Resolution
================================================================================

Resolution engine turning a SelectorStrategy into a live element handle:
    1. Primary selector (short timeout, fails fast)
    2. Explicit fallback selectors, in listed order (longer timeout)
    3. Heuristic candidates generated from element type + description
    4. Total failure: optional full-page screenshot and a FAILED log entry

Candidates are tried strictly one after another against the shared page;
the first visible match wins and nothing after it is attempted. Resolution
failure is returned as a value (ResolutionOutcome.found is False); callers
decide whether it is fatal.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from autotest_tools.report_tools.allure_utils import attach_png

from .config_loader import DEFAULT_RESULTS_DIR
from .healing_config import ResolutionTimeouts, SelfHealingConfig
from .healing_log import HealingLog, HealingLogEntry, HealingStatus
from .selector_strategy import SelectorStrategy


class ElementNotFoundError(Exception):
    """Raised when primary, fallback and heuristic candidates all fail."""

    def __init__(
        self,
        description: str,
        primary: str,
        attempted: Tuple[str, ...] = (),
    ):
        self.description = description
        self.primary = primary
        self.attempted = attempted
        message = f"Failed to find element: {description} ({primary})"
        if attempted:
            message += f" after {len(attempted)} candidate(s)"
        super().__init__(message)


class ResolvedVia(str, Enum):
    """Which tier produced the element."""

    PRIMARY = "primary"
    FALLBACK = "fallback"
    INTELLIGENT_FALLBACK = "intelligent-fallback"
    NONE = "none"


@dataclass(frozen=True)
class ResolutionOutcome:
    """
    Result of one resolve call. Never cached: element handles are not
    stable across operations.

    Attributes:
        resolved_via: Tier that matched, NONE on failure
        locator: Playwright locator (borrowed from the page), None on failure
        selector: Selector that matched, None on failure
        fallback_index: Zero-based fallback index when resolved via fallback
        attempted: Every selector tried, in order
    """

    resolved_via: ResolvedVia
    locator: Optional[Locator] = None
    selector: Optional[str] = None
    fallback_index: Optional[int] = None
    attempted: Tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.locator is not None

    @property
    def healed(self) -> bool:
        return self.resolved_via in (ResolvedVia.FALLBACK, ResolvedVia.INTELLIGENT_FALLBACK)


class SmartLocator:
    """
    Self-healing element locator.

    One instance owns one healing log and one configuration snapshot;
    instances share no mutable state.

    Usage:
        >>> smart = SmartLocator(page)
        >>> outcome = await smart.resolve(LOGIN_SELECTORS.USERNAME_INPUT)
        >>> if outcome.found:
        ...     await outcome.locator.fill("standard_user")
        >>> smart.export_healing_report()
    """

    def __init__(
        self,
        page: Page,
        config: Optional[SelfHealingConfig] = None,
        timeouts: Optional[ResolutionTimeouts] = None,
        results_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize SmartLocator with a Playwright page.

        Args:
            page: Playwright Page object
            config: Self-healing configuration (defaults apply if omitted)
            timeouts: Per-tier candidate timeouts
            results_dir: Directory for failure screenshots and reports
        """
        self.page = page
        self.config = config or SelfHealingConfig()
        self.timeouts = timeouts or ResolutionTimeouts()
        self.results_dir = Path(results_dir) if results_dir else Path(DEFAULT_RESULTS_DIR)
        self._healing_log = HealingLog()

    # =========================================================================
    # Resolution
    # =========================================================================

    async def resolve(
        self,
        strategy: SelectorStrategy,
        record_failure: bool = True,
    ) -> ResolutionOutcome:
        """
        Resolve a strategy to a visible element.

        Args:
            strategy: Selector strategy to resolve
            record_failure: On total failure, take the screenshot and add the
                FAILED entry. Pollers pass False and call `record_failure`
                once they give up.

        Returns:
            ResolutionOutcome; `found` is False when every candidate failed
        """
        attempted = []

        for via, index, selector, timeout in self._candidates(strategy):
            attempted.append(selector)
            locator = await self._attempt(selector, timeout)
            if locator is None:
                self._emit(
                    "DEBUG",
                    f"❌ {via.value} candidate failed for '{strategy.description}': {selector}",
                )
                continue
            return self._resolved(strategy, via, index, selector, locator, tuple(attempted))

        if record_failure:
            await self.record_failure(strategy, tuple(attempted))
        else:
            self._emit(
                "DEBUG",
                f"No candidate visible yet for '{strategy.description}' ({len(attempted)} tried)",
            )
        return ResolutionOutcome(resolved_via=ResolvedVia.NONE, attempted=tuple(attempted))

    async def record_failure(self, strategy: SelectorStrategy, attempted: Tuple[str, ...]) -> None:
        """Screenshot (if enabled) and one FAILED entry for an unresolved strategy."""
        await self._capture_failure_screenshot(strategy)
        self._healing_log.record(
            HealingStatus.FAILED,
            strategy.description,
            strategy.primary,
            "FAILED",
        )
        logger.error(
            f"❌ All {len(attempted)} candidates failed for '{strategy.description}' "
            f"(primary: {strategy.primary})"
        )

    async def locate(self, strategy: SelectorStrategy) -> Locator:
        """
        Resolve a strategy or raise.

        Raises:
            ElementNotFoundError: When all candidates fail
        """
        outcome = await self.resolve(strategy)
        if not outcome.found:
            raise ElementNotFoundError(
                strategy.description,
                strategy.primary,
                outcome.attempted,
            )
        return outcome.locator

    async def is_visible(self, strategy: SelectorStrategy) -> bool:
        """Return True if any candidate of the strategy resolves."""
        outcome = await self.resolve(strategy)
        return outcome.found

    def _candidates(
        self,
        strategy: SelectorStrategy,
    ) -> Iterator[Tuple[ResolvedVia, Optional[int], str, int]]:
        """Yield (tier, fallback index, selector, timeout) in resolution order."""
        yield ResolvedVia.PRIMARY, None, strategy.primary, self.timeouts.primary

        for index, selector in enumerate(strategy.fallbacks):
            yield ResolvedVia.FALLBACK, index, selector, self.timeouts.fallback

        # Generated lazily: only reached once every authored selector failed
        authored = set(strategy.selectors())
        for selector in strategy.heuristic_candidates():
            if selector in authored:
                continue
            yield ResolvedVia.INTELLIGENT_FALLBACK, None, selector, self.timeouts.heuristic

    async def _attempt(self, selector: str, timeout: int) -> Optional[Locator]:
        """Locate and wait for visibility; None if the candidate misses."""
        try:
            locator = self.page.locator(selector).first
            await locator.wait_for(state="visible", timeout=timeout)
            return locator
        except PlaywrightError as e:
            # Timeout or an unparsable selector: this candidate only
            self._emit("TRACE", f"Candidate '{selector}' rejected: {str(e)[:80]}")
            return None

    def _resolved(
        self,
        strategy: SelectorStrategy,
        via: ResolvedVia,
        index: Optional[int],
        selector: str,
        locator: Locator,
        attempted: Tuple[str, ...],
    ) -> ResolutionOutcome:
        if via is ResolvedVia.PRIMARY:
            self._emit("DEBUG", f"✅ Element '{strategy.description}' found: {selector}")
        elif via is ResolvedVia.FALLBACK:
            self._healing_log.record(
                HealingStatus.HEALED,
                strategy.description,
                strategy.primary,
                selector,
            )
            self._emit(
                "WARNING",
                f"🔧 Element '{strategy.description}' healed via fallback_{index + 1}: "
                f"{strategy.primary} → {selector}",
            )
        else:
            self._healing_log.record(
                HealingStatus.HEALED,
                strategy.description,
                strategy.primary,
                f"{ResolvedVia.INTELLIGENT_FALLBACK.value}({selector})",
            )
            self._emit(
                "WARNING",
                f"🔧 Element '{strategy.description}' healed via intelligent fallback: "
                f"{strategy.primary} → {selector}",
            )

        return ResolutionOutcome(
            resolved_via=via,
            locator=locator,
            selector=selector,
            fallback_index=index,
            attempted=attempted,
        )

    async def _capture_failure_screenshot(self, strategy: SelectorStrategy) -> Optional[Path]:
        """Full-page screenshot on total failure; never raises."""
        if not self.config.screenshot_on_failure:
            return None

        timestamp = int(datetime.now().timestamp() * 1000)
        path = self.results_dir / f"self-healing-failure-{timestamp}.png"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            await self.page.screenshot(path=str(path), full_page=True)
        except (PlaywrightError, OSError) as e:
            logger.warning(
                f"Failed to capture failure screenshot for '{strategy.description}': {e}"
            )
            return None

        attach_png(path, name=f"Self-healing failure: {strategy.description}")
        logger.debug(f"Failure screenshot saved: {path}")
        return path

    # =========================================================================
    # Healing Log
    # =========================================================================

    @property
    def healing_log(self) -> HealingLog:
        return self._healing_log

    def get_healing_log(self) -> Tuple[HealingLogEntry, ...]:
        """Read-only snapshot of the healing log."""
        return self._healing_log.entries()

    def get_healing_log_lines(self) -> Tuple[str, ...]:
        """Snapshot of the healing log as formatted report lines."""
        return self._healing_log.lines()

    def export_healing_report(self) -> Optional[Path]:
        """Write the healing report to the results directory (best-effort)."""
        return self._healing_log.export(self.results_dir, self.config)

    def clear_log(self) -> None:
        self._healing_log.clear()

    def record(
        self,
        status: HealingStatus,
        strategy: SelectorStrategy,
        resolved: str,
    ) -> HealingLogEntry:
        """Append an entry for `strategy`; used by the action layer."""
        return self._healing_log.record(status, strategy.description, strategy.primary, resolved)

    def _emit(self, level: str, message: str) -> None:
        """Log healing chatter unless logging is disabled."""
        if self.config.enable_logging:
            logger.opt(depth=1).log(level, message)


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "ResolvedVia",
    "ResolutionOutcome",
]
