# ================================================================================
# Element Actions Module
# ================================================================================
#
# Intent-level UI actions built on the self-healing SmartLocator.
#
# Every action resolves its element first, then works through escalating
# tactics until one succeeds:
#   - click:         standard (retried) -> force click -> script click
#   - fill:          clear + fill (retried) -> select-all + type -> set value
#                    and dispatch input/change events
#   - get_text:      text_content -> inner_text -> textContent via script
#   - hover:         standard (retried) -> force hover
#   - double_click:  standard (retried) -> force double click
#   - select_option: select_option (retried) -> click the <option>
#
# Public methods return bool / Optional[str] and never raise for "could not
# do it". Successful escalations log a HEALED entry; exhausting every tactic
# logs a FAILED entry.
#
# ================================================================================

from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional, Tuple, Union

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from .healing_config import ResolutionTimeouts, SelfHealingConfig
from .healing_log import HealingLog, HealingStatus
from .retry import retry_async
from .selector_strategy import SelectorStrategy
from .smart_locator import SmartLocator


# Default timeout for a single action attempt (ms)
DEFAULT_ACTION_TIMEOUT = 5000

Tactic = Tuple[str, Callable[[], Awaitable[Any]]]


class ActionFailedError(Exception):
    """Raised by page objects when an action exhausted every tactic."""

    def __init__(self, action: str, description: str, primary: str, detail: str = ""):
        self.action = action
        self.description = description
        self.primary = primary
        message = f"Failed to {action} element: {description} ({primary})"
        if detail:
            message += f" {detail}"
        super().__init__(message)


class ElementActions:
    """
    Self-healing element actions.

    Wraps SmartLocator resolution with retries and escalating fallback
    tactics so callers only deal with intent plus success/failure.

    Example:
        actions = ElementActions(page)
        ok = await actions.fill(LOGIN_SELECTORS.USERNAME_INPUT, "standard_user")
        ok = await actions.click(LOGIN_SELECTORS.LOGIN_BUTTON)
    """

    def __init__(
        self,
        page: Page,
        config: Optional[SelfHealingConfig] = None,
        smart: Optional[SmartLocator] = None,
        timeouts: Optional[ResolutionTimeouts] = None,
        results_dir: Optional[Union[str, Path]] = None,
        action_timeout: int = DEFAULT_ACTION_TIMEOUT,
    ):
        """
        Initialize ElementActions with a Playwright page.

        Args:
            page: Playwright Page object
            config: Self-healing configuration
            smart: Existing SmartLocator to share (a new one is built otherwise)
            timeouts: Resolution timeouts for a newly built SmartLocator
            results_dir: Results directory for a newly built SmartLocator
            action_timeout: Timeout for one action attempt in milliseconds
        """
        self.page = page
        self.smart = smart or SmartLocator(page, config, timeouts, results_dir)
        self.config = self.smart.config
        self.action_timeout = action_timeout

    @property
    def healing_log(self) -> HealingLog:
        return self.smart.healing_log

    # =========================================================================
    # Actions
    # =========================================================================

    async def click(self, strategy: SelectorStrategy) -> bool:
        """
        Click an element with retry and escalation.

        Returns:
            True on success, False if resolution failed or all tactics failed
        """
        element = await self._resolve(strategy)
        if element is None:
            return False

        ok, _ = await self._run_tactics(strategy, "click", [
            ("click", self._retried(
                lambda: element.click(timeout=self.action_timeout), f"click '{strategy.description}'"
            )),
            ("force-click", lambda: element.click(force=True, timeout=self.action_timeout)),
            ("js-click", lambda: element.evaluate("el => el.click()")),
        ])
        return ok

    async def fill(self, strategy: SelectorStrategy, value: str) -> bool:
        """
        Fill an input with `value`, passed through unchanged.

        Returns:
            True on success, False if resolution failed or all tactics failed
        """
        element = await self._resolve(strategy)
        if element is None:
            return False

        async def standard_fill() -> None:
            await element.clear(timeout=self.action_timeout)
            await element.fill(value, timeout=self.action_timeout)

        async def keyboard_fill() -> None:
            await element.click(timeout=self.action_timeout)
            await self.page.keyboard.press("ControlOrMeta+A")
            await self.page.keyboard.type(value)

        async def script_fill() -> None:
            await element.evaluate("(el, value) => { el.value = value; }", value)
            await element.dispatch_event("input")
            await element.dispatch_event("change")

        ok, _ = await self._run_tactics(strategy, "fill", [
            ("fill", self._retried(standard_fill, f"fill '{strategy.description}'")),
            ("keyboard-fill", keyboard_fill),
            ("js-fill", script_fill),
        ])
        return ok

    async def get_text(self, strategy: SelectorStrategy) -> Optional[str]:
        """
        Read the text of an element.

        Returns:
            The text, or None if it could not be determined (not "")
        """
        element = await self._resolve(strategy)
        if element is None:
            return None

        ok, text = await self._run_tactics(strategy, "get-text", [
            ("text-content", lambda: element.text_content(timeout=self.action_timeout)),
            ("inner-text", lambda: element.inner_text(timeout=self.action_timeout)),
            ("js-text", lambda: element.evaluate("el => el.textContent")),
        ])
        return text if ok else None

    async def get_attribute(self, strategy: SelectorStrategy, name: str) -> Optional[str]:
        """Read attribute `name`; None if absent or unreadable."""
        element = await self._resolve(strategy)
        if element is None:
            return None

        ok, value = await self._run_tactics(strategy, "get-attribute", [
            ("get-attribute", lambda: element.get_attribute(name, timeout=self.action_timeout)),
        ])
        return value if ok else None

    async def hover(self, strategy: SelectorStrategy) -> bool:
        element = await self._resolve(strategy)
        if element is None:
            return False

        ok, _ = await self._run_tactics(strategy, "hover", [
            ("hover", self._retried(
                lambda: element.hover(timeout=self.action_timeout), f"hover '{strategy.description}'"
            )),
            ("force-hover", lambda: element.hover(force=True, timeout=self.action_timeout)),
        ])
        return ok

    async def double_click(self, strategy: SelectorStrategy) -> bool:
        element = await self._resolve(strategy)
        if element is None:
            return False

        ok, _ = await self._run_tactics(strategy, "double-click", [
            ("dblclick", self._retried(
                lambda: element.dblclick(timeout=self.action_timeout),
                f"double-click '{strategy.description}'",
            )),
            ("force-dblclick", lambda: element.dblclick(force=True, timeout=self.action_timeout)),
        ])
        return ok

    async def select_option(self, strategy: SelectorStrategy, value: str) -> bool:
        """
        Select the option with `value` in a <select>.

        Falls back to clicking the select and then the matching <option>.
        """
        element = await self._resolve(strategy)
        if element is None:
            return False

        async def option_click() -> None:
            await element.click(timeout=self.action_timeout)
            option = element.locator(f'option[value="{value}"]')
            await option.click(timeout=self.action_timeout)

        ok, _ = await self._run_tactics(strategy, "select-option", [
            ("select-option", self._retried(
                lambda: element.select_option(value, timeout=self.action_timeout),
                f"select '{value}' in '{strategy.description}'",
            )),
            ("option-click", option_click),
        ])
        return ok

    # =========================================================================
    # Internals
    # =========================================================================

    async def _resolve(self, strategy: SelectorStrategy) -> Optional[Locator]:
        outcome = await self.smart.resolve(strategy)
        return outcome.locator

    def _retried(
        self,
        operation: Callable[[], Awaitable[Any]],
        description: str,
    ) -> Callable[[], Awaitable[Any]]:
        """Wrap a standard tactic in the bounded-retry utility."""
        return lambda: retry_async(
            operation,
            self.config,
            sleep=self.page.wait_for_timeout,
            description=description,
        )

    async def _run_tactics(
        self,
        strategy: SelectorStrategy,
        action: str,
        tactics: List[Tactic],
    ) -> Tuple[bool, Any]:
        """
        Try tactics in order; the first is the standard one.

        Returns:
            (True, result) of the first tactic that succeeded, or (False, None)
        """
        for position, (name, tactic) in enumerate(tactics):
            try:
                result = await tactic()
            except PlaywrightError as e:
                if self.config.enable_logging:
                    logger.warning(
                        f"⚠️ {action} on '{strategy.description}' via {name} failed: {str(e)[:120]}"
                    )
                continue

            if position > 0:
                self.smart.record(HealingStatus.HEALED, strategy, name)
                if self.config.enable_logging:
                    logger.warning(
                        f"🔧 {action} on '{strategy.description}' escalated to {name}"
                    )
            return True, result

        self.smart.record(HealingStatus.FAILED, strategy, f"{action}-exhausted")
        logger.error(
            f"❌ {action} on '{strategy.description}' ({strategy.primary}): "
            f"all {len(tactics)} tactic(s) failed"
        )
        return False, None


__all__ = [
    "ActionFailedError",
    "DEFAULT_ACTION_TIMEOUT",
    "ElementActions",
]
