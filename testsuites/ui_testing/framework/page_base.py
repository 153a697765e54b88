"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation with retrying load strategies
    - Self-healing element interaction (raising wrappers over ElementActions)
    - Screenshot and debugging utilities
    - Healing log access and report export

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from autotest_tools.report_tools.allure_utils import attach_lines, attach_png, attach_text

from .config_loader import DEFAULT_BASE_URL, ConfigLoader
from .element_actions import ActionFailedError, ElementActions
from .healing_config import ResolutionTimeouts, SelfHealingConfig
from .healing_log import HealingLogEntry
from .selector_strategy import SelectorStrategy
from .smart_locator import ElementNotFoundError, SmartLocator


def _mask(strategy: SelectorStrategy, value: str) -> str:
    if "password" in strategy.description.lower():
        return "*" * len(value)
    return value


class BasePage:
    """
    Base class for all page objects.

    Provides common functionality for:
        - Navigation and URL handling
        - Self-healing element interaction
        - Screenshot capture
        - Healing log reporting

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"

            async def login(self, username: str, password: str):
                await self.healing_fill(LOGIN_SELECTORS.USERNAME_INPUT, username)
                await self.healing_fill(LOGIN_SELECTORS.PASSWORD_INPUT, password)
                await self.healing_click(LOGIN_SELECTORS.LOGIN_BUTTON)
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        config: Optional[SelfHealingConfig] = None,
        timeouts: Optional[ResolutionTimeouts] = None,
        results_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application
            config: Self-healing configuration (read from config.yaml if omitted)
            timeouts: Resolution timeouts (read from config.yaml if omitted)
            results_dir: Directory for screenshots and healing reports
        """
        loader = ConfigLoader()
        self.page = page
        self.base_url = (base_url or loader.ui_settings().base_url).rstrip("/")
        self.results_dir = Path(results_dir) if results_dir else loader.results_dir()

        self.actions = ElementActions(
            page,
            config=config or SelfHealingConfig.from_loader(loader),
            timeouts=timeouts or ResolutionTimeouts.from_loader(loader),
            results_dir=self.results_dir,
        )

    @property
    def smart(self) -> SmartLocator:
        return self.actions.smart

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def healing_navigate_to(self, path: str = "") -> None:
        """
        Navigate to `path`, retrying with other load strategies on failure.

        Raises:
            PlaywrightError: If the final attempt fails as well
        """
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path or '/'}"):
            try:
                await self.page.goto(full_url)
                return
            except PlaywrightError as e:
                logger.warning(f"Navigation to {full_url} failed ({e}), retrying")

            try:
                await self.page.goto(full_url, wait_until="domcontentloaded")
            except PlaywrightError as e:
                logger.warning(f"Navigation retry failed ({e}), waiting for network idle")
                await self.page.goto(full_url, wait_until="networkidle")

    # =========================================================================
    # Self-Healing Element Interactions
    # =========================================================================

    async def healing_click(self, strategy: SelectorStrategy) -> bool:
        """
        Click element with self-healing.

        Raises:
            ActionFailedError: If the element could not be clicked
        """
        with allure.step(f"Click: {strategy.description}"):
            if not await self.actions.click(strategy):
                raise ActionFailedError("click", strategy.description, strategy.primary)
            return True

    async def healing_fill(self, strategy: SelectorStrategy, value: str) -> bool:
        """
        Fill input element with self-healing.

        Raises:
            ActionFailedError: If the element could not be filled
        """
        shown = _mask(strategy, value)
        with allure.step(f"Fill {strategy.description}: {shown}"):
            if not await self.actions.fill(strategy, value):
                raise ActionFailedError(
                    "fill",
                    strategy.description,
                    strategy.primary,
                    detail=f"with value: {shown}",
                )
            return True

    async def healing_get_text(self, strategy: SelectorStrategy) -> str:
        """
        Get text content of element.

        Raises:
            ActionFailedError: If the text could not be determined
        """
        text = await self.actions.get_text(strategy)
        if text is None:
            raise ActionFailedError("get text from", strategy.description, strategy.primary)
        return text

    async def healing_find_element(self, strategy: SelectorStrategy) -> Locator:
        """
        Resolve element or raise.

        Raises:
            ElementNotFoundError: If no candidate resolved
        """
        return await self.smart.locate(strategy)

    async def healing_is_visible(self, strategy: SelectorStrategy) -> bool:
        return await self.smart.is_visible(strategy)

    async def healing_wait_for_element(
        self,
        strategy: SelectorStrategy,
        timeout: int = 10000,
        poll_interval: int = 1000,
    ) -> Locator:
        """
        Poll resolution until the element appears.

        Intermediate misses are silent; a timeout records one FAILED entry
        and at most one failure screenshot.

        Args:
            strategy: Element to wait for
            timeout: Total wait in milliseconds
            poll_interval: Pause between resolution rounds in milliseconds

        Raises:
            ElementNotFoundError: If the element did not appear in time
        """
        deadline = time.monotonic() + timeout / 1000
        attempted: Tuple[str, ...] = ()

        while time.monotonic() < deadline:
            outcome = await self.smart.resolve(strategy, record_failure=False)
            if outcome.found:
                return outcome.locator
            attempted = outcome.attempted
            await self.page.wait_for_timeout(poll_interval)

        await self.smart.record_failure(strategy, attempted)
        raise ElementNotFoundError(strategy.description, strategy.primary, attempted)

    async def healing_get_attribute(
        self,
        strategy: SelectorStrategy,
        attribute_name: str,
    ) -> Optional[str]:
        return await self.actions.get_attribute(strategy, attribute_name)

    async def healing_hover(self, strategy: SelectorStrategy) -> bool:
        return await self.actions.hover(strategy)

    async def healing_double_click(self, strategy: SelectorStrategy) -> bool:
        return await self.actions.double_click(strategy)

    async def healing_select_option(self, strategy: SelectorStrategy, value: str) -> bool:
        with allure.step(f"Select '{value}' in {strategy.description}"):
            return await self.actions.select_option(strategy, value)

    # =========================================================================
    # Healing Log
    # =========================================================================

    def get_healing_log(self) -> Tuple[str, ...]:
        """Healing log as formatted report lines."""
        return self.smart.get_healing_log_lines()

    def get_healing_entries(self) -> Tuple[HealingLogEntry, ...]:
        return self.smart.get_healing_log()

    def export_healing_report(self) -> Optional[Path]:
        """Write the healing report; never raises."""
        return self.smart.export_healing_report()

    def clear_healing_log(self) -> None:
        self.smart.clear_log()

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def healing_take_screenshot(
        self,
        name: str,
        full_page: bool = True,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot, tagged `-healed` when healing happened on this page.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        screenshot_dir = self.results_dir / "screenshots"
        screenshot_dir.mkdir(parents=True, exist_ok=True)

        healing_context = "-healed" if self.get_healing_log() else ""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = screenshot_dir / f"{name}{healing_context}-{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            attach_png(filepath, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot
            - Current URL
            - Healing log
        """
        with allure.step("Capture failure details"):
            try:
                await self.healing_take_screenshot(f"failure_{test_name}")
            except (PlaywrightError, OSError) as e:
                logger.warning(f"Failed to capture failure screenshot: {e}")

            attach_text(self.page.url, name="Current URL")
            attach_lines(self.get_healing_log(), name="Healing Log")


__all__ = [
    "BasePage",
    "PageBase",
    "DEFAULT_BASE_URL",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
