"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

SauceDemo login page.

Design goals:
  - Every interaction goes through the self-healing wrappers of BasePage
  - Selectors come from the immutable LOGIN_SELECTORS catalog
  - Login returns a LoginResult instead of asserting, so negative tests can
    inspect the error message

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import allure
from playwright.async_api import Error as PlaywrightError

from testsuites.ui_testing.demo_data import URLS
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.pages.selectors import INVENTORY_SELECTORS, LOGIN_SELECTORS


@dataclass(frozen=True)
class LoginResult:
    success: bool
    error_message: Optional[str] = None
    redirect_url: Optional[str] = None


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "Swag Labs"

    # Post-login redirect wait (ms)
    REDIRECT_TIMEOUT = 10000

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.healing_navigate_to(self.URL_PATH)
        return self

    @allure.step("Verify login form is displayed")
    async def verify_form_displayed(self) -> bool:
        """Verify login form elements are visible."""
        username_ok = await self.healing_is_visible(LOGIN_SELECTORS.USERNAME_INPUT)
        password_ok = await self.healing_is_visible(LOGIN_SELECTORS.PASSWORD_INPUT)
        button_ok = await self.healing_is_visible(LOGIN_SELECTORS.LOGIN_BUTTON)
        return username_ok and password_ok and button_ok

    async def enter_username(self, username: str) -> None:
        await self.healing_fill(LOGIN_SELECTORS.USERNAME_INPUT, username)

    async def enter_password(self, password: str) -> None:
        await self.healing_fill(LOGIN_SELECTORS.PASSWORD_INPUT, password)

    async def click_login(self) -> None:
        await self.healing_click(LOGIN_SELECTORS.LOGIN_BUTTON)

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> LoginResult:
        """
        Fill the credentials and submit.

        Returns:
            LoginResult with the inventory URL on success, or the
            displayed error message on failure
        """
        await self.enter_username(username)
        await self.enter_password(password)
        await self.click_login()

        try:
            await self.page.wait_for_url(
                f"**{URLS['INVENTORY']}", timeout=self.REDIRECT_TIMEOUT
            )
        except PlaywrightError:
            return LoginResult(success=False, error_message=await self.get_error_message())

        return LoginResult(success=True, redirect_url=self.page.url)

    async def get_error_message(self) -> str:
        return await self.healing_get_text(LOGIN_SELECTORS.ERROR_MESSAGE)

    async def is_error_displayed(self) -> bool:
        return await self.healing_is_visible(LOGIN_SELECTORS.ERROR_MESSAGE)

    async def is_logged_in(self) -> bool:
        """True once the inventory page title is visible."""
        return await self.healing_is_visible(INVENTORY_SELECTORS.PAGE_TITLE)

    async def assert_login_page_loaded(self) -> None:
        """Hard assertion helper used by tests."""
        assert await self.verify_form_displayed(), "Login form should be visible"
