"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Browser and page lifecycle management (skips when no browser can launch)
- Page Object fixtures for all pages
- Healing report export and failure capture after every test
- Authenticated session fixture

================================================================================
"""

from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import BrowserContext, Page

from autotest_tools.report_tools.allure_utils import attach_lines
from testsuites.ui_testing.demo_data import USERS
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.cart_page import CartPage
from testsuites.ui_testing.pages.checkout_page import CheckoutPage
from testsuites.ui_testing.pages.inventory_page import InventoryPage
from testsuites.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single browser for all tests in the session, reducing browser
    launch overhead. Skips the UI tests when the browser cannot be launched
    (e.g. `playwright install` was never run).
    """
    manager = BrowserManager()
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser could not be launched: {e}")
    yield manager
    await manager.close()


@pytest.fixture(scope="function")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await context.close()


@pytest.fixture(scope="function")
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    """Function-scoped page fixture."""
    page = await context.new_page()
    yield page
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
async def healing_page(page: Page, request) -> AsyncGenerator[BasePage, None]:
    """
    Generic self-healing page opened on the login page.

    After the test, the healing report is exported and the healing log is
    attached to the Allure report; failures also capture a screenshot.
    """
    base = BasePage(page)
    await base.healing_navigate_to()
    yield base
    await _finish_page(base, request)


@pytest.fixture
async def login_page(page: Page, request) -> AsyncGenerator[LoginPage, None]:
    """LoginPage opened on the login form."""
    login = LoginPage(page)
    await login.open()
    yield login
    await _finish_page(login, request)


@pytest.fixture
async def inventory_page(page: Page, login_page: LoginPage) -> InventoryPage:
    """InventoryPage after logging in as the standard user."""
    user = USERS["STANDARD"]
    result = await login_page.login(user.username, user.password)
    assert result.success, f"Login failed: {result.error_message}"
    return await InventoryPage(page).wait_until_loaded()


@pytest.fixture
def cart_page(page: Page) -> CartPage:
    return CartPage(page)


@pytest.fixture
def checkout_page(page: Page) -> CheckoutPage:
    return CheckoutPage(page)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store the per-phase report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


async def _finish_page(page_object: BasePage, request) -> None:
    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        await page_object.capture_failure(request.node.name)

    lines = page_object.get_healing_log()
    if lines:
        logger.info(f"🔧 {len(lines)} self-healing event(s) in {request.node.name}")
        attach_lines(lines, name="Healing Log")
    page_object.export_healing_report()
