"""
================================================================================
Checkout Page Object (Async / Playwright)
================================================================================

SauceDemo checkout flow: information form, overview and completion.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.demo_data import URLS, CheckoutInfo
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.pages.selectors import CHECKOUT_SELECTORS


class CheckoutPage(PageBase):
    """Checkout page object (async)."""

    URL_PATH = URLS["CHECKOUT_STEP_ONE"]
    PAGE_TITLE = "Checkout: Your Information"

    @allure.step("Fill checkout information")
    async def fill_information(self, info: CheckoutInfo) -> None:
        await self.healing_fill(CHECKOUT_SELECTORS.FIRST_NAME_INPUT, info.first_name)
        await self.healing_fill(CHECKOUT_SELECTORS.LAST_NAME_INPUT, info.last_name)
        await self.healing_fill(CHECKOUT_SELECTORS.POSTAL_CODE_INPUT, info.postal_code)

    @allure.step("Continue to overview")
    async def continue_to_overview(self) -> None:
        await self.healing_click(CHECKOUT_SELECTORS.CONTINUE_BUTTON)

    async def cancel(self) -> None:
        await self.healing_click(CHECKOUT_SELECTORS.CANCEL_BUTTON)

    async def get_error_message(self) -> str:
        return await self.healing_get_text(CHECKOUT_SELECTORS.CHECKOUT_ERROR)

    async def get_total(self) -> float:
        """Order total from the overview, e.g. `Total: $32.39` -> 32.39."""
        text = await self.healing_get_text(CHECKOUT_SELECTORS.SUMMARY_TOTAL)
        return float(text.rsplit("$", 1)[-1].strip())

    @allure.step("Finish order")
    async def finish(self) -> None:
        await self.healing_click(CHECKOUT_SELECTORS.FINISH_BUTTON)

    async def get_complete_header(self) -> str:
        return (await self.healing_get_text(CHECKOUT_SELECTORS.ORDER_COMPLETE_HEADER)).strip()

    async def back_home(self) -> None:
        await self.healing_click(CHECKOUT_SELECTORS.BACK_HOME_BUTTON)
