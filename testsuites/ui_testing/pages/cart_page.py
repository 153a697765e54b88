"""
================================================================================
Cart Page Object (Async / Playwright)
================================================================================

SauceDemo shopping cart.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure

from testsuites.ui_testing.demo_data import URLS
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.pages.selectors import CART_SELECTORS, product_button


class CartPage(PageBase):
    """Cart page object (async)."""

    URL_PATH = URLS["CART"]
    PAGE_TITLE = "Your Cart"

    @allure.step("Open cart page")
    async def open(self) -> "CartPage":
        await self.healing_navigate_to(self.URL_PATH)
        await self.healing_wait_for_element(CART_SELECTORS.CONTINUE_SHOPPING_BUTTON)
        return self

    async def get_item_count(self) -> int:
        return await self.page.locator(CART_SELECTORS.CART_ITEMS.primary).count()

    async def get_item_names(self) -> List[str]:
        names = await self.page.locator(CART_SELECTORS.ITEM_NAME.primary).all_text_contents()
        return [name.strip() for name in names]

    async def is_empty(self) -> bool:
        return await self.get_item_count() == 0

    @allure.step("Remove '{product_name}' from cart")
    async def remove_item(self, product_name: str) -> None:
        await self.healing_click(product_button("remove", product_name))

    @allure.step("Continue shopping")
    async def continue_shopping(self) -> None:
        await self.healing_click(CART_SELECTORS.CONTINUE_SHOPPING_BUTTON)

    @allure.step("Proceed to checkout")
    async def proceed_to_checkout(self) -> None:
        await self.healing_click(CART_SELECTORS.CHECKOUT_BUTTON)
