"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

SauceDemo product listing: sorting, add/remove to cart, cart badge.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure

from testsuites.ui_testing.demo_data import URLS, SortOption
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.pages.selectors import INVENTORY_SELECTORS, product_button


class InventoryPage(PageBase):
    """Inventory page object (async)."""

    URL_PATH = URLS["INVENTORY"]
    PAGE_TITLE = "Products"

    @allure.step("Wait for inventory page")
    async def wait_until_loaded(self, timeout: int = 10000) -> "InventoryPage":
        await self.healing_wait_for_element(INVENTORY_SELECTORS.PAGE_TITLE, timeout=timeout)
        return self

    async def get_title(self) -> str:
        return (await self.healing_get_text(INVENTORY_SELECTORS.PAGE_TITLE)).strip()

    async def is_loaded(self) -> bool:
        return await self.healing_is_visible(INVENTORY_SELECTORS.PAGE_TITLE)

    async def get_product_names(self) -> List[str]:
        """All product names in display order."""
        await self.healing_find_element(INVENTORY_SELECTORS.PRODUCT_ITEMS)
        names = await self.page.locator(".inventory_item_name").all_text_contents()
        return [name.strip() for name in names]

    async def get_product_prices(self) -> List[float]:
        """All product prices in display order."""
        await self.healing_find_element(INVENTORY_SELECTORS.PRODUCT_ITEMS)
        prices = await self.page.locator(".inventory_item_price").all_text_contents()
        return [float(price.strip().lstrip("$")) for price in prices]

    async def get_product_count(self) -> int:
        await self.healing_find_element(INVENTORY_SELECTORS.PRODUCT_ITEMS)
        return await self.page.locator(INVENTORY_SELECTORS.PRODUCT_ITEMS.primary).count()

    @allure.step("Sort products by {sort_option}")
    async def sort_products(self, sort_option: SortOption) -> bool:
        return await self.healing_select_option(
            INVENTORY_SELECTORS.PRODUCT_SORT_DROPDOWN,
            SortOption(sort_option).value,
        )

    @allure.step("Add '{product_name}' to cart")
    async def add_product_to_cart(self, product_name: str) -> None:
        await self.healing_click(product_button("add-to-cart", product_name))

    @allure.step("Remove '{product_name}' from cart")
    async def remove_product_from_cart(self, product_name: str) -> None:
        await self.healing_click(product_button("remove", product_name))

    async def get_cart_badge_count(self) -> int:
        """Number on the cart badge; 0 when the badge is absent (empty cart)."""
        badge = self.page.locator(INVENTORY_SELECTORS.CART_BADGE.primary)
        if await badge.count() == 0:
            return 0
        text = await self.healing_get_text(INVENTORY_SELECTORS.CART_BADGE)
        return int(text.strip() or 0)

    @allure.step("Open cart")
    async def go_to_cart(self) -> None:
        await self.healing_click(INVENTORY_SELECTORS.SHOPPING_CART_LINK)
