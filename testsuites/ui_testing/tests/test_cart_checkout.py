"""
================================================================================
Cart & Checkout UI Tests (Async / Playwright)
================================================================================

Inventory sorting, cart management and the checkout flow on SauceDemo.

================================================================================
"""

import allure
import pytest

from testsuites.ui_testing.demo_data import (
    CHECKOUT_INFO,
    ERROR_MESSAGES,
    PRODUCT_NAMES,
    URLS,
    SortOption,
)
from testsuites.ui_testing.pages.cart_page import CartPage
from testsuites.ui_testing.pages.checkout_page import CheckoutPage
from testsuites.ui_testing.pages.inventory_page import InventoryPage


BACKPACK, BIKE_LIGHT = PRODUCT_NAMES[0], PRODUCT_NAMES[1]


@allure.epic("UI Testing")
@allure.feature("Shopping Cart")
@pytest.mark.cart
class TestCart:

    @allure.title("Inventory lists all products")
    @pytest.mark.P0
    @pytest.mark.smoke
    async def test_inventory_lists_products(self, inventory_page: InventoryPage):
        assert await inventory_page.get_title() == InventoryPage.PAGE_TITLE
        assert sorted(await inventory_page.get_product_names()) == sorted(PRODUCT_NAMES)

    @allure.title("Products sort by price, low to high")
    @pytest.mark.P1
    async def test_sort_by_price(self, inventory_page: InventoryPage):
        assert await inventory_page.sort_products(SortOption.PRICE_LOW_TO_HIGH)

        prices = await inventory_page.get_product_prices()
        assert prices == sorted(prices)

    @allure.title("Adding and removing products updates the badge")
    @pytest.mark.P0
    async def test_add_and_remove_updates_badge(self, inventory_page: InventoryPage):
        await inventory_page.add_product_to_cart(BACKPACK)
        await inventory_page.add_product_to_cart(BIKE_LIGHT)
        assert await inventory_page.get_cart_badge_count() == 2

        await inventory_page.remove_product_from_cart(BACKPACK)
        assert await inventory_page.get_cart_badge_count() == 1

    @allure.title("Cart shows the added products")
    @pytest.mark.P1
    async def test_cart_contents(self, inventory_page: InventoryPage, cart_page: CartPage):
        await inventory_page.add_product_to_cart(BACKPACK)
        await inventory_page.go_to_cart()

        assert await cart_page.get_item_names() == [BACKPACK]

        await cart_page.remove_item(BACKPACK)
        assert await cart_page.is_empty()

        await cart_page.continue_shopping()
        assert inventory_page.page.url.endswith(URLS["INVENTORY"])


@allure.epic("UI Testing")
@allure.feature("Checkout")
@pytest.mark.cart
class TestCheckout:

    @allure.title("Complete checkout with valid information")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    async def test_complete_checkout(
        self,
        inventory_page: InventoryPage,
        cart_page: CartPage,
        checkout_page: CheckoutPage,
    ):
        await inventory_page.add_product_to_cart(BACKPACK)
        await inventory_page.go_to_cart()
        await cart_page.proceed_to_checkout()

        await checkout_page.fill_information(CHECKOUT_INFO["VALID"])
        await checkout_page.continue_to_overview()
        assert await checkout_page.get_total() > 0

        await checkout_page.finish()
        assert await checkout_page.get_complete_header() == "Thank you for your order!"

        await checkout_page.back_home()
        assert inventory_page.page.url.endswith(URLS["INVENTORY"])

    @allure.title("Missing postal code blocks checkout")
    @pytest.mark.P1
    async def test_missing_postal_code(
        self,
        inventory_page: InventoryPage,
        cart_page: CartPage,
        checkout_page: CheckoutPage,
    ):
        await inventory_page.add_product_to_cart(BACKPACK)
        await inventory_page.go_to_cart()
        await cart_page.proceed_to_checkout()

        await checkout_page.fill_information(CHECKOUT_INFO["EMPTY_POSTAL_CODE"])
        await checkout_page.continue_to_overview()

        assert await checkout_page.get_error_message() == ERROR_MESSAGES["POSTAL_CODE_REQUIRED"]

    @allure.title("Cancelling checkout returns to the cart")
    @pytest.mark.P2
    async def test_cancel_returns_to_cart(
        self,
        inventory_page: InventoryPage,
        cart_page: CartPage,
        checkout_page: CheckoutPage,
    ):
        await inventory_page.add_product_to_cart(BACKPACK)
        await inventory_page.go_to_cart()
        await cart_page.proceed_to_checkout()

        await checkout_page.cancel()

        assert inventory_page.page.url.endswith(URLS["CART"])
        assert await cart_page.get_item_names() == [BACKPACK]
