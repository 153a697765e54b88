"""
================================================================================
SauceDemo Selector Catalogs
================================================================================

Immutable self-healing selector strategies for every SauceDemo page.
Each element carries a primary selector, ordered fallbacks, a human-readable
description and an element type for heuristic candidate generation.

Catalogs are frozen dataclass instances passed explicitly to page objects
and the resolution engine:

    await page.healing_click(LOGIN_SELECTORS.LOGIN_BUTTON)

Author: Automation Team
License: MIT
================================================================================
"""

from dataclasses import dataclass, fields
from typing import Dict

from testsuites.ui_testing.framework.selector_strategy import ElementType, SelectorStrategy


def _strategies(catalog) -> Dict[str, SelectorStrategy]:
    return {f.name: getattr(catalog, f.name) for f in fields(catalog)}


# =============================================================================
# Login Page
# =============================================================================

@dataclass(frozen=True)
class LoginSelectors:
    USERNAME_INPUT: SelectorStrategy = SelectorStrategy(
        primary='[data-test="username"]',
        fallbacks=(
            'input[name="user-name"]',
            'input[placeholder*="Username"]',
            'input[id*="username"]',
            'input[type="text"]',
            '.login_wrapper input[type="text"]',
        ),
        description="username input field",
        element_type=ElementType.INPUT,
    )
    PASSWORD_INPUT: SelectorStrategy = SelectorStrategy(
        primary='[data-test="password"]',
        fallbacks=(
            'input[name="password"]',
            'input[placeholder*="Password"]',
            'input[id*="password"]',
            'input[type="password"]',
            '.login_wrapper input[type="password"]',
        ),
        description="password input field",
        element_type=ElementType.INPUT,
    )
    LOGIN_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test="login-button"]',
        fallbacks=(
            'input[type="submit"]',
            'button[type="submit"]',
            ".btn_action",
            'button:has-text("Login")',
            ".login-btn",
            "#login-button",
        ),
        description="login submit button",
        element_type=ElementType.BUTTON,
    )
    ERROR_MESSAGE: SelectorStrategy = SelectorStrategy(
        primary='[data-test="error"]',
        fallbacks=(
            ".error-message-container",
            ".error",
            '[role="alert"]',
            ".alert-error",
            ".login-error",
        ),
        description="login error message",
        element_type=ElementType.TEXT,
    )
    LOGIN_LOGO: SelectorStrategy = SelectorStrategy(
        primary=".login_logo",
        fallbacks=(".logo", 'img[alt*="logo"]', ".brand", ".header-logo"),
        description="login page logo",
        element_type=ElementType.GENERIC,
    )

    def all(self) -> Dict[str, SelectorStrategy]:
        return _strategies(self)


# =============================================================================
# Inventory Page
# =============================================================================

@dataclass(frozen=True)
class InventorySelectors:
    PAGE_TITLE: SelectorStrategy = SelectorStrategy(
        primary=".title",
        fallbacks=(
            ".header_secondary_container .title",
            "h1",
            ".page-title",
            '[data-test="title"]',
        ),
        description="inventory page title",
        element_type=ElementType.TEXT,
    )
    PRODUCT_SORT_DROPDOWN: SelectorStrategy = SelectorStrategy(
        primary=".product_sort_container",
        fallbacks=(
            'select[data-test="product-sort-container"]',
            ".sort-dropdown",
            "select.product_sort_container",
            ".inventory_container select",
        ),
        description="product sort dropdown",
        element_type=ElementType.GENERIC,
    )
    PRODUCT_ITEMS: SelectorStrategy = SelectorStrategy(
        primary=".inventory_item",
        fallbacks=(
            '[data-test="inventory-item"]',
            ".product-item",
            ".inventory_list .inventory_item",
            ".product",
        ),
        description="product items",
        element_type=ElementType.GENERIC,
    )
    ADD_TO_CART_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test^="add-to-cart"]',
        fallbacks=(
            'button:has-text("Add to cart")',
            ".btn_inventory",
            ".add-to-cart-btn",
            "button.btn_primary",
        ),
        description="add to cart button",
        element_type=ElementType.BUTTON,
    )
    REMOVE_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test^="remove"]',
        fallbacks=(
            'button:has-text("Remove")',
            ".btn_secondary",
            ".remove-btn",
            "button.btn_secondary",
        ),
        description="remove from cart button",
        element_type=ElementType.BUTTON,
    )
    SHOPPING_CART_LINK: SelectorStrategy = SelectorStrategy(
        primary=".shopping_cart_link",
        fallbacks=(
            '[data-test="shopping-cart-link"]',
            ".cart-link",
            'a[href*="cart"]',
            "#shopping_cart_container a",
        ),
        description="shopping cart link",
        element_type=ElementType.LINK,
    )
    CART_BADGE: SelectorStrategy = SelectorStrategy(
        primary=".shopping_cart_badge",
        fallbacks=(
            '[data-test="shopping-cart-badge"]',
            ".cart-badge",
            ".badge",
            ".cart-count",
        ),
        description="shopping cart badge",
        element_type=ElementType.TEXT,
    )
    BURGER_MENU: SelectorStrategy = SelectorStrategy(
        primary="#react-burger-menu-btn",
        fallbacks=(
            ".bm-burger-button",
            '[data-test="burger-menu"]',
            ".menu-button",
            ".hamburger",
        ),
        description="burger menu button",
        element_type=ElementType.BUTTON,
    )

    def all(self) -> Dict[str, SelectorStrategy]:
        return _strategies(self)


# =============================================================================
# Cart Page
# =============================================================================

@dataclass(frozen=True)
class CartSelectors:
    CART_ITEMS: SelectorStrategy = SelectorStrategy(
        primary=".cart_item",
        fallbacks=(
            '[data-test="cart-item"]',
            ".item",
            ".cart_list .cart_item",
            ".cart-product",
        ),
        description="cart items",
        element_type=ElementType.GENERIC,
    )
    CONTINUE_SHOPPING_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test="continue-shopping"]',
        fallbacks=(
            'button:has-text("Continue Shopping")',
            ".btn_secondary",
            ".continue-shopping-btn",
            'a:has-text("Continue Shopping")',
        ),
        description="continue shopping button",
        element_type=ElementType.BUTTON,
    )
    CHECKOUT_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test="checkout"]',
        fallbacks=(
            'button:has-text("Checkout")',
            ".btn_action",
            ".checkout-btn",
            "#checkout",
        ),
        description="checkout button",
        element_type=ElementType.BUTTON,
    )
    CART_QUANTITY: SelectorStrategy = SelectorStrategy(
        primary=".cart_quantity",
        fallbacks=(
            '[data-test="item-quantity"]',
            ".quantity",
            ".qty",
            ".item-quantity",
        ),
        description="cart item quantity",
        element_type=ElementType.TEXT,
    )
    ITEM_NAME: SelectorStrategy = SelectorStrategy(
        primary=".inventory_item_name",
        fallbacks=(
            '[data-test="inventory-item-name"]',
            ".item-name",
            ".product-name",
            ".cart_item .inventory_item_name",
        ),
        description="cart item name",
        element_type=ElementType.TEXT,
    )

    def all(self) -> Dict[str, SelectorStrategy]:
        return _strategies(self)


# =============================================================================
# Checkout Pages (information, overview, complete)
# =============================================================================

@dataclass(frozen=True)
class CheckoutSelectors:
    FIRST_NAME_INPUT: SelectorStrategy = SelectorStrategy(
        primary='[data-test="firstName"]',
        fallbacks=(
            'input[name="firstName"]',
            'input[placeholder*="First"]',
            'input[id*="first"]',
            '.checkout_info input[type="text"]:first-of-type',
        ),
        description="first name input",
        element_type=ElementType.INPUT,
    )
    LAST_NAME_INPUT: SelectorStrategy = SelectorStrategy(
        primary='[data-test="lastName"]',
        fallbacks=(
            'input[name="lastName"]',
            'input[placeholder*="Last"]',
            'input[id*="last"]',
            '.checkout_info input[type="text"]:nth-of-type(2)',
        ),
        description="last name input",
        element_type=ElementType.INPUT,
    )
    POSTAL_CODE_INPUT: SelectorStrategy = SelectorStrategy(
        primary='[data-test="postalCode"]',
        fallbacks=(
            'input[name="postalCode"]',
            'input[placeholder*="Zip"]',
            'input[placeholder*="Postal"]',
            'input[id*="postal"]',
            '.checkout_info input[type="text"]:last-of-type',
        ),
        description="postal code input",
        element_type=ElementType.INPUT,
    )
    CONTINUE_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test="continue"]',
        fallbacks=(
            'input[type="submit"]',
            'button:has-text("Continue")',
            ".btn_primary",
            ".continue-btn",
        ),
        description="continue button",
        element_type=ElementType.BUTTON,
    )
    CANCEL_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test="cancel"]',
        fallbacks=(
            'button:has-text("Cancel")',
            ".btn_secondary",
            ".cancel-btn",
            'a:has-text("Cancel")',
        ),
        description="cancel button",
        element_type=ElementType.BUTTON,
    )
    FINISH_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test="finish"]',
        fallbacks=(
            'button:has-text("Finish")',
            ".btn_action",
            ".finish-btn",
            "#finish",
        ),
        description="finish order button",
        element_type=ElementType.BUTTON,
    )
    CHECKOUT_ERROR: SelectorStrategy = SelectorStrategy(
        primary='[data-test="error"]',
        fallbacks=(
            ".error-message-container",
            ".error",
            '[role="alert"]',
            ".checkout-error",
        ),
        description="checkout error message",
        element_type=ElementType.TEXT,
    )
    SUMMARY_TOTAL: SelectorStrategy = SelectorStrategy(
        primary='[data-test="total-label"]',
        fallbacks=(".summary_total_label", ".total", ".summary_info .total"),
        description="order total label",
        element_type=ElementType.TEXT,
    )
    ORDER_COMPLETE_HEADER: SelectorStrategy = SelectorStrategy(
        primary='[data-test="complete-header"]',
        fallbacks=(
            ".complete-header",
            'h2:has-text("Thank you")',
            ".checkout_complete_container h2",
            ".success-header",
        ),
        description="order complete header",
        element_type=ElementType.TEXT,
    )
    BACK_HOME_BUTTON: SelectorStrategy = SelectorStrategy(
        primary='[data-test="back-to-products"]',
        fallbacks=(
            'button:has-text("Back Home")',
            ".btn_primary",
            ".back-to-products-btn",
            'a:has-text("Back")',
        ),
        description="back to products button",
        element_type=ElementType.BUTTON,
    )

    def all(self) -> Dict[str, SelectorStrategy]:
        return _strategies(self)


LOGIN_SELECTORS = LoginSelectors()
INVENTORY_SELECTORS = InventorySelectors()
CART_SELECTORS = CartSelectors()
CHECKOUT_SELECTORS = CheckoutSelectors()

SELECTORS_BY_PAGE = {
    "LOGIN": LOGIN_SELECTORS,
    "INVENTORY": INVENTORY_SELECTORS,
    "CART": CART_SELECTORS,
    "CHECKOUT": CHECKOUT_SELECTORS,
}


def product_slug(product_name: str) -> str:
    """`Sauce Labs Backpack` -> `sauce-labs-backpack` (SauceDemo data-test suffix)."""
    return "-".join(product_name.lower().split())


def product_button(action: str, product_name: str) -> SelectorStrategy:
    """
    Strategy for the add-to-cart / remove button of one product.

    Args:
        action: "add-to-cart" or "remove"
        product_name: Visible product name
    """
    label = "Add to cart" if action == "add-to-cart" else "Remove"
    return SelectorStrategy(
        primary=f'[data-test="{action}-{product_slug(product_name)}"]',
        fallbacks=(
            f'.inventory_item:has-text("{product_name}") button:has-text("{label}")',
            f'.cart_item:has-text("{product_name}") button:has-text("{label}")',
        ),
        description=f"{label.lower()} button for {product_name}",
        element_type=ElementType.BUTTON,
    )


def get_selector_strategy(page: str, element_name: str) -> SelectorStrategy:
    """
    Look up a strategy by page and element name.

    Raises:
        KeyError: If the page or element is unknown
    """
    catalog = SELECTORS_BY_PAGE[page.upper()]
    strategies = catalog.all()
    if element_name not in strategies:
        raise KeyError(f"Unknown element '{element_name}' on page '{page}'")
    return strategies[element_name]


__all__ = [
    "LOGIN_SELECTORS",
    "INVENTORY_SELECTORS",
    "CART_SELECTORS",
    "CHECKOUT_SELECTORS",
    "SELECTORS_BY_PAGE",
    "get_selector_strategy",
    "product_button",
    "product_slug",
]
