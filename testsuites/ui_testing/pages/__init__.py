"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the SauceDemo pages.

Each page class encapsulates:
    - Page-specific actions over self-healing selector strategies
    - Verification helpers

Author: Automation Team
License: MIT
================================================================================
"""

from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .inventory_page import InventoryPage
from .login_page import LoginPage, LoginResult

__all__ = [
    "CartPage",
    "CheckoutPage",
    "InventoryPage",
    "LoginPage",
    "LoginResult",
]
