"""
================================================================================
SauceDemo Test Data
================================================================================

Fixed users, checkout information and expected messages for the public
SauceDemo application. Every demo user shares the same password.

================================================================================
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


DEMO_PASSWORD = "secret_sauce"


class UserBehavior(str, Enum):
    NORMAL = "normal"
    LOCKED = "locked"
    PROBLEMATIC = "problematic"
    SLOW = "slow"


class SortOption(str, Enum):
    """Values of the inventory sort <select>."""

    NAME_A_TO_Z = "az"
    NAME_Z_TO_A = "za"
    PRICE_LOW_TO_HIGH = "lohi"
    PRICE_HIGH_TO_LOW = "hilo"


@dataclass(frozen=True)
class User:
    username: str
    password: str
    expected_behavior: UserBehavior
    description: str = ""


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


USERS: Dict[str, User] = {
    "STANDARD": User(
        "standard_user", DEMO_PASSWORD, UserBehavior.NORMAL,
        "Standard user for normal flow testing",
    ),
    "LOCKED_OUT": User(
        "locked_out_user", DEMO_PASSWORD, UserBehavior.LOCKED,
        "User that gets locked out",
    ),
    "PROBLEM": User(
        "problem_user", DEMO_PASSWORD, UserBehavior.PROBLEMATIC,
        "User with UI/UX issues",
    ),
    "PERFORMANCE_GLITCH": User(
        "performance_glitch_user", DEMO_PASSWORD, UserBehavior.SLOW,
        "User with performance issues",
    ),
}

CHECKOUT_INFO: Dict[str, CheckoutInfo] = {
    "VALID": CheckoutInfo("John", "Doe", "12345"),
    "EMPTY_FIRST_NAME": CheckoutInfo("", "Doe", "12345"),
    "EMPTY_LAST_NAME": CheckoutInfo("John", "", "12345"),
    "EMPTY_POSTAL_CODE": CheckoutInfo("John", "Doe", ""),
}

PRODUCT_NAMES = (
    "Sauce Labs Backpack",
    "Sauce Labs Bike Light",
    "Sauce Labs Bolt T-Shirt",
    "Sauce Labs Fleece Jacket",
    "Sauce Labs Onesie",
    "Test.allTheThings() T-Shirt (Red)",
)

ERROR_MESSAGES = {
    "INVALID_CREDENTIALS": "Username and password do not match any user in this service",
    "LOCKED_OUT_USER": "Epic sadface: Sorry, this user has been locked out.",
    "EMPTY_USERNAME": "Epic sadface: Username is required",
    "EMPTY_PASSWORD": "Epic sadface: Password is required",
    "FIRST_NAME_REQUIRED": "Error: First Name is required",
    "LAST_NAME_REQUIRED": "Error: Last Name is required",
    "POSTAL_CODE_REQUIRED": "Error: Postal Code is required",
}

URLS = {
    "LOGIN": "/",
    "INVENTORY": "/inventory.html",
    "CART": "/cart.html",
    "CHECKOUT_STEP_ONE": "/checkout-step-one.html",
    "CHECKOUT_STEP_TWO": "/checkout-step-two.html",
    "CHECKOUT_COMPLETE": "/checkout-complete.html",
}
