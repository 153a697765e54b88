import pytest

from testsuites.ui_testing.framework.selector_strategy import ElementType, SelectorStrategy
from testsuites.ui_testing.pages.selectors import (
    CART_SELECTORS,
    CHECKOUT_SELECTORS,
    INVENTORY_SELECTORS,
    LOGIN_SELECTORS,
    get_selector_strategy,
    product_button,
)


def test_every_element_type_generates_candidates():
    for element_type in ElementType:
        candidates = element_type.candidates("submit order")
        assert candidates, element_type
        assert len(candidates) == len(set(candidates))


def test_parse_accepts_members_and_tags():
    assert ElementType.parse(ElementType.LINK) is ElementType.LINK
    assert ElementType.parse("Button") is ElementType.BUTTON
    assert ElementType.parse(" input ") is ElementType.INPUT

    with pytest.raises(ValueError, match="Unknown element type"):
        ElementType.parse("checkbox")


def test_strategy_normalizes_fields():
    strategy = SelectorStrategy(
        primary="#user",
        fallbacks=["input[name=user]", "input[type=text]"],
        element_type="input",
    )

    assert strategy.fallbacks == ("input[name=user]", "input[type=text]")
    assert strategy.element_type is ElementType.INPUT
    assert strategy.description == "#user"
    assert strategy.selectors() == ("#user", "input[name=user]", "input[type=text]")


@pytest.mark.parametrize("primary", ["", "   "])
def test_strategy_rejects_empty_primary(primary):
    with pytest.raises(ValueError):
        SelectorStrategy(primary=primary)


def test_strategy_rejects_string_fallbacks():
    with pytest.raises(ValueError):
        SelectorStrategy(primary="#a", fallbacks="#b")


def test_strategy_is_immutable():
    strategy = SelectorStrategy(primary="#a")
    with pytest.raises(AttributeError):
        strategy.primary = "#b"

    broken = strategy.with_primary("#broken")
    assert broken.primary == "#broken"
    assert strategy.primary == "#a"
    assert strategy.with_fallbacks(["#c"]).fallbacks == ("#c",)


def test_candidates_are_case_insensitive():
    assert ElementType.BUTTON.candidates("LOGIN") == ElementType.BUTTON.candidates("login")


def test_empty_description_has_no_candidates():
    assert ElementType.GENERIC.candidates("   ") == []


def test_login_button_keyword_candidates():
    candidates = ElementType.BUTTON.candidates("login")

    assert candidates[0] == 'button:has-text("login")'
    for selector in ('button[type="submit"]', 'input[type="submit"]', '[data-test*="login"]'):
        assert selector in candidates
    # Common attribute candidates close the list, minus keyword duplicates
    assert candidates.count('[data-test*="login"]') == 1
    assert candidates[-2:] == ['[aria-label*="login" i]', '[data-testid*="login"]']


def test_add_to_cart_and_checkout_keywords():
    add = ElementType.BUTTON.candidates("add to cart button")
    assert '[data-test*="add-to-cart"]' in add

    checkout = ElementType.BUTTON.candidates("checkout button")
    assert '[data-test*="checkout"]' in checkout
    assert '[data-test*="add-to-cart"]' not in checkout


@pytest.mark.parametrize(
    "description, expected",
    [
        ("username field", 'input[type="text"]'),
        ("password field", 'input[type="password"]'),
        ("email address", 'input[type="email"]'),
    ],
)
def test_input_keyword_candidates(description, expected):
    assert expected in ElementType.INPUT.candidates(description)


def test_text_candidates_include_exact_and_contains():
    candidates = ElementType.TEXT.candidates("Products")

    assert ':text("products")' in candidates
    assert ':text-is("products")' in candidates
    assert '[aria-label*="products" i]' in candidates


def test_description_quotes_are_escaped():
    candidates = ElementType.LINK.candidates('say "hi"')
    assert 'a:has-text("say \\"hi\\"")' in candidates


def test_catalogs_are_well_formed():
    for catalog in (LOGIN_SELECTORS, INVENTORY_SELECTORS, CART_SELECTORS, CHECKOUT_SELECTORS):
        for name, strategy in catalog.all().items():
            assert isinstance(strategy, SelectorStrategy), name
            assert strategy.primary not in strategy.fallbacks, name
            assert strategy.description != strategy.primary, name


def test_catalog_lookup():
    assert get_selector_strategy("login", "USERNAME_INPUT") is LOGIN_SELECTORS.USERNAME_INPUT

    with pytest.raises(KeyError):
        get_selector_strategy("LOGIN", "NOPE")


def test_product_button_strategy():
    strategy = product_button("add-to-cart", "Sauce Labs Backpack")

    assert strategy.primary == '[data-test="add-to-cart-sauce-labs-backpack"]'
    assert strategy.element_type is ElementType.BUTTON
    assert '[data-test*="add-to-cart"]' in strategy.heuristic_candidates()
