import json

import pytest
from playwright.async_api import Error as PlaywrightError

from testsuites.ui_testing.framework.element_actions import ActionFailedError
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.selector_strategy import SelectorStrategy
from testsuites.ui_testing.framework.smart_locator import ElementNotFoundError
from testsuites.unit.fake_page import FakePage


LOGIN = SelectorStrategy(primary="#login", description="login button", element_type="button")
PASSWORD = SelectorStrategy(primary="#password", description="password input field", element_type="input")
TITLE = SelectorStrategy(primary=".title", description="page title", element_type="text")
BROKEN_TITLE = SelectorStrategy(primary="#nope", fallbacks=[".title"], description="page title")


@pytest.fixture
def page_for(fast_config, fast_timeouts, tmp_path):
    def build(page: FakePage) -> BasePage:
        return BasePage(
            page,
            base_url="https://shop.example/",
            config=fast_config,
            timeouts=fast_timeouts,
            results_dir=tmp_path,
        )
    return build


def test_url_building(page_for):
    base = page_for(FakePage())

    assert base.base_url == "https://shop.example"
    assert base.url == "https://shop.example/"


async def test_healing_click_success(page_for):
    base = page_for(FakePage(visible={"#login"}))
    assert await base.healing_click(LOGIN) is True


async def test_healing_click_raises_when_exhausted(page_for):
    page = FakePage(visible={"#login"})
    for operation in ("click", "force_click", "evaluate"):
        page.fail(operation)
    base = page_for(page)

    with pytest.raises(ActionFailedError) as exc_info:
        await base.healing_click(LOGIN)

    assert str(exc_info.value) == "Failed to click element: login button (#login)"
    assert exc_info.value.action == "click"


async def test_healing_fill_error_masks_password(page_for):
    page = FakePage()
    base = page_for(page)

    with pytest.raises(ActionFailedError) as exc_info:
        await base.healing_fill(PASSWORD, "secret_sauce")

    message = str(exc_info.value)
    assert message.startswith("Failed to fill element: password input field (#password)")
    assert "secret_sauce" not in message
    assert "************" in message


async def test_healing_get_text(page_for):
    page = FakePage(visible={".title"})
    page.texts[".title"] = "Products"
    base = page_for(page)

    assert await base.healing_get_text(TITLE) == "Products"

    with pytest.raises(ActionFailedError, match="Failed to get text from element: page title"):
        await page_for(FakePage()).healing_get_text(TITLE)


async def test_healing_find_element(page_for):
    base = page_for(FakePage(visible={".title"}))

    locator = await base.healing_find_element(BROKEN_TITLE)

    assert locator.selector == ".title"
    assert len(base.get_healing_log()) == 1
    with pytest.raises(ElementNotFoundError):
        await page_for(FakePage()).healing_find_element(TITLE)


async def test_healing_is_visible(page_for):
    assert await page_for(FakePage(visible={".title"})).healing_is_visible(TITLE)
    assert not await page_for(FakePage()).healing_is_visible(TITLE)


async def test_wait_for_element_polls_until_visible(page_for):
    page = FakePage()
    page.reveal_on_wait = ".title"
    base = page_for(page)

    locator = await base.healing_wait_for_element(TITLE, timeout=5000, poll_interval=1000)

    assert locator.selector == ".title"
    assert page.delays == [1000]
    assert base.get_healing_log() == ()
    assert page.screenshots == []


async def test_wait_for_element_times_out(page_for):
    page = FakePage()
    page.sleep_for_real = True
    base = page_for(page)

    with pytest.raises(ElementNotFoundError):
        await base.healing_wait_for_element(TITLE, timeout=50, poll_interval=20)

    assert page.delays


async def test_wait_timeout_records_a_single_failure(page_for):
    page = FakePage()
    page.sleep_for_real = True
    base = page_for(page)

    with pytest.raises(ElementNotFoundError) as exc_info:
        await base.healing_wait_for_element(TITLE, timeout=300, poll_interval=50)

    assert len(page.delays) > 1
    assert len(base.get_healing_log()) == 1
    assert " - FAILED - page title" in base.get_healing_log()[0]
    assert len(page.screenshots) == 1
    assert exc_info.value.attempted


async def test_healing_navigate_retries_load_strategies(page_for):
    page = FakePage()
    page.fail("goto", times=2)
    base = page_for(page)

    await base.healing_navigate_to("/inventory.html")

    gotos = [kwargs for name, _, kwargs in page.calls if name == "goto"]
    assert [kwargs["wait_until"] for kwargs in gotos] == [None, "domcontentloaded", "networkidle"]
    assert page.url == "https://shop.example/inventory.html"


async def test_healing_navigate_raises_after_last_strategy(page_for):
    page = FakePage()
    page.fail("goto")
    base = page_for(page)

    with pytest.raises(PlaywrightError):
        await base.healing_navigate_to("/")


async def test_other_healing_actions(page_for):
    page = FakePage(visible={"#login", "select.sort"})
    page.attributes[("#login", "type")] = "submit"
    base = page_for(page)
    sort = SelectorStrategy(primary="select.sort", description="sort dropdown")

    assert await base.healing_get_attribute(LOGIN, "type") == "submit"
    assert await base.healing_hover(LOGIN)
    assert await base.healing_double_click(LOGIN)
    assert await base.healing_select_option(sort, "za")
    assert page.values["select.sort"] == "za"


async def test_screenshot_is_tagged_after_healing(page_for, tmp_path):
    base = page_for(FakePage(visible={".title"}))

    clean = await base.healing_take_screenshot("before", attach_to_allure=False)
    await base.healing_find_element(BROKEN_TITLE)
    healed = await base.healing_take_screenshot("after", attach_to_allure=False)

    assert "-healed" not in clean.name
    assert healed.name.startswith("after-healed-")
    assert healed.parent == tmp_path / "screenshots"


async def test_healing_log_export_and_clear(page_for):
    base = page_for(FakePage(visible={".title"}))
    await base.healing_find_element(BROKEN_TITLE)

    report = json.loads(base.export_healing_report().read_text(encoding="utf-8"))
    assert report["summary"] == {"healed": 1, "failed": 0}
    assert base.get_healing_entries()[0].resolved_selector == ".title"

    base.clear_healing_log()
    assert base.get_healing_log() == ()


async def test_capture_failure_tolerates_screenshot_errors(page_for):
    page = FakePage()
    page.screenshot_error = PlaywrightError("target closed")
    base = page_for(page)

    await base.capture_failure("test_something")
