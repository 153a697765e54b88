"""
In-memory stand-in for the Playwright page surface used by the framework.

The fake knows which selectors are "visible" and which operations should
fail, and records every call so tests can assert on ordering, timeouts,
backoff delays and screenshots without launching a browser.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


ALWAYS = -1


class FakeKeyboard:
    def __init__(self, page: "FakePage"):
        self._page = page

    async def press(self, key: str) -> None:
        self._page._call("keyboard_press", self._page.focused, key=key)

    async def type(self, text: str) -> None:
        self._page._call("keyboard_type", self._page.focused, text=text)
        if self._page.focused is not None:
            self._page.values[self._page.focused] = text


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self._page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self._page, f"{self.selector} >> {selector}")

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        page = self._page
        page.waits.append((self.selector, timeout))
        if self.selector in page.invalid:
            raise PlaywrightError(f"Unexpected token in selector {self.selector}")
        if self.selector not in page.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.selector}")

    async def click(self, force: bool = False, timeout: Optional[float] = None) -> None:
        self._page._call("force_click" if force else "click", self.selector)
        self._page.focused = self.selector

    async def dblclick(self, force: bool = False, timeout: Optional[float] = None) -> None:
        self._page._call("force_dblclick" if force else "dblclick", self.selector)

    async def hover(self, force: bool = False, timeout: Optional[float] = None) -> None:
        self._page._call("force_hover" if force else "hover", self.selector)

    async def clear(self, timeout: Optional[float] = None) -> None:
        self._page._call("clear", self.selector)
        self._page.values[self.selector] = ""

    async def fill(self, value: str, timeout: Optional[float] = None) -> None:
        self._page._call("fill", self.selector, value=value)
        self._page.values[self.selector] = value

    async def text_content(self, timeout: Optional[float] = None) -> Optional[str]:
        self._page._call("text_content", self.selector)
        return self._page.texts.get(self.selector)

    async def inner_text(self, timeout: Optional[float] = None) -> str:
        self._page._call("inner_text", self.selector)
        return self._page.texts.get(self.selector, "")

    async def get_attribute(self, name: str, timeout: Optional[float] = None) -> Optional[str]:
        self._page._call("get_attribute", self.selector, name=name)
        return self._page.attributes.get((self.selector, name))

    async def select_option(self, value: str, timeout: Optional[float] = None) -> List[str]:
        self._page._call("select_option", self.selector, value=value)
        self._page.values[self.selector] = value
        return [value]

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        self._page._call("evaluate", self.selector, expression=expression)
        if "el.value = value" in expression:
            self._page.values[self.selector] = arg
            return None
        if "textContent" in expression:
            return self._page.texts.get(self.selector)
        return None

    async def dispatch_event(self, event_type: str) -> None:
        self._page._call("dispatch_event", self.selector, event=event_type)


class FakePage:
    """
    Fake Playwright page.

    Attributes:
        visible: Selectors that resolve
        invalid: Selectors that raise a non-timeout Playwright error
        failures: Operation name -> remaining failures (ALWAYS = forever)
        calls: (operation, selector, kwargs) in call order
        waits: (selector, timeout) for every visibility wait
        delays: Every page.wait_for_timeout delay
        screenshots: Paths passed to page.screenshot
    """

    def __init__(self, visible=(), url: str = "https://example.test/"):
        self.visible: Set[str] = set(visible)
        self.invalid: Set[str] = set()
        self.failures: Dict[str, int] = {}
        self.calls: List[Tuple[str, Optional[str], Dict[str, Any]]] = []
        self.waits: List[Tuple[str, Optional[float]]] = []
        self.delays: List[float] = []
        self.screenshots: List[str] = []
        self.values: Dict[str, Any] = {}
        self.texts: Dict[str, str] = {}
        self.attributes: Dict[Tuple[str, str], str] = {}
        self.focused: Optional[str] = None
        self.screenshot_error: Optional[Exception] = None
        self.reveal_on_wait: Optional[str] = None
        self.sleep_for_real = False
        self.url = url
        self.keyboard = FakeKeyboard(self)

    def fail(self, operation: str, times: int = ALWAYS) -> None:
        self.failures[operation] = times

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    async def wait_for_timeout(self, timeout: float) -> None:
        self.delays.append(timeout)
        if self.reveal_on_wait:
            self.visible.add(self.reveal_on_wait)
        if self.sleep_for_real:
            await asyncio.sleep(timeout / 1000)

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        self._call("screenshot", None, path=path, full_page=full_page)
        if self.screenshot_error is not None:
            raise self.screenshot_error
        self.screenshots.append(path)
        if path:
            Path(path).write_bytes(b"\x89PNG fake")
        return b"\x89PNG fake"

    async def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self._call("goto", None, url=url, wait_until=wait_until)
        self.url = url

    def operations(self) -> List[str]:
        """Names of every recorded operation except visibility waits."""
        return [name for name, _, _ in self.calls]

    def attempted(self) -> List[str]:
        return [selector for selector, _ in self.waits]

    def _call(self, operation: str, selector: Optional[str], **kwargs: Any) -> None:
        self.calls.append((operation, selector, kwargs))
        remaining = self.failures.get(operation, 0)
        if remaining == 0:
            return
        if remaining > 0:
            self.failures[operation] = remaining - 1
        raise PlaywrightError(f"{operation} failed on {selector}")
