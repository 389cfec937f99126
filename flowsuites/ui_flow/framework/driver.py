"""
================================================================================
Browser Driver Facade
================================================================================

The capability interface the flow tester depends on, and its Playwright
implementation.

Provides:
    - Navigation and page title / URL access
    - Element location by (strategy, value) pairs
    - Visibility and URL waits with a fixed timeout
    - Keystrokes, clicks and form submission
    - Script execution in page context (WebDriver-style ``arguments``)
    - Screenshot capture as PNG bytes
    - select2 dropdown and scrolling helpers

Every wait uses the driver's ``timeout_ms``. Nothing is retried: Playwright's
``TimeoutError`` propagates to the caller as is.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional, Protocol, runtime_checkable

import allure
from loguru import logger
from playwright.async_api import ElementHandle, Locator, Page

from .exceptions import ElementNotFoundError
from .locators import to_selector


DEFAULT_TIMEOUT_MS = 180000

# Wraps a WebDriver-style script body so `arguments[i]` works inside it
_SCRIPT_RUNNER = "([body, args]) => new Function(body).apply(null, args)"


@runtime_checkable
class BrowserDriver(Protocol):
    """
    What the flow tester needs from a browser-automation backend.

    Any object implementing these members can stand in for PlaywrightDriver,
    e.g. an in-memory fake in unit tests.
    """

    @property
    def url(self) -> str: ...

    async def goto(self, url: str) -> None: ...

    async def find_element(self, strategy: str, value: str) -> Any: ...

    async def wait_for_element(self, strategy: str, value: str) -> Any: ...

    async def wait_until_url_has(self, keyword: str) -> bool: ...

    async def execute_script(self, script: str, *args: Any) -> Any: ...

    async def screenshot(self) -> bytes: ...

    async def close(self) -> None: ...


def contains(text: Any, keyword: Any) -> bool:
    """Case-insensitive substring check; both sides are coerced to str."""
    return str(keyword).lower() in str(text).lower()


class PlaywrightDriver:
    """
    BrowserDriver implementation over a Playwright async Page.

    Usage:
        driver = PlaywrightDriver(page, timeout_ms=60000)
        await driver.goto("https://www.google.com")
        await driver.fill_field("css", "textarea[name='q']", "selenium")
        await driver.submit("css", "form")
        await driver.wait_until_url_has("selenium")
    """

    def __init__(self, page: Page, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        """
        Args:
            page: Playwright Page to drive
            timeout_ms: Timeout for element, URL and load waits
        """
        self.page = page
        self.timeout_ms = timeout_ms
        self.implicit_timeout_ms = timeout_ms

    # =========================================================================
    # Navigation
    # =========================================================================

    @property
    def url(self) -> str:
        """Current page URL."""
        return self.page.url

    async def goto(self, url: str) -> None:
        """Navigate to given url."""
        with allure.step(f"Navigate to {url}"):
            await self.page.goto(url, timeout=self.timeout_ms)
            logger.debug(f"Navigated to: {url}")

    async def get_title(self) -> str:
        """Title of the current page."""
        return await self.page.title()

    async def switch_to_active_element(self) -> ElementHandle:
        """Handle to the element that currently has focus."""
        handle = await self.page.evaluate_handle("document.activeElement")
        element = handle.as_element()
        if element is None:
            raise ElementNotFoundError("No element has focus")
        return element

    # =========================================================================
    # Element Location
    # =========================================================================

    def locator(self, strategy: str, value: str) -> Locator:
        """First element matching the strategy/value pair (lazy, not awaited)."""
        return self.page.locator(to_selector(strategy, value)).first

    async def find_element(self, strategy: str, value: str) -> Locator:
        """
        Find an element in the DOM, visible or not.

        Waits up to the implicit timeout for the element to be attached.
        """
        element = self.locator(strategy, value)
        await element.wait_for(state="attached", timeout=self.implicit_timeout_ms)
        return element

    async def find_elements(self, strategy: str, value: str) -> List[Locator]:
        """All elements currently matching, visible or not."""
        return await self.page.locator(to_selector(strategy, value)).all()

    async def is_present(self, strategy: str, value: str) -> bool:
        """Whether a matching element exists in the DOM right now."""
        return await self.page.locator(to_selector(strategy, value)).count() > 0

    # =========================================================================
    # Waits
    # =========================================================================

    async def wait_for_element(self, strategy: str, value: str) -> Locator:
        """Wait until the element is located and also visible."""
        element = self.locator(strategy, value)
        await element.wait_for(state="attached", timeout=self.timeout_ms)
        await element.wait_for(state="visible", timeout=self.timeout_ms)
        return element

    async def wait_until_not_visible(self, strategy: str, value: str) -> Locator:
        """Wait until the element is located and then hidden."""
        element = self.locator(strategy, value)
        await element.wait_for(state="attached", timeout=self.timeout_ms)
        await element.wait_for(state="hidden", timeout=self.timeout_ms)
        return element

    async def wait_until_url_has(self, keyword: str) -> bool:
        """
        Wait until the current URL contains keyword.

        Returns:
            True once matched

        Raises:
            playwright.async_api.TimeoutError: keyword not seen in time
        """
        with allure.step(f"Wait for URL containing: {keyword}"):
            await self.page.wait_for_url(
                lambda current: keyword in current,
                timeout=self.timeout_ms,
            )
        return True

    async def wait_until_page_loaded(self) -> None:
        """Wait for document.readyState to become 'complete'."""
        await self.page.wait_for_function(
            "document.readyState === 'complete'",
            timeout=self.timeout_ms,
        )

    # =========================================================================
    # Interactions
    # =========================================================================

    async def fill_field(self, strategy: str, value: str, text: str) -> None:
        """Send keystrokes to the matching form field."""
        with allure.step(f"Fill {strategy}={value}"):
            element = await self.find_element(strategy, value)
            await element.press_sequentially(str(text))

    async def click(self, strategy: str, value: str) -> None:
        """Click an element, highlighting it first."""
        await self.sleep(1000)
        with allure.step(f"Click {strategy}={value}"):
            element = await self.find_element(strategy, value)
            await self.highlight_element(element)
            await element.click(timeout=self.timeout_ms)

    async def submit(self, strategy: str, value: str) -> None:
        """Submit the form the element belongs to (or the form itself)."""
        await self.sleep(1000)
        with allure.step(f"Submit {strategy}={value}"):
            element = await self.find_element(strategy, value)
            await element.evaluate(
                """el => {
                    const form = el.tagName === 'FORM' ? el : (el.form || el.closest('form'));
                    if (!form) { throw new Error('Element is not inside a form'); }
                    if (form.requestSubmit) { form.requestSubmit(); } else { form.submit(); }
                }"""
            )

    async def get_text(self, strategy: str, value: str) -> str:
        """Visible text of the element."""
        element = await self.wait_for_element(strategy, value)
        return await element.inner_text()

    async def get_attribute_value(
        self,
        strategy: str,
        value: str,
        attribute: str,
    ) -> Optional[str]:
        """Any attribute value of the element."""
        element = await self.wait_for_element(strategy, value)
        return await element.get_attribute(attribute)

    # =========================================================================
    # Scripts
    # =========================================================================

    async def execute_script(self, script: str, *args: Any) -> Any:
        """
        Run a script body in page context.

        The body sees its arguments as ``arguments[0]``, ``arguments[1]``...
        Locator arguments are resolved to element handles first.
        """
        resolved = []
        for arg in args:
            if isinstance(arg, Locator):
                arg = await arg.element_handle(timeout=self.timeout_ms)
            resolved.append(arg)
        return await self.page.evaluate(_SCRIPT_RUNNER, [script, resolved])

    async def highlight_element(self, element: Any) -> None:
        await self.execute_script(
            "arguments[0].setAttribute(arguments[1], arguments[2])",
            element,
            "style",
            "border: 1px solid red;",
        )

    async def scroll_bottom(self, pixels: Optional[int] = None) -> None:
        scroll_to = pixels or "document.body.scrollHeight"
        await self.execute_script(f"window.scrollTo(0,{scroll_to})")
        await self.sleep(1000)

    async def scroll_top(self, pixels: Optional[int] = None) -> None:
        scroll_to = pixels or 0
        await self.execute_script(f"window.scrollTo(0,{scroll_to})")
        await self.sleep(1000)

    async def scroll_to_element(self, element: Any) -> None:
        await self.execute_script("arguments[0].scrollIntoView();", element)

    # =========================================================================
    # select2 Dropdowns
    # =========================================================================

    async def _open_select2(self, selector: str) -> Locator:
        await self.sleep(250)
        widget = self.page.locator(to_selector("css", selector)).first.locator(
            "xpath=following-sibling::*[1]"
        )
        await widget.click(timeout=self.timeout_ms)
        await self.sleep(1000)
        search = self.locator("css", "input.select2-search__field")
        await search.wait_for(state="attached", timeout=self.implicit_timeout_ms)
        return search

    async def select_dropdown_select2(self, selector: str, value: str) -> None:
        """Select a value from the select2 widget next to `selector`."""
        with allure.step(f"Select2 {selector}: {value}"):
            search = await self._open_select2(selector)
            await search.press_sequentially(value)
            await self.sleep(1500)
            await search.press("Enter")

    async def search_dropdown_select2(self, selector: str, value: str) -> None:
        """Select a value from a remote-search select2 widget."""
        with allure.step(f"Search select2 {selector}: {value}"):
            search = await self._open_select2(selector)
            await search.press_sequentially(value)
            await self.sleep(3000)
            await search.press("Backspace")
            await search.press("Enter")

    # =========================================================================
    # Timing
    # =========================================================================

    async def sleep(self, ms: int) -> None:
        """Pause execution for given amount of milliseconds."""
        await asyncio.sleep(ms / 1000)

    async def set_implicit_timeout(self, ms: int) -> None:
        """Change how long element lookups wait for the element to appear."""
        self.implicit_timeout_ms = ms
        self.page.set_default_timeout(ms)

    # =========================================================================
    # Screenshots and Teardown
    # =========================================================================

    async def screenshot(self, full_page: bool = False) -> bytes:
        """Capture the viewport (or the whole page) as PNG bytes."""
        return await self.page.screenshot(full_page=full_page, type="png")

    async def close(self) -> None:
        """Close the page; the owning BrowserSession closes the browser."""
        if not self.page.is_closed():
            await self.page.close()


__all__ = [
    "BrowserDriver",
    "PlaywrightDriver",
    "DEFAULT_TIMEOUT_MS",
    "contains",
]
