"""
================================================================================
Browser Session
================================================================================

Browser lifecycle management for flow scripts.

Features:
    - One browser, one context, one page per run
    - Headed (maximized) or headless (fixed 1366x768 viewport) rendering
    - Navigation / default timeouts applied to the page
    - Guaranteed teardown as an async context manager, on success and failure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .driver import DEFAULT_TIMEOUT_MS, PlaywrightDriver


# Chrome switches carried over from the WebDriver-era setup
CHROMIUM_ARGS: List[str] = [
    "--no-default-browser-check",
    "--disable-infobars",
    "--disable-web-security",
    "--disable-site-isolation-trials",
    "--no-experiments",
    "--ignore-gpu-blocklist",
    "--ignore-certificate-errors",
    "--ignore-certificate-errors-spki-list",
    "--disable-extensions",
    "--disable-default-apps",
    "--disable-accelerated-video",
    "--disable-background-mode",
    "--disable-plugins-discovery",
    "--disable-translate",
]

HEADLESS_VIEWPORT: Dict[str, int] = {"width": 1366, "height": 768}


class BrowserSession:
    """
    Owns the Playwright runtime, browser, context and page of one run.

    Usage:
        async with BrowserSession(headless=True) as session:
            await session.driver.goto("https://example.com")

    The browser is closed and Playwright stopped when the block exits,
    whether it returns normally or raises.
    """

    def __init__(
        self,
        headless: bool = False,
        browser_type: str = "chromium",
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ):
        """
        Initialize browser session.

        Args:
            headless: Hide the browser window
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            timeout_ms: Navigation and default action timeout
        """
        self.headless = headless
        self.browser_type = browser_type
        self.timeout_ms = timeout_ms

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._driver: Optional[PlaywrightDriver] = None

    async def __aenter__(self) -> "BrowserSession":
        """Async context manager entry - start browser."""
        try:
            await self.start()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    def _launch_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"headless": self.headless}
        if self.browser_type == "chromium":
            args = list(CHROMIUM_ARGS)
            if not self.headless:
                args.append("--start-maximized")
            options["args"] = args
        return options

    def _context_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "ignore_https_errors": True,
            "bypass_csp": True,
        }
        if self.headless:
            options["viewport"] = HEADLESS_VIEWPORT
        else:
            # Follow the real (maximized) window size
            options["no_viewport"] = True
        return options

    async def start(self) -> PlaywrightDriver:
        """Start Playwright, launch the browser and open the run's page."""
        self._playwright = await async_playwright().start()

        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        self._browser = await browser_launcher.launch(**self._launch_options())
        self._context = await self._browser.new_context(**self._context_options())
        self._context.set_default_timeout(self.timeout_ms)
        self._context.set_default_navigation_timeout(self.timeout_ms)

        self._page = await self._context.new_page()
        self._driver = PlaywrightDriver(self._page, timeout_ms=self.timeout_ms)

        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, timeout={self.timeout_ms}ms)"
        )
        return self._driver

    async def close(self) -> None:
        """Close context, browser and Playwright. Safe to call twice."""
        context, self._context = self._context, None
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        self._page = None
        self._driver = None

        try:
            if context:
                await context.close()
        finally:
            try:
                if browser:
                    await browser.close()
            finally:
                if playwright:
                    await playwright.stop()
                    logger.debug("Browser closed")

    @property
    def driver(self) -> PlaywrightDriver:
        """Driver for the run's page."""
        if self._driver is None:
            raise RuntimeError("Browser not started. Call start() first.")
        return self._driver

    @property
    def page(self) -> Optional[Page]:
        return self._page


__all__ = [
    "BrowserSession",
    "CHROMIUM_ARGS",
    "HEADLESS_VIEWPORT",
]
