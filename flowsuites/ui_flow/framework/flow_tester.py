"""
================================================================================
Flow Tester
================================================================================

Records the outcome of each step of a flow script.

Each test needs a ``begin()`` and an ``end()`` call:

    tester.begin("Search Google")
    await tester.driver.fill_field("css", "input[type='text']", "selenium")
    await tester.driver.submit("css", "input[type='submit']")
    await tester.end(await tester.driver.wait_until_url_has("selenium"))

``begin()`` names the active test. ``end()`` counts it, prints a coloured
PASS/FAIL line and, on failure, waits for a screenshot to be written before
returning.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Dict, Optional

from loguru import logger

from flowtest_tools.notifier import DesktopNotifier

from .artifacts import ScreenshotStore
from .browser_session import BrowserSession
from .config_loader import FlowSettings
from .driver import BrowserDriver
from .exceptions import TesterNotReadyError
from .run_record import TestRecord, TestRun


BANNER_TEXT = "Test Flow Started"


def print_banner(text: str = BANNER_TEXT) -> None:
    """Print a boxed banner to the console."""
    width = len(text) + 4
    lines = [
        "╭" + "─" * width + "╮",
        "│  " + text + "  │",
        "╰" + "─" * width + "╯",
    ]
    logger.opt(colors=True, raw=True).info(
        "\n<cyan>{}</cyan>\n", "\n".join(lines)
    )


class FlowTester:
    """
    Test run recorder bound to one target URL and one browser driver.

    Attributes:
        url: Page opened by open()
        driver: Browser driver facade used for every page interaction
        run: Sequence counter and result log
        screenshots: Where failure screenshots go
        notifier: Desktop notifier used by notify()
        test_title: Title of the active test
        ready: False when constructed without a URL
    """

    def __init__(
        self,
        url: Optional[str],
        driver: Optional[BrowserDriver] = None,
        run: Optional[TestRun] = None,
        screenshots: Optional[ScreenshotStore] = None,
        notifier: Optional[DesktopNotifier] = None,
    ):
        self.url = url
        self.driver = driver
        self.run = run if run is not None else TestRun()
        self.screenshots = screenshots or ScreenshotStore()
        self.notifier = notifier or DesktopNotifier()

        self.test_title = ""
        self._active = False

        if not url:
            logger.error("url is required!")
            self.ready = False
            return

        self.ready = True

    def _require_ready(self) -> None:
        if not self.ready:
            raise TesterNotReadyError(
                "FlowTester has no target URL; configure flow.url (FLOW_URL)"
            )

    def _require_driver(self) -> BrowserDriver:
        self._require_ready()
        if self.driver is None:
            raise TesterNotReadyError("FlowTester has no browser driver attached")
        return self.driver

    async def open(self) -> None:
        """Navigate the driver to the tester's URL."""
        driver = self._require_driver()
        await driver.goto(self.url)

    def begin(self, title: str) -> None:
        """Start a test; a previous unfinished test is dropped."""
        self._require_ready()
        if self._active:
            logger.debug(f"Test '{self.test_title}' was never ended; replaced by '{title}'")
        self.test_title = title
        self._active = True

    async def end(self, verdict: bool) -> TestRecord:
        """
        Finish the active test with the given verdict.

        On a failing verdict the screenshot is written before this returns.

        Returns:
            The record added to the run
        """
        self._require_ready()
        record = self.run.record(self.test_title, bool(verdict))
        self._active = False

        if record.sequence == 1:
            logger.opt(raw=True).info("\n")
        logger.opt(colors=True, raw=True).info(record.markup + "\n", record.title)

        if not record.passed:
            await self.capture_failure_artifact()

        return record

    async def capture_failure_artifact(self) -> Path:
        """
        Save a screenshot named after the active test.

        Returns:
            Path of the written PNG
        """
        driver = self._require_driver()
        self.screenshots.prepare()
        data = await driver.screenshot()
        return self.screenshots.write(self.test_title, data)

    def notify(self, message: str) -> None:
        """Show a desktop notification; never raises for delivery problems."""
        self._require_ready()
        self.notifier.notify(message)

    def summary(self) -> Dict[str, int]:
        return self.run.summary()

    @property
    def result(self) -> str:
        """All status lines of the run, newline-prefixed."""
        return "".join("\n" + line for line in self.run.result_log)


@asynccontextmanager
async def open_flow_tester(
    settings: FlowSettings,
    run: Optional[TestRun] = None,
    notifier: Optional[DesktopNotifier] = None,
) -> AsyncIterator[FlowTester]:
    """
    Build a FlowTester with its own browser session.

    The browser is closed when the block exits, including on exceptions.
    Without a URL no browser is launched and the yielded tester is not ready.

    Usage:
        async with open_flow_tester(FlowSettings.from_config()) as tester:
            await tester.open()
            ...
    """
    tester = FlowTester(
        settings.url,
        run=run,
        screenshots=ScreenshotStore(
            settings.screenshot_dir,
            purge=settings.purge_screenshots,
        ),
        notifier=notifier or DesktopNotifier(
            app_name=settings.notify_app_name,
            enabled=settings.notify_enabled,
        ),
    )

    if not tester.ready:
        yield tester
        return

    if settings.banner:
        print_banner()

    async with BrowserSession(
        headless=settings.headless,
        browser_type=settings.browser_type,
        timeout_ms=settings.timeout_ms,
    ) as session:
        tester.driver = session.driver
        try:
            yield tester
        finally:
            tester.driver = None


__all__ = [
    "BANNER_TEXT",
    "FlowTester",
    "open_flow_tester",
    "print_banner",
]
