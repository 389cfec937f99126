"""
Unit test fixtures: an in-memory browser driver and tester factories.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import pytest

from flowtest_tools.notifier import DesktopNotifier
from flowsuites.ui_flow.framework.artifacts import ScreenshotStore
from flowsuites.ui_flow.framework.flow_tester import FlowTester
from flowsuites.ui_flow.framework.run_record import TestRun


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class FakeDriver:
    """BrowserDriver stand-in that records calls and serves a fixed PNG."""

    def __init__(self, url: str = "about:blank", png: bytes = PNG_BYTES):
        self._url = url
        self.png = png
        self.visited: List[str] = []
        self.filled: dict = {}
        self.screenshot_calls = 0
        self.closed = False

    @property
    def url(self) -> str:
        return self._url

    async def goto(self, url: str) -> None:
        self.visited.append(url)
        self._url = url

    async def find_element(self, strategy: str, value: str) -> Any:
        return (strategy, value)

    async def wait_for_element(self, strategy: str, value: str) -> Any:
        return (strategy, value)

    async def fill_field(self, strategy: str, value: str, text: str) -> None:
        self.filled[(strategy, value)] = text

    async def submit(self, strategy: str, value: str) -> None:
        query = "&".join(f"q={text}" for text in self.filled.values())
        self._url = f"{self._url.split('?')[0]}?{query}"

    async def wait_until_url_has(self, keyword: str) -> bool:
        if keyword in self._url:
            return True
        raise TimeoutError(f"URL {self._url!r} never contained {keyword!r}")

    async def execute_script(self, script: str, *args: Any) -> Any:
        return None

    async def screenshot(self) -> bytes:
        self.screenshot_calls += 1
        return self.png

    async def close(self) -> None:
        self.closed = True


class RecordingNotifier(DesktopNotifier):
    """Notifier that remembers messages instead of calling the OS."""

    def __init__(self):
        super().__init__(enabled=True)
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def fake_driver() -> FakeDriver:
    return FakeDriver(url="https://search.example.com/")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def screens_dir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from tmp_path so the default failedScreens stays local."""
    monkeypatch.chdir(tmp_path)
    return tmp_path / "failedScreens"


@pytest.fixture
def make_tester(fake_driver, notifier, screens_dir):
    """Factory for testers wired to the fake driver."""

    def _make(
        url: Optional[str] = "https://search.example.com/",
        purge: bool = True,
        run: Optional[TestRun] = None,
    ) -> FlowTester:
        return FlowTester(
            url,
            driver=fake_driver,
            run=run,
            screenshots=ScreenshotStore("failedScreens", purge=purge),
            notifier=notifier,
        )

    return _make
