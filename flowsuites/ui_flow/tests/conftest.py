"""
================================================================================
UI Flow Pytest Configuration
================================================================================

Fixtures for end-to-end tests that drive a real headless browser against
local HTML pages.

Key Features:
- Browser session lifecycle (skips when no browser is installed)
- Local search and select2 pages served from file:// URLs
- Tester wired to the live driver with notifications off

================================================================================
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest

from flowtest_tools.notifier import DesktopNotifier
from flowsuites.ui_flow.framework.artifacts import ScreenshotStore
from flowsuites.ui_flow.framework.browser_session import BrowserSession
from flowsuites.ui_flow.framework.flow_tester import FlowTester


SEARCH_PAGE = """<!DOCTYPE html>
<html>
  <head><title>Local Search</title></head>
  <body>
    <h1 id="heading">Local Search</h1>
    <form action="">
      <input type="text" name="q">
      <input type="submit" value="Search">
    </form>
    <a href="#docs">Read the docs</a>
    <p class="hint muted" style="display: none">hidden hint</p>
    <div style="height: 3000px"></div>
    <p id="footer">end of page</p>
  </body>
</html>
"""

SELECT2_PAGE = """<!DOCTYPE html>
<html>
  <head><title>Select2 Widget</title></head>
  <body>
    <select id="color" style="display: none">
      <option value="">--</option>
      <option value="red">Red</option>
      <option value="green">Green</option>
      <option value="blue">Blue</option>
    </select>
    <span class="select2" id="color-widget">Choose a colour</span>
    <div id="dropdown" style="display: none">
      <input class="select2-search__field">
    </div>
    <script>
      const select = document.getElementById("color");
      const dropdown = document.getElementById("dropdown");
      const search = document.querySelector(".select2-search__field");
      document.getElementById("color-widget").addEventListener("click", () => {
        dropdown.style.display = "block";
        search.focus();
      });
      search.addEventListener("keydown", (event) => {
        if (event.key !== "Enter") return;
        const term = search.value.toLowerCase();
        const match = Array.from(select.options).find(
          (option) => option.value && option.text.toLowerCase().startsWith(term)
        );
        if (match) select.value = match.value;
        dropdown.style.display = "none";
        search.value = "";
      });
    </script>
  </body>
</html>
"""


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_session() -> AsyncGenerator[BrowserSession, None]:
    """
    Function-scoped headless browser session.

    Skips the test when Playwright has no browser binary available.
    """
    session = BrowserSession(headless=True, timeout_ms=10000)
    try:
        await session.start()
    except Exception as e:
        await session.close()
        pytest.skip(f"Browser not available: {e}")
    yield session
    await session.close()


@pytest.fixture
def search_page(tmp_path: Path) -> str:
    """file:// URL of a page with a text input and a submit control."""
    page = tmp_path / "search.html"
    page.write_text(SEARCH_PAGE, encoding="utf-8")
    return page.as_uri()


@pytest.fixture
def select2_page(tmp_path: Path) -> str:
    """file:// URL of a select element followed by a select2-style widget."""
    page = tmp_path / "select2.html"
    page.write_text(SELECT2_PAGE, encoding="utf-8")
    return page.as_uri()


@pytest.fixture
def screenshots_dir(tmp_path: Path) -> Path:
    return tmp_path / "failedScreens"


@pytest.fixture
async def tester(browser_session, search_page, screenshots_dir) -> FlowTester:
    """Tester on the local search page."""
    tester = FlowTester(
        search_page,
        driver=browser_session.driver,
        screenshots=ScreenshotStore(screenshots_dir),
        notifier=DesktopNotifier(enabled=False),
    )
    await tester.open()
    return tester
