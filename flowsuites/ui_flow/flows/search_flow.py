"""
================================================================================
Search Flow
================================================================================

Types a keyword into a search field, submits the form and checks that the
resulting URL mentions the keyword.

Usage:
    async with open_flow_tester(settings) as tester:
        await tester.open()
        await search_flow(tester, "selenium")

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure

from flowsuites.ui_flow.framework.flow_tester import FlowTester
from flowsuites.ui_flow.framework.run_record import TestRecord


SEARCH_TITLE = "Search Google"


async def search_flow(
    tester: FlowTester,
    keyword: str,
    input_selector: str = "input[type='text']",
    submit_selector: str = "input[type='submit']",
    expected: Optional[str] = None,
    title: str = SEARCH_TITLE,
) -> TestRecord:
    """
    Run the search test.

    Args:
        tester: Ready tester with a driver attached
        keyword: Text typed into the search field
        input_selector: CSS selector of the search field
        submit_selector: CSS selector of an element inside the search form
        expected: Substring the result URL must contain (defaults to keyword)
        title: Test title shown in the PASS/FAIL line

    Returns:
        The recorded result
    """
    tester.begin(title)

    with allure.step(f"Search for '{keyword}'"):
        await tester.driver.fill_field("css", input_selector, keyword)
        await tester.driver.submit("css", submit_selector)
        verdict = await tester.driver.wait_until_url_has(expected or keyword)

    return await tester.end(verdict)
