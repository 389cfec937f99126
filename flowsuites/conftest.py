"""
================================================================================
Root Pytest Configuration
================================================================================

Registers the markers used across the flow suites and tags tests by
directory.

================================================================================
"""

from typing import List

import pytest
from loguru import logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "unit: Tests that need no browser"
    )
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add 'unit' / 'ui' markers based on the test's directory."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "ui_flow" in str(item.fspath):
            item.add_marker(pytest.mark.ui)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Flow Tester Framework",
        "=" * 60,
        "",
    ]


@pytest.fixture
def log_messages():
    """
    Collect loguru output as plain text for the duration of a test.

    Colour markup is stripped because the sink is not a terminal.
    """
    messages: List[str] = []
    handler_id = logger.add(messages.append, format="{message}", colorize=False, level="DEBUG")
    yield messages
    logger.remove(handler_id)
