"""
================================================================================
UI Flow Framework
================================================================================

Playwright-based recorder for linear end-to-end flow scripts.

Components:
    - flow_tester: Test run recorder (begin/end, PASS/FAIL lines, notifications)
    - run_record: Sequence counter and result log of one run
    - artifacts: Failure screenshot directory
    - driver: Browser driver facade and its Playwright implementation
    - browser_session: Browser lifecycle management
    - locators: Locator strategy to selector translation
    - config_loader: YAML + environment configuration

Author: Automation Team
License: MIT
================================================================================
"""

from .artifacts import ScreenshotStore
from .browser_session import BrowserSession
from .config_loader import ConfigLoader, ConfigurationError, FlowSettings
from .driver import BrowserDriver, PlaywrightDriver, contains
from .exceptions import (
    ElementNotFoundError,
    FlowTesterError,
    TesterNotReadyError,
    UnknownLocatorStrategyError,
)
from .flow_tester import FlowTester, open_flow_tester, print_banner
from .run_record import TestRecord, TestRun

__all__ = [
    "BrowserDriver",
    "BrowserSession",
    "ConfigLoader",
    "ConfigurationError",
    "ElementNotFoundError",
    "FlowSettings",
    "FlowTester",
    "FlowTesterError",
    "PlaywrightDriver",
    "ScreenshotStore",
    "TestRecord",
    "TestRun",
    "TesterNotReadyError",
    "UnknownLocatorStrategyError",
    "contains",
    "open_flow_tester",
    "print_banner",
]
