#!/usr/bin/env python3
# ================================================================================
# Flow Runner Script
# ================================================================================
#
# Main entry point for running the bundled search flow against a live site.
#
# Features:
#   - One browser session per run, always closed on exit
#   - Coloured PASS/FAIL line per test
#   - Failure screenshot in ./failedScreens
#   - Desktop notification when the run ends
#
# Usage:
#   python run_flow.py --url https://www.google.com --keyword selenium
#   python run_flow.py --headless --no-notify
#   FLOW_URL=https://duckduckgo.com python run_flow.py
#
# Exit codes:
#   0  every test passed
#   1  a test failed or the flow raised
#   2  configuration error (no target URL)
#
# ================================================================================

import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from loguru import logger

from flowtest_tools.common import init_logger
from flowtest_tools.notifier import DesktopNotifier
from flowsuites.ui_flow.flows import search_flow
from flowsuites.ui_flow.framework import (
    ConfigLoader,
    FlowSettings,
    FlowTester,
    TestRun,
    open_flow_tester,
)


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 2


class FlowRunner:
    """
    Runs the search flow with a fresh TestRun and reports the outcome.

    This class handles:
    - Browser session setup and teardown
    - Top-level error handling (traceback, screenshot, notification)
    - Exit code selection
    """

    def __init__(self, settings: FlowSettings, notifier: Optional[DesktopNotifier] = None):
        """
        Args:
            settings: Resolved configuration for this run
            notifier: Desktop notifier (built from settings when omitted)
        """
        self.settings = settings
        self.run_record = TestRun()
        self.notifier = notifier or DesktopNotifier(
            app_name=settings.notify_app_name,
            enabled=settings.notify_enabled,
        )

    def run(self) -> int:
        """
        Execute the flow.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        return asyncio.run(self._run())

    async def _run(self) -> int:
        exit_code = None
        try:
            async with open_flow_tester(
                self.settings, run=self.run_record, notifier=self.notifier
            ) as tester:
                if not tester.ready:
                    return EXIT_CONFIG_ERROR
                exit_code = await self._run_flow(tester)
        except Exception:
            # Browser launch or teardown failed outside the flow itself
            logger.exception("Browser session failed")
            if exit_code is None:
                self.notifier.notify("Test Failed!")
            exit_code = EXIT_FAILED

        self._print_summary(exit_code)
        return exit_code

    async def _run_flow(self, tester: FlowTester) -> int:
        try:
            await tester.open()
            await search_flow(
                tester,
                self.settings.keyword,
                input_selector=self.settings.input_selector,
                submit_selector=self.settings.submit_selector,
            )
        except Exception:
            logger.exception("Flow aborted")
            await self._capture_after_error(tester)
            tester.notify("Test Failed!")
            return EXIT_FAILED

        tester.notify("Test Finished!")
        return EXIT_OK if self.run_record.all_passed else EXIT_FAILED

    async def _capture_after_error(self, tester: FlowTester) -> None:
        try:
            await tester.capture_failure_artifact()
        except Exception as e:
            logger.error(f"Could not capture failure screenshot: {e}")

    def _print_summary(self, exit_code: int) -> None:
        summary = self.run_record.summary()
        logger.info("=" * 60)
        logger.info(
            f"Tests: {summary['total']} | "
            f"Passed: {summary['passed']} | Failed: {summary['failed']}"
        )
        if exit_code == EXIT_OK:
            logger.info("FLOW COMPLETED SUCCESSFULLY")
        else:
            logger.error(f"FLOW FAILED (exit code: {exit_code})")
        logger.info("=" * 60)


def build_settings(args: argparse.Namespace) -> FlowSettings:
    """Merge command line options over the configuration file."""
    settings = FlowSettings.from_config(ConfigLoader(config_path=args.config))

    overrides = {}
    if args.url:
        overrides["url"] = args.url
    if args.keyword:
        overrides["keyword"] = args.keyword
    if args.browser:
        overrides["browser_type"] = args.browser
    if args.headless:
        overrides["headless"] = True
    if args.screenshots_dir:
        overrides["screenshot_dir"] = args.screenshots_dir
    if args.keep_screenshots:
        overrides["purge_screenshots"] = False
    if args.no_notify:
        overrides["notify_enabled"] = False
    if args.no_banner:
        overrides["banner"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level

    return replace(settings, **overrides)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Flow Tester Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search Google for the configured keyword
  python run_flow.py

  # Another site, hidden browser, no desktop popups
  python run_flow.py --url https://duckduckgo.com --headless --no-notify
        """
    )

    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--url", help="Target URL (overrides flow.url)")
    parser.add_argument("--keyword", help="Search keyword (overrides flow.keyword)")
    parser.add_argument(
        "--browser",
        choices=["chromium", "firefox", "webkit"],
        help="Browser to drive (default: from config)",
    )
    parser.add_argument("--headless", action="store_true", help="Hide the browser window")
    parser.add_argument("--screenshots-dir", help="Directory for failure screenshots")
    parser.add_argument(
        "--keep-screenshots",
        action="store_true",
        help="Do not purge old screenshots before a capture",
    )
    parser.add_argument("--no-notify", action="store_true", help="Disable desktop notifications")
    parser.add_argument("--no-banner", action="store_true", help="Skip the start banner")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = build_settings(args)
    init_logger(level=settings.log_level, log_file=ConfigLoader().get("logging.file"))

    return FlowRunner(settings).run()


if __name__ == "__main__":
    sys.exit(main())
