"""
================================================================================
Flow Test Tools
================================================================================

Support utilities for the flow tester.

Modules:
    - common: Logging setup and filesystem helpers
    - notifier: Best-effort desktop notifications

Example:
    from flowtest_tools.common import init_logger
    from flowtest_tools.notifier import DesktopNotifier

    init_logger()
    DesktopNotifier().notify("Test Finished!")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "notifier",
]
