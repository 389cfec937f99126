"""
Desktop notification helpers.

Example:
    from flowtest_tools.notifier import DesktopNotifier

    DesktopNotifier(app_name="Flow Tester").notify("Test Failed!")
"""

from .desktop_notifier import DEFAULT_APP_NAME, DEFAULT_TITLE, DesktopNotifier

__all__ = [
    "DEFAULT_APP_NAME",
    "DEFAULT_TITLE",
    "DesktopNotifier",
]
