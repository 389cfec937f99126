"""
================================================================================
Desktop Notifier
================================================================================

Fire-and-forget desktop notifications through the host OS tooling:

    - Linux:   notify-send
    - macOS:   osascript (display notification)
    - Windows: powershell balloon tip

Delivery is best-effort. Missing tools, non-zero exits and OS errors are
logged at DEBUG level and never raised to the caller.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import subprocess
import sys
from typing import List, Optional

from loguru import logger


DEFAULT_APP_NAME = "Snore.DesktopToasts"
DEFAULT_TITLE = "Heads Up!"


def _applescript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _powershell_quote(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


class DesktopNotifier:
    """
    Sends a desktop notification with a fixed app identity and title.

    Usage:
        notifier = DesktopNotifier()
        notifier.notify("Test Finished!")
    """

    def __init__(
        self,
        app_name: str = DEFAULT_APP_NAME,
        title: str = DEFAULT_TITLE,
        enabled: bool = True,
        platform: Optional[str] = None,
    ):
        """
        Args:
            app_name: Application identity shown by the notification daemon
            title: Notification title
            enabled: When False, notify() only logs the message
            platform: Override of sys.platform (used by tests)
        """
        self.app_name = app_name
        self.title = title
        self.enabled = enabled
        self.platform = platform or sys.platform
        self.pending: List[subprocess.Popen] = []

    def build_command(self, message: str) -> Optional[List[str]]:
        """Return the OS command for this platform, or None if unsupported."""
        if self.platform.startswith("linux") or "bsd" in self.platform:
            return [
                "notify-send",
                f"--app-name={self.app_name}",
                self.title,
                message,
            ]
        if self.platform == "darwin":
            script = (
                f"display notification {_applescript_quote(message)} "
                f"with title {_applescript_quote(self.title)}"
            )
            return ["osascript", "-e", script]
        if self.platform.startswith("win"):
            script = (
                "Add-Type -AssemblyName System.Windows.Forms;"
                "$n = New-Object System.Windows.Forms.NotifyIcon;"
                "$n.Icon = [System.Drawing.SystemIcons]::Information;"
                "$n.Visible = $true;"
                f"$n.ShowBalloonTip(5000, {_powershell_quote(self.title)}, "
                f"{_powershell_quote(message)}, 'Info');"
                "Start-Sleep -Seconds 6; $n.Dispose()"
            )
            return ["powershell", "-NoProfile", "-Command", script]
        return None

    def reap(self) -> int:
        """
        Collect notification processes that have exited.

        Returns:
            Number of processes reaped
        """
        running = [process for process in self.pending if process.poll() is None]
        reaped = len(self.pending) - len(running)
        self.pending = running
        return reaped

    def notify(self, message: str) -> None:
        """
        Request a notification and return immediately.

        Finished children of earlier calls are reaped first.

        Args:
            message: Notification body
        """
        if not self.enabled:
            logger.debug(f"Notifications disabled, skipping: {message}")
            return

        command = self.build_command(message)
        if command is None:
            logger.debug(f"No notification backend for platform {self.platform!r}")
            return

        self.reap()
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            self.pending.append(process)
            logger.debug(f"Notification requested: {message}")
        except (OSError, ValueError) as e:
            logger.debug(f"Notification delivery failed ({command[0]}): {e}")


__all__ = [
    "DEFAULT_APP_NAME",
    "DEFAULT_TITLE",
    "DesktopNotifier",
]
