"""
================================================================================
Failure Screenshot Store
================================================================================

Writes failure screenshots to a dedicated directory as ``<title>.png``.

When purging is on, every file already in the directory is deleted before a
new capture is written, so the directory only ever shows the latest failure
cycle. Filesystem errors (mkdir, unlink, write) propagate to the caller.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Union

import allure
from loguru import logger

from flowtest_tools.common import ensure_directory, safe_filename


DEFAULT_SCREENSHOT_DIR = "failedScreens"


class ScreenshotStore:
    """
    Directory of failure screenshots.

    Usage:
        store = ScreenshotStore("failedScreens")
        store.prepare()
        store.write("Search Google", png_bytes)   # failedScreens/Search Google.png
    """

    def __init__(
        self,
        directory: Union[str, Path] = DEFAULT_SCREENSHOT_DIR,
        purge: bool = True,
        attach_to_allure: bool = True,
    ):
        """
        Args:
            directory: Target directory, relative to the working directory
            purge: Delete existing files in prepare()
            attach_to_allure: Also attach written screenshots to the Allure report
        """
        self.directory = Path(directory)
        self.purge_enabled = purge
        self.attach_to_allure = attach_to_allure

    def path_for(self, title: str) -> Path:
        return self.directory / f"{safe_filename(title)}.png"

    def purge(self) -> int:
        """
        Delete every file in the directory.

        Returns:
            Number of files removed
        """
        removed = 0
        for entry in self.directory.iterdir():
            if entry.is_file() or entry.is_symlink():
                entry.unlink()
                removed += 1
        if removed:
            logger.debug(f"Purged {removed} old screenshot(s) from {self.directory}")
        return removed

    def prepare(self) -> None:
        """Create the directory and, if enabled, clear previous screenshots."""
        ensure_directory(self.directory)
        if self.purge_enabled:
            self.purge()

    def write(self, title: str, data: Union[bytes, str]) -> Path:
        """
        Write a screenshot, replacing any file of the same name.

        Args:
            title: Test title used as the file name
            data: PNG bytes, or base64 text as returned by WebDriver backends

        Returns:
            Path of the written file
        """
        if isinstance(data, str):
            data = base64.b64decode(data)

        ensure_directory(self.directory)
        path = self.path_for(title)
        path.write_bytes(data)

        if self.attach_to_allure:
            allure.attach(
                data,
                name=title or path.stem,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.info(f"Screenshot saved: {path}")
        return path


__all__ = [
    "DEFAULT_SCREENSHOT_DIR",
    "ScreenshotStore",
]
