"""
================================================================================
Flow Test Tools Common Utilities
================================================================================

Shared logging setup and filesystem helpers for the flow tester and its
runner scripts.

Exports:
    - init_logger: Initialize the loguru logger with standard settings
    - ensure_directory: Create a directory if it does not exist
    - safe_filename: Turn free-text test titles into usable file names

Usage:
    from flowtest_tools.common import init_logger, ensure_directory

    init_logger(level="DEBUG")
    ensure_directory("failedScreens")

================================================================================
"""

import os
import re
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None,
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.
        force: Re-initialize even if already done (e.g. after a level change).

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/flow.log")
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    # Remove default handler
    logger.remove()

    level = (level or "INFO").upper()
    format_string = format_string or DEFAULT_LOG_FORMAT

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation="10 MB",
            retention="7 days",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


# ============================================================
# Common Utilities
# ============================================================

def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        The path as a Path (for chaining)
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


# Characters rejected by at least one mainstream filesystem
_ILLEGAL_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

# UTF-8 budget for the stem; leaves room for an extension under NAME_MAX (255)
MAX_FILENAME_BYTES = 200


def safe_filename(
    title: Optional[str],
    fallback: str = "untitled",
    max_bytes: int = MAX_FILENAME_BYTES,
) -> str:
    """
    Make a test title usable as a file name.

    Illegal characters become underscores and trailing dots/spaces are
    stripped. Anything else, spaces included, is kept verbatim. Names longer
    than max_bytes of UTF-8 are cut on a character boundary.

    Examples:
        >>> safe_filename("Search Google")
        'Search Google'
        >>> safe_filename("a/b: c?")
        'a_b_ c_'
    """
    name = _ILLEGAL_FILENAME_CHARS.sub("_", title or "")
    encoded = name.encode("utf-8")
    if len(encoded) > max_bytes:
        name = encoded[:max_bytes].decode("utf-8", errors="ignore")
    name = name.rstrip(". ")
    return name or fallback


# Export public API
__all__ = [
    "DEFAULT_LOG_FORMAT",
    "init_logger",
    "ensure_directory",
    "safe_filename",
    "MAX_FILENAME_BYTES",
]
