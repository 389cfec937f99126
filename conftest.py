"""
Repository-level pytest configuration.

Keeps local test runs predictable:
  - Desktop notifications are off unless the caller enables them
  - The start banner is off
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _quiet_env_defaults() -> Generator[None, None, None]:
    """Set quiet environment defaults if not already provided by the user/CI."""
    defaults = {
        "NOTIFY_ENABLED": "false",
        "UI_BANNER": "false",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
