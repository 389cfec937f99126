"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration loading
    - Environment variable override (FLOW_URL overrides flow.url)
    - Dot notation path access
    - Typed settings snapshot for the flow tester (FlowSettings)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path (<repo>/config/config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (FLOW_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("flow.url")
        'https://www.google.com'

        >>> config.get("browser.timeout_ms", 180000)
        180000

    Environment Variable Mapping:
        - flow.url -> FLOW_URL
        - flow.keyword -> FLOW_KEYWORD
        - screenshots.dir -> SCREENSHOTS_DIR
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton: configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "flow.url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


@dataclass
class FlowSettings:
    """
    Typed snapshot of everything the flow tester reads from configuration.

    Attributes:
        url: Target page opened when the session starts (required)
        keyword: Text typed by the bundled search flow
        input_selector: CSS selector of the search field
        submit_selector: CSS selector of the control whose form is submitted
        browser_type: 'chromium', 'firefox' or 'webkit'
        headless: Hide the browser window
        timeout_ms: Navigation, script and wait timeout
        screenshot_dir: Directory for failure screenshots
        purge_screenshots: Empty screenshot_dir before each capture
        notify_enabled: Send desktop notifications
        notify_app_name: Application identity for notifications
        banner: Print the "Test Flow Started" banner
        log_level: loguru level name
    """
    url: Optional[str] = None
    keyword: str = "selenium"
    input_selector: str = "input[type='text']"
    submit_selector: str = "input[type='submit']"
    browser_type: str = "chromium"
    headless: bool = False
    timeout_ms: int = 180000
    screenshot_dir: str = "failedScreens"
    purge_screenshots: bool = True
    notify_enabled: bool = True
    notify_app_name: str = "Snore.DesktopToasts"
    banner: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "FlowSettings":
        """Build settings from a ConfigLoader (the process singleton by default)."""
        config = config or ConfigLoader()
        defaults = cls()
        return cls(
            url=config.get("flow.url", defaults.url),
            keyword=str(config.get("flow.keyword", defaults.keyword)),
            input_selector=config.get("flow.input_selector", defaults.input_selector),
            submit_selector=config.get("flow.submit_selector", defaults.submit_selector),
            browser_type=config.get("browser.type", defaults.browser_type),
            headless=config.get("browser.headless", defaults.headless),
            timeout_ms=int(config.get("browser.timeout_ms", defaults.timeout_ms)),
            screenshot_dir=config.get("screenshots.dir", defaults.screenshot_dir),
            purge_screenshots=config.get("screenshots.purge", defaults.purge_screenshots),
            notify_enabled=config.get("notify.enabled", defaults.notify_enabled),
            notify_app_name=config.get("notify.app_name", defaults.notify_app_name),
            banner=config.get("ui.banner", defaults.banner),
            log_level=config.get("logging.level", defaults.log_level),
        )


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "FlowSettings",
    "DEFAULT_CONFIG_PATH",
]
