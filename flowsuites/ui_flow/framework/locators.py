"""
================================================================================
Locator Strategies
================================================================================

Translates (strategy, value) pairs into Playwright selector strings.

Supported strategies:
    css, xpath, id, name, class_name, tag_name, link_text, partial_link_text

The camelCase spellings (className, tagName, linkText, partialLinkText) are
accepted as aliases so scripts written against WebDriver-style "By" names keep
working.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from typing import Callable, Dict

from .exceptions import UnknownLocatorStrategyError


def _quoted(value: str) -> str:
    return json.dumps(value)


STRATEGIES: Dict[str, Callable[[str], str]] = {
    "css": lambda value: f"css={value}",
    "xpath": lambda value: f"xpath={value}",
    "id": lambda value: f"id={value}",
    "name": lambda value: f"css=[name={_quoted(value)}]",
    "class_name": lambda value: f"css=[class~={_quoted(value)}]",
    "tag_name": lambda value: f"css={value}",
    "link_text": lambda value: f"a:text-is({_quoted(value)})",
    "partial_link_text": lambda value: f"a:has-text({_quoted(value)})",
}

ALIASES: Dict[str, str] = {
    "className": "class_name",
    "tagName": "tag_name",
    "linkText": "link_text",
    "partialLinkText": "partial_link_text",
}


def normalize_strategy(strategy: str) -> str:
    """Return the canonical strategy name, raising for unknown ones."""
    name = ALIASES.get(strategy, strategy)
    if name not in STRATEGIES:
        raise UnknownLocatorStrategyError(
            f"Unknown locator strategy: {strategy!r}. "
            f"Supported: {', '.join(sorted(STRATEGIES))}"
        )
    return name


def to_selector(strategy: str, value: str) -> str:
    """
    Build a Playwright selector.

    Examples:
        >>> to_selector("css", "input[type='text']")
        "css=input[type='text']"
        >>> to_selector("linkText", "Docs")
        'a:text-is("Docs")'
    """
    return STRATEGIES[normalize_strategy(strategy)](value)


__all__ = [
    "STRATEGIES",
    "ALIASES",
    "normalize_strategy",
    "to_selector",
]
