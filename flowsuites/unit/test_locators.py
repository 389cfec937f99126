import pytest

from flowsuites.ui_flow.framework.exceptions import UnknownLocatorStrategyError
from flowsuites.ui_flow.framework.locators import normalize_strategy, to_selector


@pytest.mark.parametrize(
    "strategy, value, expected",
    [
        ("css", "input[type='text']", "css=input[type='text']"),
        ("xpath", "//form", "xpath=//form"),
        ("id", "search", "id=search"),
        ("name", "q", 'css=[name="q"]'),
        ("class_name", "btn", 'css=[class~="btn"]'),
        ("tag_name", "button", "css=button"),
        ("link_text", "Docs", 'a:text-is("Docs")'),
        ("partial_link_text", "Do", 'a:has-text("Do")'),
    ],
)
def test_to_selector(strategy, value, expected):
    assert to_selector(strategy, value) == expected


def test_camel_case_aliases():
    assert normalize_strategy("linkText") == "link_text"
    assert to_selector("className", "btn") == to_selector("class_name", "btn")


def test_unknown_strategy_raises():
    with pytest.raises(UnknownLocatorStrategyError, match="Unknown locator strategy"):
        to_selector("shadow", "x")

    # Also usable as a ValueError by callers that do not know the framework
    with pytest.raises(ValueError):
        normalize_strategy("")
