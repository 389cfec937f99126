import pytest

from flowsuites.ui_flow.framework.driver import contains


@pytest.mark.parametrize(
    "text, keyword, expected",
    [
        ("Selenium", "SELEN", True),
        ("selenium - Google Search", "Google", True),
        (123, "2", True),
        (123, 4, False),
        ("Search", "", True),
        ("Search", "searches", False),
        (None, "none", True),
    ],
)
def test_contains_is_case_insensitive_and_coerces(text, keyword, expected):
    assert contains(text, keyword) is expected
