import base64

import pytest

from flowtest_tools.common import MAX_FILENAME_BYTES, ensure_directory, safe_filename
from flowsuites.ui_flow.framework.artifacts import ScreenshotStore


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Search Google", "Search Google"),
        ("a/b\\c", "a_b_c"),
        ('say "hi" <now>', "say _hi_ _now_"),
        ("tab\there", "tab_here"),
        ("ends with dots...", "ends with dots"),
        ("", "untitled"),
        (None, "untitled"),
        ("...", "untitled"),
    ],
)
def test_safe_filename(title, expected):
    assert safe_filename(title) == expected


@pytest.mark.parametrize(
    "title",
    ["Search " + "x" * 300, "検索" * 50, "é" * 150],
)
def test_safe_filename_caps_utf8_length(title):
    name = safe_filename(title)

    assert len(name.encode("utf-8")) <= MAX_FILENAME_BYTES
    assert title.startswith(name)


def test_safe_filename_cut_never_splits_a_character():
    # 3-byte characters; 200 is not a multiple of 3
    assert safe_filename("検" * 100) == "検" * 66


def test_ensure_directory_is_idempotent(tmp_path):
    target = tmp_path / "nested" / "dir"

    assert ensure_directory(target) == target
    assert ensure_directory(str(target)) == target
    assert target.is_dir()


def test_store_decodes_base64_payloads(tmp_path):
    store = ScreenshotStore(tmp_path / "shots", attach_to_allure=False)

    path = store.write("encoded", base64.b64encode(b"png-bytes").decode("ascii"))

    assert path.read_bytes() == b"png-bytes"


def test_store_purge_skips_directories(tmp_path):
    store = ScreenshotStore(tmp_path, attach_to_allure=False)
    (tmp_path / "old.png").write_bytes(b"x")
    (tmp_path / "keep").mkdir()

    assert store.purge() == 1
    assert [p.name for p in tmp_path.iterdir()] == ["keep"]
