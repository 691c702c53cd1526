import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from rockspec2cmake.platform import PLATFORM_TOKENS, PlatformDetector, is_valid, translate


@pytest.mark.parametrize("platform", sorted(PLATFORM_TOKENS))
def test_known_platforms_translate(platform):
    assert is_valid(platform)
    assert translate(platform)


@pytest.mark.parametrize("platform, token", [
    ("unix", "UNIX"),
    ("windows", "WIN32"),
    ("win32", "WIN32"),
    ("cygwin", "CYGWIN"),
    ("macosx", "APPLE"),
    ("linux", "UNIX"),
    ("freebsd", "UNIX"),
])
def test_rockspec_platform_tokens(platform, token):
    assert translate(platform) == token


@pytest.mark.parametrize("platform", ["beos", "", "UNIX", "Windows", None, 42])
def test_unknown_platforms_are_rejected_consistently(platform):
    assert translate(platform) is None
    assert is_valid(platform) is False


def test_table_is_read_only():
    with pytest.raises(TypeError):
        PLATFORM_TOKENS["beos"] = "BEOS"


@pytest.mark.parametrize("system, expected", [
    ("Linux", ["unix", "linux"]),
    ("Windows", ["windows", "win32"]),
    ("Darwin", ["unix", "bsd", "macosx"]),
    ("FreeBSD", ["unix", "bsd", "freebsd"]),
    ("CYGWIN_NT-10.0", ["unix", "cygwin"]),
    ("Plan9", ["unix"]),
])
def test_detector_maps_host_to_platforms(monkeypatch, system, expected):
    monkeypatch.setattr("platform.system", lambda: system)

    info = PlatformDetector().detect()

    assert info["platforms"] == expected
    assert all(is_valid(p) for p in info["platforms"])
    assert info["tokens"] == sorted({translate(p) for p in expected})
