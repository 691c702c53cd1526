import copy
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from rockspec2cmake.builders import CMakeBuilder

STATE_FIELDS = [
    "supported_platforms",
    "unsupported_platforms",
    "variables",
    "platform_variables",
    "script_targets",
    "platform_script_targets",
    "native_targets",
    "platform_native_targets",
]


def _snapshot(builder):
    return {field: copy.deepcopy(getattr(builder, field)) for field in STATE_FIELDS}


def _populated_builder():
    builder = CMakeBuilder("foo")
    builder.add_supported_platform("unix")
    builder.set_variable("LUA_VERSION", "5.1")
    builder.set_variable("FLAGS", "-O2", "linux")
    builder.add_script_target("foo")
    builder.add_native_target("foo.core", "windows")
    return builder


def test_new_builder_is_empty():
    builder = CMakeBuilder("foo")

    assert builder.package_name == "foo"
    assert builder.errors == []
    for field, value in _snapshot(builder).items():
        assert not value, field


@pytest.mark.parametrize("call", [
    lambda b: b.add_supported_platform("beos"),
    lambda b: b.add_unsupported_platform("beos"),
    lambda b: b.set_variable("X", "1", "beos"),
    lambda b: b.add_script_target("foo.extra", "beos"),
    lambda b: b.add_native_target("foo.extra", "beos"),
])
def test_invalid_platform_only_records_one_error(call):
    builder = _populated_builder()
    before = _snapshot(builder)
    errors_before = list(builder.errors)

    call(builder)

    assert _snapshot(builder) == before
    assert builder.errors == errors_before + [
        "unsupported platform 'beos': no build-tool equivalent defined"]


def test_fatal_errors_keep_insertion_order():
    builder = CMakeBuilder("foo")
    builder.record_fatal_error("first")
    builder.record_fatal_error("second")
    builder.record_fatal_error("first")

    assert builder.errors == ["first", "second", "first"]


def test_platform_lists_keep_order_without_repeats():
    builder = CMakeBuilder("foo")
    for platform in ["windows", "unix", "windows", "macosx"]:
        builder.add_supported_platform(platform)

    assert builder.supported_platforms == ["windows", "unix", "macosx"]
    assert builder.errors == []


def test_conflicting_platform_classification_is_kept(caplog):
    builder = CMakeBuilder("foo")
    builder.add_supported_platform("unix")
    builder.add_unsupported_platform("unix")

    assert builder.supported_platforms == ["unix"]
    assert builder.unsupported_platforms == ["unix"]
    assert builder.errors == []
    assert "both supported and unsupported" in caplog.text


def test_variables_split_by_scope():
    builder = CMakeBuilder("foo")
    builder.set_variable("LUA_VERSION", "5.1")
    builder.set_variable("LUA_VERSION", "5.3", "windows")
    builder.set_variable("JOBS", 4)

    assert builder.variables == {"LUA_VERSION": "5.1", "JOBS": "4"}
    assert builder.platform_variables == {"windows": {"LUA_VERSION": "5.3"}}


def test_later_assignment_replaces_value():
    builder = CMakeBuilder("foo")
    builder.set_variable("A", "1", "unix")
    builder.set_variable("A", "2", "unix")

    assert builder.platform_variables == {"unix": {"A": "2"}}


def test_targets_split_by_scope_and_keep_duplicates():
    builder = CMakeBuilder("foo")
    builder.add_script_target("foo")
    builder.add_script_target("foo")
    builder.add_script_target("foo.win", "windows")
    builder.add_native_target("foo.core")
    builder.add_native_target("foo.posix", "unix")
    builder.add_native_target("foo.posix", "unix")

    assert builder.script_targets == ["foo", "foo"]
    assert builder.platform_script_targets == {"windows": ["foo.win"]}
    assert builder.native_targets == ["foo.core"]
    assert builder.platform_native_targets == {"unix": ["foo.posix", "foo.posix"]}


def test_generate_does_not_mutate_state():
    builder = _populated_builder()
    before = _snapshot(builder)

    first = builder.generate()
    second = builder.generate()

    assert first == second
    assert _snapshot(builder) == before
    assert builder.errors == []
