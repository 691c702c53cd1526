import json
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from rockspec2cmake.config import DescriptionError, DescriptionLoader, ModuleDescription

LUAFOO_YAML = """\
package: luafoo
version: 1.0
supported_platforms:
  - unix
  - "!windows"
build:
  type: builtin
  variables:
    LUA_VERSION: 5.1
  modules:
    foo: src/foo.lua
    foo.core:
      sources: [src/core.c]
      libraries: m
  platforms:
    macosx:
      modules:
        foo.core:
          sources: [src/core.c, src/mac.c]
"""


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_yaml(tmp_path):
    loader = DescriptionLoader(_write(tmp_path, "luafoo.yaml", LUAFOO_YAML))
    description = loader.get_description()

    assert description.package == "luafoo"
    assert description.version == "1.0"
    assert description.supported_platforms == ["unix", "!windows"]
    assert description.build.variables == {"LUA_VERSION": "5.1"}
    assert description.build.modules["foo"].is_script
    assert description.build.modules["foo.core"].libraries == ["m"]
    assert description.build.platforms["macosx"].modules["foo.core"].sources == ["src/core.c", "src/mac.c"]
    assert loader.get_raw_config()["package"] == "luafoo"


def test_load_json(tmp_path):
    data = {"package": "luafoo", "build": {"modules": {"foo": ["a.c", "b.c"]}}}
    loader = DescriptionLoader(_write(tmp_path, "luafoo.json", json.dumps(data)))

    module = loader.get_description().build.modules["foo"]
    assert module.sources == ["a.c", "b.c"]
    assert not module.is_script


def test_package_name_override(tmp_path):
    loader = DescriptionLoader(_write(tmp_path, "luafoo.yml", "package: luafoo\n"))

    assert loader.get_package_name() == "luafoo"
    assert loader.get_package_name("other") == "other"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DescriptionLoader(tmp_path / "missing.yaml")


@pytest.mark.parametrize("name, text, match", [
    ("luafoo.rockspec", "package = 'luafoo'", "Unsupported description format"),
    ("broken.yaml", "package: [luafoo\n", "Failed to parse"),
    ("broken.json", "{", "Failed to parse"),
    ("list.yaml", "- luafoo\n", "does not contain a package description"),
    ("empty.yaml", "", "does not contain a package description"),
    ("nameless.yaml", "version: 1\n", "Invalid package description"),
    ("typo.yaml", "package: luafoo\nbuild:\n  modules:\n    foo:\n      source: foo.c\n",
     "Invalid package description"),
])
def test_invalid_descriptions(tmp_path, name, text, match):
    with pytest.raises(DescriptionError, match=match):
        DescriptionLoader(_write(tmp_path, name, text))


def test_description_error_is_value_error():
    assert issubclass(DescriptionError, ValueError)


def test_module_shorthands():
    assert ModuleDescription.model_validate("src/foo.lua").sources == ["src/foo.lua"]
    assert ModuleDescription.model_validate(["a.c"]).sources == ["a.c"]
    assert ModuleDescription.model_validate({"sources": "a.c", "defines": "X"}).defines == ["X"]
    assert ModuleDescription.model_validate("src/foo.lua").is_script
    assert not ModuleDescription.model_validate(["a.lua", "b.lua"]).is_script


def test_module_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        ModuleDescription.model_validate({"sources": ["a.c"], "libs": ["m"]})
