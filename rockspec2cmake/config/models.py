"""Contains models describing a package build"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _as_list(value: Any) -> Any:
    """Accepts a single string or a mapping in place of a list of strings"""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, dict):
        return list(value.values())
    return value


class ModuleDescription(BaseModel):
    """Holds a single build.modules entry"""
    model_config = ConfigDict(extra="forbid")

    sources: List[str] = Field(default_factory=list)
    """Source files, a single .lua file for Lua modules"""
    libraries: List[str] = Field(default_factory=list)
    """Libraries to look up and link against"""
    defines: List[str] = Field(default_factory=list)
    """Preprocessor definitions"""
    incdirs: List[str] = Field(default_factory=list)
    """Include directories"""
    libdirs: List[str] = Field(default_factory=list)
    """Library search directories"""

    @model_validator(mode="before")
    @classmethod
    def _from_shorthand(cls, data: Any) -> Any:
        # "src/foo.lua" and ["a.c", "b.c"] are both valid module declarations
        if isinstance(data, (str, list)):
            return {"sources": _as_list(data)}
        return data

    @field_validator("sources", "libraries", "defines", "incdirs", "libdirs", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> Any:
        return _as_list(value)

    @property
    def is_script(self) -> bool:
        """True if the module is installed as Lua source instead of compiled"""
        return len(self.sources) == 1 and self.sources[0].endswith(".lua")


class InstallDescription(BaseModel):
    """Holds build.install"""
    model_config = ConfigDict(extra="forbid")

    lua: List[str] = Field(default_factory=list)
    lib: List[str] = Field(default_factory=list)
    conf: List[str] = Field(default_factory=list)
    bin: List[str] = Field(default_factory=list)

    @field_validator("lua", "lib", "conf", "bin", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> Any:
        return _as_list(value)


class PlatformBuildDescription(BaseModel):
    """Holds a build.platforms entry, overriding build settings on one platform"""
    model_config = ConfigDict(extra="forbid")

    modules: Dict[str, ModuleDescription] = Field(default_factory=dict)
    install: Optional[InstallDescription] = None
    copy_directories: Optional[List[str]] = None
    variables: Dict[str, str] = Field(default_factory=dict)

    @field_validator("variables", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {name: str(item) for name, item in value.items()}
        return value


class BuildDescription(PlatformBuildDescription):
    """Holds the build table"""

    type: str = "builtin"
    """Build type, only builtin builds can be translated"""
    platforms: Dict[str, PlatformBuildDescription] = Field(default_factory=dict)


class PackageDescription(BaseModel):
    """Holds a complete package description"""
    model_config = ConfigDict(extra="ignore")

    package: str
    """Package name"""
    version: Optional[str] = None
    supported_platforms: List[str] = Field(default_factory=list)
    """Platform identifiers, prefixed with ! if explicitly unsupported"""
    errors: List[str] = Field(default_factory=list)
    """Errors found by earlier processing stages"""
    build: BuildDescription = Field(default_factory=BuildDescription)

    @field_validator("version", mode="before")
    @classmethod
    def _version_to_str(cls, value: Any) -> Any:
        return None if value is None else str(value)
