"""
Build orchestrator that feeds a package description into a CMakeBuilder
"""

import logging
import re
from typing import Any, Iterable, Optional

from ..config.models import (
    InstallDescription,
    ModuleDescription,
    PackageDescription,
    PlatformBuildDescription,
)
from .cmake_builder import CMakeBuilder


_NEEDS_QUOTING = re.compile(r'[\s;"()#\\]')


def cmake_list(values: Iterable[str]) -> str:
    """Join values into a space separated CMake argument list"""
    items = []
    for value in values:
        if not value or _NEEDS_QUOTING.search(value):
            value = '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
        items.append(value)
    return " ".join(items)


class BuildOrchestrator:
    """Translates a package description into builder calls"""

    # Build types whose modules table can be expressed in CMake
    SUPPORTED_BUILD_TYPES = ("builtin", "module")

    INSTALL_VARIABLES = {
        "lua": "BUILD_INSTALL_LUA",
        "lib": "BUILD_INSTALL_LIB",
        "conf": "BUILD_INSTALL_CONF",
        "bin": "BUILD_INSTALL_BIN",
    }

    MODULE_VARIABLES = {
        "libraries": "LIBRARIES",
        "defines": "DEFINES",
        "incdirs": "INCDIRS",
        "libdirs": "LIBDIRS",
    }

    def __init__(self,
                 description: PackageDescription,
                 package_name: Optional[str] = None,
                 logger: Any = None):
        """
        Initialize build orchestrator

        Args:
            description: Validated package description
            package_name: Name to use instead of the declared package name
            logger: Logger instance
        """
        self.description = description
        self.package_name = package_name or description.package
        self.logger = logger or logging.getLogger(__name__)

    def populate(self, builder: Optional[CMakeBuilder] = None) -> CMakeBuilder:
        """
        Record the whole description into a builder

        Args:
            builder: Builder to fill, a new one is created if omitted

        Returns:
            The populated builder
        """
        if builder is None:
            builder = CMakeBuilder(self.package_name, logger=self.logger)

        for message in self.description.errors:
            builder.record_fatal_error(message)

        self._add_platforms(builder)

        build = self.description.build
        if build.type not in self.SUPPORTED_BUILD_TYPES:
            self.logger.error(f"Build type '{build.type}' of {self.package_name} cannot be translated")
            builder.record_fatal_error(
                f"unhandled build type '{build.type}': only builtin builds are supported")
            return builder

        self._add_build(builder, build)
        for platform, override in build.platforms.items():
            self.logger.debug(f"Applying overrides for platform {platform}")
            self._add_build(builder, override, platform)

        self.logger.debug(f"{self.package_name}: {len(builder.script_targets)} Lua modules, "
                          f"{len(builder.native_targets)} native modules, {len(builder.errors)} errors")
        return builder

    def _add_platforms(self, builder: CMakeBuilder):
        for platform in self.description.supported_platforms:
            if platform.startswith("!"):
                builder.add_unsupported_platform(platform[1:])
            else:
                builder.add_supported_platform(platform)

    def _add_build(self,
                   builder: CMakeBuilder,
                   build: PlatformBuildDescription,
                   platform: Optional[str] = None):
        for name, value in build.variables.items():
            builder.set_variable(name, value, platform)

        if build.install is not None:
            self._add_install(builder, build.install, platform)

        if build.copy_directories:
            builder.set_variable("BUILD_COPY_DIRECTORIES", cmake_list(build.copy_directories), platform)

        for name, module in build.modules.items():
            self.add_module(builder, name, module, platform)

    def _add_install(self,
                     builder: CMakeBuilder,
                     install: InstallDescription,
                     platform: Optional[str] = None):
        for field, variable in self.INSTALL_VARIABLES.items():
            files = getattr(install, field)
            if files:
                builder.set_variable(variable, cmake_list(files), platform)

    def add_module(self,
                   builder: CMakeBuilder,
                   name: str,
                   module: ModuleDescription,
                   platform: Optional[str] = None):
        """
        Record one module and the variables its target refers to

        Args:
            builder: Builder to fill
            name: Dotted module name
            module: Module declaration
            platform: Only build the module on this platform
        """
        if not module.sources:
            self.logger.warning(f"Module {name} has no sources")

        builder.set_variable(f"{name}_SOURCES", cmake_list(module.sources), platform)

        if module.is_script:
            builder.add_script_target(name, platform)
            return

        for field, suffix in self.MODULE_VARIABLES.items():
            values = getattr(module, field)
            if values:
                builder.set_variable(f"{name}_{suffix}", cmake_list(values), platform)
        builder.add_native_target(name, platform)


__all__ = ["BuildOrchestrator", "cmake_list"]
