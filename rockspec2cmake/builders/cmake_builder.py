"""
CMake builder: collects platforms, variables and targets for one package
"""

import logging
from typing import Dict, List, Optional, Any

from ..platform import is_valid
from .templates import render


class CMakeBuilder:
    """Accumulates the CMake configuration of a single package

    Everything is recorded through the setters below, which validate
    platform identifiers first. A setter given an unknown platform only
    appends a fatal error, so the problem surfaces when CMake runs the
    generated script instead of at generation time.
    """

    def __init__(self, package_name: str, logger: Any = None):
        """
        Initialize builder

        Args:
            package_name: Name used in the project() declaration
            logger: Logger instance
        """
        self.package_name = package_name
        self.logger = logger or logging.getLogger(__name__)

        self.errors: List[str] = []
        self.supported_platforms: List[str] = []
        self.unsupported_platforms: List[str] = []

        # Default scope, name -> value
        self.variables: Dict[str, str] = {}
        # Override scope, platform -> {name -> value}
        self.platform_variables: Dict[str, Dict[str, str]] = {}

        # A target listed for a platform is platform specific only if it is
        # not also in the matching default list
        self.script_targets: List[str] = []
        self.platform_script_targets: Dict[str, List[str]] = {}
        self.native_targets: List[str] = []
        self.platform_native_targets: Dict[str, List[str]] = {}

    def _check_platform(self, platform: str) -> bool:
        if is_valid(platform):
            return True

        self.logger.warning(f"No CMake equivalent for platform '{platform}', ignoring its settings")
        self.record_fatal_error(
            f"unsupported platform '{platform}': no build-tool equivalent defined")
        return False

    def record_fatal_error(self, message: str):
        """Record an error to be raised by the generated script"""
        self.errors.append(message)

    def add_supported_platform(self, platform: str):
        """Mark platform as supported"""
        if not self._check_platform(platform):
            return
        if platform in self.unsupported_platforms:
            self.logger.warning(f"Platform '{platform}' is marked both supported and unsupported")
        if platform not in self.supported_platforms:
            self.supported_platforms.append(platform)

    def add_unsupported_platform(self, platform: str):
        """Mark platform as explicitly unsupported"""
        if not self._check_platform(platform):
            return
        if platform in self.supported_platforms:
            self.logger.warning(f"Platform '{platform}' is marked both supported and unsupported")
        if platform not in self.unsupported_platforms:
            self.unsupported_platforms.append(platform)

    def set_variable(self, name: str, value: Any, platform: Optional[str] = None):
        """
        Set a CMake variable

        Args:
            name: Variable name
            value: Variable value, emitted as is
            platform: Only set the variable on this platform
        """
        if platform is None:
            self.variables[name] = str(value)
        elif self._check_platform(platform):
            self.platform_variables.setdefault(platform, {})[name] = str(value)

    def add_script_target(self, name: str, platform: Optional[str] = None):
        """Add a Lua module that is installed without compilation"""
        if platform is None:
            self.script_targets.append(name)
        elif self._check_platform(platform):
            self.platform_script_targets.setdefault(platform, []).append(name)

    def add_native_target(self, name: str, platform: Optional[str] = None):
        """Add a C/C++ module that is compiled into a library"""
        if platform is None:
            self.native_targets.append(name)
        elif self._check_platform(platform):
            self.platform_native_targets.setdefault(platform, []).append(name)

    def generate(self) -> str:
        """Render the collected configuration as a CMakeLists.txt"""
        return render(self)
