"""
Platform translation table and host platform detection
"""

import sys
import platform
from types import MappingProxyType
from typing import Dict, Any, List, Optional


# Rockspec platform identifiers and the CMake variables that are true on them
PLATFORM_TOKENS = MappingProxyType({
    "unix": "UNIX",
    "windows": "WIN32",
    "win32": "WIN32",
    "cygwin": "CYGWIN",
    "macosx": "APPLE",
    "linux": "UNIX",
    "freebsd": "UNIX",
    "bsd": "UNIX",
    "netbsd": "UNIX",
    "openbsd": "UNIX",
    "solaris": "UNIX",
    "mingw32": "MINGW",
    "msys": "MSYS",
})


def translate(platform_id: str) -> Optional[str]:
    """
    Translate a rockspec platform identifier to its CMake condition

    Args:
        platform_id: Platform identifier as used in package descriptions

    Returns:
        CMake variable name, or None if the platform has no equivalent
    """
    if not isinstance(platform_id, str):
        return None
    return PLATFORM_TOKENS.get(platform_id)


def is_valid(platform_id: str) -> bool:
    """Check if a platform identifier has a CMake equivalent"""
    return translate(platform_id) is not None


class PlatformDetector:
    """Detects which rockspec platforms describe the current host"""

    def detect(self) -> Dict[str, Any]:
        """
        Detect current platform

        Returns:
            Dictionary with platform information
        """
        platforms = self._get_platform_ids()
        return {
            "os": platform.system(),
            "machine": platform.machine(),
            "platforms": platforms,
            "tokens": sorted({PLATFORM_TOKENS[p] for p in platforms}),
            "python_version": sys.version.split()[0],
        }

    def _get_platform_ids(self) -> List[str]:
        """Get the rockspec platform identifiers matching this host"""
        system = platform.system().lower()

        if system == "windows":
            return ["windows", "win32"]
        elif system.startswith("cygwin"):
            return ["unix", "cygwin"]
        elif system.startswith(("mingw", "msys")):
            return ["windows", "win32", "mingw32"]
        elif system == "darwin":
            return ["unix", "bsd", "macosx"]
        elif system == "linux":
            return ["unix", "linux"]
        elif system in ("freebsd", "netbsd", "openbsd"):
            return ["unix", "bsd", system]
        elif system == "sunos":
            return ["unix", "solaris"]

        # Unknown systems are assumed to be some flavour of unix
        return ["unix"]


__all__ = ["PLATFORM_TOKENS", "translate", "is_valid", "PlatformDetector"]
