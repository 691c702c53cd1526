"""
rockspec2cmake
Translates Lua package descriptions into CMake build scripts
"""

__version__ = "0.1.0"

from .builders import BuildOrchestrator, CMakeBuilder, render
from .main import Generator

__all__ = ["Generator", "CMakeBuilder", "BuildOrchestrator", "render", "__version__"]
