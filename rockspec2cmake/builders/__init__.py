"""
Builder components for generating CMake scripts
"""

from .cmake_builder import CMakeBuilder
from .orchestrator import BuildOrchestrator, cmake_list
from .templates import render

__all__ = [
    "CMakeBuilder",
    "BuildOrchestrator",
    "cmake_list",
    "render",
]
