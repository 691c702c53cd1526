"""
Package description loading
"""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .models import (
    BuildDescription,
    InstallDescription,
    ModuleDescription,
    PackageDescription,
    PlatformBuildDescription,
)


class DescriptionError(ValueError):
    """Raised when a package description cannot be read"""


class DescriptionLoader:
    """Loads a package description from a YAML or JSON file"""

    SUFFIXES = (".yaml", ".yml", ".json")

    def __init__(self, path: Path):
        """
        Initialize description loader

        Args:
            path: Description file (.yaml, .yml or .json)
        """
        self.path = Path(path)

        if not self.path.exists():
            raise FileNotFoundError(f"Package description not found: {self.path}")

        suffix = self.path.suffix.lower()
        if suffix not in self.SUFFIXES:
            raise DescriptionError(f"Unsupported description format '{suffix}': "
                                   f"expected one of {', '.join(self.SUFFIXES)}")

        with open(self.path, 'r', encoding="utf-8") as f:
            try:
                if suffix == ".json":
                    self.raw_config = json.load(f)
                else:
                    self.raw_config = yaml.safe_load(f)
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise DescriptionError(f"Failed to parse {self.path}: {e}") from e

        if not isinstance(self.raw_config, dict):
            raise DescriptionError(f"{self.path} does not contain a package description")

        try:
            self.description = PackageDescription.model_validate(self.raw_config)
        except ValidationError as e:
            raise DescriptionError(f"Invalid package description {self.path}: {e}") from e

    def get_description(self) -> PackageDescription:
        """Get the validated package description"""
        return self.description

    def get_package_name(self, override: Optional[str] = None) -> str:
        """
        Get the package name

        Args:
            override: Name to use instead of the declared one

        Returns:
            Package name
        """
        return override or self.description.package

    def get_raw_config(self) -> Dict[str, Any]:
        """Get the description as read from disk"""
        return self.raw_config


__all__ = [
    "DescriptionLoader",
    "DescriptionError",
    "PackageDescription",
    "BuildDescription",
    "PlatformBuildDescription",
    "ModuleDescription",
    "InstallDescription",
]
