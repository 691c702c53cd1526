"""
setup.py for rockspec2cmake

Installs the rockspec2cmake package and its console script:
- rockspec2cmake generate luafoo.yaml      # writes CMakeLists.txt
- python -m rockspec2cmake info            # platform translation table
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="rockspec2cmake",
    version="0.1.0",
    description="Translates Lua package build descriptions into CMake scripts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["rockspec2cmake", "rockspec2cmake.*"]),
    entry_points={
        "console_scripts": [
            "rockspec2cmake=rockspec2cmake.main:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Build Tools",
    ],
)
