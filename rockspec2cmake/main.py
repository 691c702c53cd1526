#!/usr/bin/env python3
"""
Main entry point for rockspec2cmake
Generates a CMakeLists.txt from a package description
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import Optional, List

from .builders import BuildOrchestrator, CMakeBuilder
from .config import DescriptionLoader
from .platform import PLATFORM_TOKENS, PlatformDetector
from .utils import Logger


OUTPUT_NAME = "CMakeLists.txt"


class Generator:
    """Loads a package description and renders its CMake script"""

    def __init__(self,
                 description_file: Path,
                 package_name: Optional[str] = None,
                 verbose: bool = False,
                 log_file: Optional[str] = None,
                 logger: Optional[Logger] = None):
        """
        Initialize the generator

        Args:
            description_file: YAML or JSON package description
            package_name: Override for the declared package name
            verbose: Enable verbose output
            log_file: Optional log file path
            logger: Logger to use instead of creating one
        """
        self.description_file = Path(description_file)
        self.logger = logger or Logger(verbose=verbose, log_file=log_file)

        self.logger.debug(f"Loading package description {self.description_file}")
        self.loader = DescriptionLoader(self.description_file)
        self.package_name = self.loader.get_package_name(package_name)

        self.orchestrator = BuildOrchestrator(
            description=self.loader.get_description(),
            package_name=self.package_name,
            logger=self.logger
        )
        self.builder: Optional[CMakeBuilder] = None

    def generate(self) -> str:
        """
        Render the CMake script

        Returns:
            CMakeLists.txt contents
        """
        self.builder = self.orchestrator.populate()
        for error in self.builder.errors:
            self.logger.warning(f"Generated script will fail: {error}")
        return self.builder.generate()

    def has_errors(self) -> bool:
        """Check if the last generated script contains fatal errors"""
        return bool(self.builder and self.builder.errors)

    def write(self, output: Optional[Path] = None) -> Path:
        """
        Generate and write the CMake script

        Args:
            output: Destination file, CMakeLists.txt beside the description by default

        Returns:
            Path written to
        """
        output = Path(output) if output else self.description_file.parent / OUTPUT_NAME
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.generate(), encoding="utf-8")
        self.logger.success(f"Generated {output} for {self.package_name}")
        return output


def show_info(stream=None):
    """Print the platform table and the detected host to stdout"""
    stream = stream or sys.stdout
    info = PlatformDetector().detect()

    print("Platform translation table:", file=stream)
    for platform, token in PLATFORM_TOKENS.items():
        print(f"  {platform:<10} -> {token}", file=stream)
    print(file=stream)
    print(f"Host: {info['os']} ({info['machine']}), Python {info['python_version']}", file=stream)
    print(f"Host platforms: {', '.join(info['platforms'])}", file=stream)
    print(f"CMake conditions: {', '.join(info['tokens'])}", file=stream)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rockspec2cmake",
        description="Generate a CMakeLists.txt from a Lua package description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate foo.yaml                # Write CMakeLists.txt next to foo.yaml
  %(prog)s generate foo.yaml --stdout       # Print the script
  %(prog)s generate foo.yaml -o build/CMakeLists.txt
  %(prog)s info                             # Show platform table and host
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a CMake script")
    generate.add_argument(
        "description",
        type=Path,
        help="Package description (.yaml, .yml or .json)"
    )
    generate.add_argument(
        "--name",
        help="Package name to use instead of the declared one"
    )
    output = generate.add_mutually_exclusive_group()
    output.add_argument(
        "--output", "-o",
        type=Path,
        help=f"Output file (default: {OUTPUT_NAME} next to the description)"
    )
    output.add_argument(
        "--stdout",
        action="store_true",
        help="Write the script to standard output"
    )
    generate.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 if the script contains fatal errors"
    )

    for sub in (generate, subparsers.add_parser("info", help="Show platform information")):
        sub.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose output"
        )
        sub.add_argument(
            "--log-file",
            help="Also write the log to this file"
        )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface"""
    args = parse_args(argv)
    logger = Logger(verbose=args.verbose, log_file=args.log_file)

    if args.command == "info":
        show_info()
        return 0

    try:
        generator = Generator(
            description_file=args.description,
            package_name=args.name,
            logger=logger
        )
        if args.stdout:
            sys.stdout.write(generator.generate())
        else:
            generator.write(args.output)
    except KeyboardInterrupt:
        print("\nGeneration interrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        logger.error(f"Generation failed: {e}")
        if args.verbose:
            logging.getLogger(Logger.NAME).exception(e)
        return 1

    if args.strict and generator.has_errors():
        logger.error("Generated script contains fatal errors")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
