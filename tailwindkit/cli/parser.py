"""
tailwindkit CLI argument parser.

This module implements the command-line interface for tailwindkit using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tailwindkit.core.exceptions import TailwindKitError

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("tailwindkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """tailwindkit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="tailwindkit",
            description="tailwindkit - fetch, verify and run the Tailwind CSS standalone binary",
            epilog='Use "tailwindkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"tailwindkit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./tailwind.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Project root directory (default: current directory)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_download_command(subparsers)
        self._add_init_command(subparsers)
        self._add_compile_command(subparsers)
        self._add_platform_command(subparsers)

        return parser

    def _add_binary_options(self, parser):
        """Options shared by every command that needs the binary."""
        parser.add_argument(
            "--tailwind-version",
            dest="tailwind_version",
            metavar="VERSION",
            help="Tailwind CSS version (e.g., 4.1.0); overrides tailwind.yaml",
        )
        parser.add_argument(
            "--cache-dir",
            type=Path,
            metavar="DIR",
            help="Directory where Tailwind binaries are cached",
        )

    def _add_download_command(self, subparsers):
        """Add 'download' subcommand."""
        parser = subparsers.add_parser(
            "download",
            help="Download and cache the Tailwind binary",
            description="Download, verify and cache the Tailwind CSS binary for this platform",
        )
        self._add_binary_options(parser)

    def _add_init_command(self, subparsers):
        """Add 'init' subcommand."""
        parser = subparsers.add_parser(
            "init",
            help="Create a Tailwind configuration file",
            description="Run 'tailwindcss init' in the configured config directory",
        )
        self._add_binary_options(parser)
        parser.add_argument(
            "--config-path",
            metavar="DIR",
            help="Directory for tailwind.config.js (relative to project root)",
        )
        parser.add_argument(
            "--full",
            action="store_const",
            const=True,
            help="Include the full default configuration",
        )
        parser.add_argument(
            "--postcss",
            "-p",
            action="store_const",
            const=True,
            help="Also create a postcss.config.js file",
        )
        parser.add_argument(
            "--esm",
            action="store_const",
            const=True,
            help="Create the config file as an ES module",
        )
        parser.add_argument(
            "--ts",
            action="store_const",
            const=True,
            help="Create the config file in TypeScript",
        )

    def _add_compile_command(self, subparsers):
        """Add 'compile' subcommand."""
        parser = subparsers.add_parser(
            "compile",
            help="Compile Tailwind sources to CSS",
            description="Compile the input stylesheet with the Tailwind binary",
        )
        self._add_binary_options(parser)
        parser.add_argument(
            "--input", "-i", metavar="FILE", help="Input CSS file (relative to project root)"
        )
        parser.add_argument(
            "--output", "-o", metavar="FILE", help="Output CSS file (relative to project root)"
        )
        parser.add_argument(
            "--config-path",
            metavar="DIR",
            help="Directory containing tailwind.config.{js,cjs,mjs,ts}",
        )
        parser.add_argument(
            "--minify",
            action="store_const",
            const=True,
            help="Minify the output",
        )

    def _add_platform_command(self, subparsers):
        """Add 'platform' subcommand."""
        subparsers.add_parser(
            "platform",
            help="Show detected platform",
            description="Show the detected platform and the matching binary name",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except TailwindKitError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "download": "tailwindkit.cli.commands.download",
            "init": "tailwindkit.cli.commands.init",
            "compile": "tailwindkit.cli.commands.compile",
            "platform": "tailwindkit.cli.commands.platform",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        import importlib

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
