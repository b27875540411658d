"""
buildfs CLI argument parser.

This module implements the command-line interface for buildfs using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("buildfs")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """buildfs command-line interface."""

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
            prog="buildfs",
            description="buildfs - wildcard matching and path search for build scripts",
            epilog='Use "buildfs COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"buildfs {__version__}"
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
            help="Path to configuration file (default: ./buildfs.yaml)",
        )
        parser.add_argument(
            "--os",
            metavar="ID",
            help="Override the detected operating system id (e.g., windows, macosx, linux)",
        )
        parser.add_argument(
            "--scripts",
            metavar="PATHS",
            help="Script search path for 'locate' (separated by ';')",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_match_command(subparsers)
        self._add_findlib_command(subparsers)
        self._add_locate_command(subparsers)
        self._add_mkdir_command(subparsers)
        self._add_rm_command(subparsers)
        self._add_rmdir_command(subparsers)
        self._add_info_command(subparsers)
        self._add_uuid_command(subparsers)

        return parser

    def _add_match_command(self, subparsers):
        """Add 'match' subcommand."""
        parser = subparsers.add_parser(
            "match",
            help="List files or directories matching a wildcard mask",
            description='List paths matching a mask ("*" within a name, "**" recursive)',
        )
        parser.add_argument("mask", help="Wildcard mask (e.g., 'src/**.c')")
        parser.add_argument(
            "--dirs",
            action="store_true",
            help="Match directories instead of files",
        )
        parser.add_argument(
            "--exclude-dirs",
            metavar="REGEX",
            help="Skip directories whose name matches (default: hidden directories)",
        )
        parser.add_argument(
            "--exclude-files",
            metavar="REGEX",
            help="Skip files whose name matches (default: none)",
        )

    def _add_findlib_command(self, subparsers):
        """Add 'findlib' subcommand."""
        parser = subparsers.add_parser(
            "findlib",
            help="Find a shared library",
            description="Scan the well-known system locations for a shared library",
        )
        parser.add_argument("name", help="Library name (e.g., 'z' for libz.so)")

    def _add_locate_command(self, subparsers):
        """Add 'locate' subcommand."""
        parser = subparsers.add_parser(
            "locate",
            help="Locate a script file",
            description="Locate the first of several files on the script search paths",
        )
        parser.add_argument("names", nargs="+", help="Candidate file names")

    def _add_mkdir_command(self, subparsers):
        """Add 'mkdir' subcommand."""
        parser = subparsers.add_parser(
            "mkdir",
            help="Create a directory and any missing parents",
            description="Create a directory along with any missing parent directories",
        )
        parser.add_argument("path", help="Directory to create")

    def _add_rm_command(self, subparsers):
        """Add 'rm' subcommand."""
        parser = subparsers.add_parser(
            "rm",
            help="Remove files matching masks",
            description="Remove files by path or wildcard mask; stops at the first failure",
        )
        parser.add_argument("masks", nargs="+", help="Files or masks to remove")

    def _add_rmdir_command(self, subparsers):
        """Add 'rmdir' subcommand."""
        parser = subparsers.add_parser(
            "rmdir",
            help="Remove a directory tree",
            description="Remove a directory along with all contained files and subdirectories",
        )
        parser.add_argument("path", help="Directory to remove")

    def _add_info_command(self, subparsers):
        """Add 'info' subcommand."""
        subparsers.add_parser(
            "info",
            help="Show platform information",
            description="Show the operating system id, word size and platform details",
        )

    def _add_uuid_command(self, subparsers):
        """Add 'uuid' subcommand."""
        parser = subparsers.add_parser(
            "uuid",
            help="Generate a UUID",
            description="Generate a UUID, derived from NAME when given",
        )
        parser.add_argument("name", nargs="?", help="Name to derive the UUID from")

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
        except Exception as e:
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
        # Command module mapping
        command_map = {
            "match": "buildfs.cli.commands.match",
            "findlib": "buildfs.cli.commands.search",
            "locate": "buildfs.cli.commands.search",
            "mkdir": "buildfs.cli.commands.tree",
            "rm": "buildfs.cli.commands.tree",
            "rmdir": "buildfs.cli.commands.tree",
            "info": "buildfs.cli.commands.info",
            "uuid": "buildfs.cli.commands.info",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
