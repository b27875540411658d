"""
Shared utilities for CLI commands.

Builds the engine every command runs against from the configuration file
and the global command-line overrides.
"""

import logging

from buildfs.config.parser import load_config
from buildfs.engine import FilesystemEngine

logger = logging.getLogger(__name__)


def create_engine(args) -> FilesystemEngine:
    """
    Create an engine from configuration and global CLI options.

    Command-line --os and --scripts take precedence over the configuration
    file.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configured FilesystemEngine

    Raises:
        ConfigError: If the configuration file is invalid
    """
    config = load_config(getattr(args, "config", None))

    if getattr(args, "os", None):
        config.os = args.os.lower()
    if getattr(args, "scripts", None):
        config.scripts = args.scripts

    logger.debug(f"Engine configuration: {config}")
    return FilesystemEngine(config)
