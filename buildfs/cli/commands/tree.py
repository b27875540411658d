"""
Tree mutation command implementations.

mkdir creates a directory with its parents, rm removes files by path or
mask, rmdir removes a whole directory tree.
"""

import logging

from buildfs.cli.utils import create_engine

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the mkdir, rm or rmdir command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 on failure)
    """
    engine = create_engine(args)

    if args.command == "mkdir":
        result = engine.make_dirs(args.path)
    elif args.command == "rm":
        result = engine.remove_all(args.masks)
    else:
        result = engine.remove_dir_recursive(args.path)

    if not result:
        logger.error(f"{args.command} failed: {result.path}: {result.cause}")
        return 1

    return 0
