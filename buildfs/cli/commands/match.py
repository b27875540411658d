"""
Match command implementation.

Prints the paths matching a wildcard mask, one per line.
"""

import logging

from buildfs.cli.utils import create_engine

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the match command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    engine = create_engine(args)

    results = engine.match(
        args.mask,
        not args.dirs,
        args.exclude_dirs,
        args.exclude_files,
    )
    logger.debug(f"{len(results)} match(es) for {args.mask!r}")

    for path in results:
        print(path)

    return 0
