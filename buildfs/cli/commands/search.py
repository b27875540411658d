"""
Search command implementations.

findlib scans the system library locations; locate searches the script
search paths. Both print the path found, or exit with 1 if nothing was
found.
"""

import logging

from buildfs.cli.utils import create_engine

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the findlib or locate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if found, 1 if not)
    """
    engine = create_engine(args)

    if args.command == "findlib":
        result = engine.find_library(args.name)
        wanted = args.name
    else:
        result = engine.locate(*args.names)
        wanted = ", ".join(args.names)

    if result is None:
        logger.error(f"Not found: {wanted}")
        return 1

    print(result)
    return 0
