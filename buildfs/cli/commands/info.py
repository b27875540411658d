"""
Platform information and UUID command implementations.
"""

from buildfs.cli.utils import create_engine


def run(args) -> int:
    """
    Run the info or uuid command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    engine = create_engine(args)

    if args.command == "uuid":
        print(engine.generate_uuid(args.name))
        return 0

    info = engine.platform_info()
    print(f"os:       {engine.os_id()}")
    print(f"64-bit:   {'yes' if engine.is_64bit() else 'no'}")
    print(f"platform: {info}")
    return 0
