"""
Entry point for running the buildfs CLI as a module.

Usage: python -m buildfs [command] [options]
"""

from buildfs.cli.parser import main

if __name__ == "__main__":
    main()
