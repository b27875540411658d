"""
Entry point for running the buildfs CLI as a module.

Usage: python -m buildfs.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
