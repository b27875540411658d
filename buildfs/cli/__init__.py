"""
Command-line interface for buildfs.

Usage: buildfs [command] [options]
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
