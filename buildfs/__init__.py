"""
buildfs: filesystem pattern matching and path resolution for build scripts.

Turns wildcard masks into ordered path lists, searches ordered directory
lists for libraries and scripts, and creates or removes directory trees.
"""

from buildfs.engine import FilesystemEngine
from buildfs.core.mutator import MutationResult

__all__ = [
    "FilesystemEngine",
    "MutationResult",
]
