"""
Core functionality for buildfs.

This package contains the matching, search, mutation, platform and
identifier components, and the primitives interface they are built on.
"""

from .exceptions import (
    BuildFSError,
    FilesystemError,
    MatchError,
    MutationError,
    ConfigError,
)

from .interfaces import (
    DirEntry,
    FilesystemPrimitives,
)

from .primitives import NativeFilesystem
from .adapters import NormalizingFilesystem
from .diagnostics import Diagnostics

from .platform import (
    PlatformInfo,
    PlatformProbe,
    detect_host_os,
)

from .matcher import (
    DEFAULT_EXCLUDE_DIRS,
    MATCH_NOTHING,
    GlobMatcher,
)

from .search import PathSearch
from .mutator import MutationResult, TreeMutator
from .uuids import UUIDRegistry

__all__ = [
    "BuildFSError",
    "FilesystemError",
    "MatchError",
    "MutationError",
    "ConfigError",
    "DirEntry",
    "FilesystemPrimitives",
    "NativeFilesystem",
    "NormalizingFilesystem",
    "Diagnostics",
    "PlatformInfo",
    "PlatformProbe",
    "detect_host_os",
    "DEFAULT_EXCLUDE_DIRS",
    "MATCH_NOTHING",
    "GlobMatcher",
    "PathSearch",
    "MutationResult",
    "TreeMutator",
    "UUIDRegistry",
]
