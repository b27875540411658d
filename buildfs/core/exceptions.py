"""
Centralized exception hierarchy for buildfs.

This module defines all custom exceptions used across the codebase
to provide clear exception semantics.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class BuildFSError(Exception):
    """Base exception for all buildfs errors."""

    pass


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class FilesystemError(BuildFSError):
    """
    Base exception for filesystem operations.

    Carries the path involved and the OS-provided cause string.
    """

    def __init__(self, message: str, path: Optional[str] = None, cause: str = ""):
        self.path = path
        self.cause = cause
        super().__init__(message)


class MatchError(FilesystemError):
    """Raised when the base directory of a wildcard match cannot be opened."""

    pass


class MutationError(FilesystemError):
    """Raised when a directory creation or removal fails."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(BuildFSError):
    """Configuration parsing or validation error."""

    pass


__all__ = [
    "BuildFSError",
    "FilesystemError",
    "MatchError",
    "MutationError",
    "ConfigError",
]
