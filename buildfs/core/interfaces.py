"""
Core interfaces for buildfs.

This module defines the abstract interface over raw operating system
primitives that the matching, search and mutation components depend on.
The native implementation lives in buildfs.core.primitives; tests and
embedding runtimes can provide their own.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class DirEntry:
    """
    One entry from a single-level directory listing.

    Attributes:
        name: Entry name (no directory component)
        is_file: True if the entry is a regular file or a symbolic link
        is_dir: True if the entry is a directory (links are never followed)
    """

    name: str
    is_file: bool
    is_dir: bool


class FilesystemPrimitives(ABC):
    """
    Abstract interface for raw filesystem, environment and process access.

    Path arguments are plain strings using forward slashes. Implementations
    raise OSError (or a subclass) on failure; callers decide whether a
    failure is fatal.
    """

    @abstractmethod
    def list_dir(self, path: str) -> List[DirEntry]:
        """
        List the entries of a single directory level.

        Args:
            path: Directory to list ('' means the current directory)

        Returns:
            Entries in enumeration order

        Raises:
            OSError: If the directory cannot be opened
        """
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check whether a regular file exists at path."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check whether a directory exists at path."""
        pass

    @abstractmethod
    def mkdir(self, path: str) -> None:
        """Create a single directory level."""
        pass

    @abstractmethod
    def rmdir(self, path: str) -> None:
        """Remove a single empty directory."""
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove a single file."""
        pass

    @abstractmethod
    def stat(self, path: str) -> os.stat_result:
        """Return file status information."""
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a whole text file.

        Raises:
            OSError: If the file cannot be opened or read
            UnicodeDecodeError: If the contents are not valid text
        """
        pass

    @abstractmethod
    def uuid(self, name: Optional[str] = None) -> str:
        """
        Generate an identifier.

        Args:
            name: If given, the identifier is derived from the name

        Returns:
            Uppercase UUID string
        """
        pass

    @abstractmethod
    def native_is_64bit(self) -> bool:
        """Native capability check for a 64-bit host."""
        pass

    @abstractmethod
    def getenv(self, name: str) -> Optional[str]:
        """Read an environment variable."""
        pass

    @abstractmethod
    def output_of(self, cmd: str) -> str:
        """Run a shell command, blocking, and return its standard output."""
        pass

    @abstractmethod
    def execute(self, cmd: str) -> int:
        """Run a shell command, blocking, and return its exit code."""
        pass

    @abstractmethod
    def executable_path(self) -> str:
        """Return the path of the running tool's own executable."""
        pass


__all__ = [
    "DirEntry",
    "FilesystemPrimitives",
]
