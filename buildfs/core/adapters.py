"""
Adapters that wrap raw primitives before they reach the engine.

NormalizingFilesystem normalizes every path argument before delegating to
the wrapped FilesystemPrimitives, so the matcher, search and mutation
components never see backslashes, doubled separators or redundant
segments.
"""

import os
from typing import List, Optional

from buildfs.core.interfaces import DirEntry, FilesystemPrimitives
from buildfs.core.paths import normalize


class NormalizingFilesystem(FilesystemPrimitives):
    """
    Path-normalizing adapter over another FilesystemPrimitives.

    Non-path operations (environment, processes, identifiers) are passed
    through unchanged.
    """

    def __init__(self, base: FilesystemPrimitives):
        """
        Initialize adapter.

        Args:
            base: Primitives to delegate to
        """
        self._base = base

    @property
    def base(self) -> FilesystemPrimitives:
        """The wrapped primitives."""
        return self._base

    def list_dir(self, path: str) -> List[DirEntry]:
        return self._base.list_dir(normalize(path))

    def is_file(self, path: str) -> bool:
        return self._base.is_file(normalize(path))

    def is_dir(self, path: str) -> bool:
        return self._base.is_dir(normalize(path))

    def mkdir(self, path: str) -> None:
        self._base.mkdir(normalize(path))

    def rmdir(self, path: str) -> None:
        self._base.rmdir(normalize(path))

    def remove(self, path: str) -> None:
        self._base.remove(normalize(path))

    def stat(self, path: str) -> os.stat_result:
        return self._base.stat(normalize(path))

    def read_text(self, path: str) -> str:
        return self._base.read_text(normalize(path))

    def uuid(self, name: Optional[str] = None) -> str:
        return self._base.uuid(name)

    def native_is_64bit(self) -> bool:
        return self._base.native_is_64bit()

    def getenv(self, name: str) -> Optional[str]:
        return self._base.getenv(name)

    def output_of(self, cmd: str) -> str:
        return self._base.output_of(cmd)

    def execute(self, cmd: str) -> int:
        return self._base.execute(cmd)

    def executable_path(self) -> str:
        return self._base.executable_path()


__all__ = [
    "NormalizingFilesystem",
]
