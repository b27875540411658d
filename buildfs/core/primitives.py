"""
Native operating system primitives for buildfs.

NativeFilesystem implements FilesystemPrimitives directly on top of the
os, uuid and subprocess modules. Directory listings are returned sorted by
name so that match results are identical across platforms whose native
enumeration orders differ.
"""

import os
import subprocess
import sys
import uuid
from typing import List, Optional

from buildfs.core.interfaces import DirEntry, FilesystemPrimitives

# Namespace for name-derived identifiers
_UUID_NAMESPACE = uuid.NAMESPACE_OID


def _to_native(path: str) -> str:
    """Map the engine's '' (current directory) onto a real path."""
    return path if path else "."


class NativeFilesystem(FilesystemPrimitives):
    """FilesystemPrimitives backed by the running operating system."""

    def list_dir(self, path: str) -> List[DirEntry]:
        entries = []
        with os.scandir(_to_native(path)) as it:
            for entry in it:
                try:
                    # Links are reported as files so removal unlinks them
                    # instead of descending into their targets
                    if entry.is_symlink():
                        is_file, is_dir = True, False
                    else:
                        is_file = entry.is_file()
                        is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    # Entry vanished or cannot be stat'ed
                    continue
                entries.append(DirEntry(entry.name, is_file, is_dir))

        entries.sort(key=lambda e: e.name)
        return entries

    def is_file(self, path: str) -> bool:
        return os.path.isfile(_to_native(path))

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(_to_native(path))

    def mkdir(self, path: str) -> None:
        os.mkdir(path)

    def rmdir(self, path: str) -> None:
        os.rmdir(path)

    def remove(self, path: str) -> None:
        os.remove(path)

    def stat(self, path: str) -> os.stat_result:
        return os.stat(_to_native(path))

    def read_text(self, path: str) -> str:
        with open(_to_native(path), "r") as f:
            return f.read()

    def uuid(self, name: Optional[str] = None) -> str:
        if name is not None:
            generated = uuid.uuid5(_UUID_NAMESPACE, name)
        else:
            generated = uuid.uuid4()
        return str(generated).upper()

    def native_is_64bit(self) -> bool:
        return sys.maxsize > 2**32

    def getenv(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def output_of(self, cmd: str) -> str:
        result = subprocess.run(
            cmd, shell=True, capture_output=True, text=True, check=False
        )
        return result.stdout

    def execute(self, cmd: str) -> int:
        result = subprocess.run(cmd, shell=True, check=False)
        return result.returncode

    def executable_path(self) -> str:
        if sys.argv and sys.argv[0]:
            path = os.path.abspath(sys.argv[0])
        else:
            path = sys.executable
        return path.replace("\\", "/")


__all__ = [
    "NativeFilesystem",
]
