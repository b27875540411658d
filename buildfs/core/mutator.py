"""
Recursive directory creation and removal for buildfs.

TreeMutator composes single-level primitives (mkdir, rmdir, remove) with
GlobMatcher to create and delete whole trees. None of the operations are
atomic: a failure part-way leaves whatever was already created or removed
in place.

    mutator = TreeMutator(primitives, matcher)
    mutator.make_dirs("build/obj/debug")
    mutator.remove_all(["**.bak", "**.log"])
    mutator.remove_dir_recursive("build")
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from buildfs.core.diagnostics import Diagnostics
from buildfs.core.exceptions import MatchError, MutationError
from buildfs.core.interfaces import FilesystemPrimitives
from buildfs.core.matcher import MATCH_NOTHING, GlobMatcher
from buildfs.core.paths import is_absolute, is_drive, join, normalize

logger = logging.getLogger(__name__)


@dataclass
class MutationResult:
    """
    Result of a mutating operation.

    Truthy on success. On failure carries the OS-provided cause and the
    path that could not be created or removed.
    """

    ok: bool = True
    cause: Optional[str] = None
    path: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        """
        Raise if the operation failed.

        Raises:
            MutationError: If ok is False
        """
        if not self.ok:
            raise MutationError(
                f"{self.path}: {self.cause}", path=self.path, cause=self.cause or ""
            )


def _failure(path: str, error: OSError) -> MutationResult:
    return MutationResult(ok=False, cause=error.strerror or str(error), path=path)


class TreeMutator:
    """Creates and removes directory trees."""

    def __init__(
        self,
        primitives: FilesystemPrimitives,
        matcher: GlobMatcher,
        diagnostics: Optional[Diagnostics] = None,
    ):
        """
        Initialize tree mutator.

        Args:
            primitives: Single-level mkdir/rmdir/remove primitives
            matcher: Matcher used to enumerate what to remove
            diagnostics: Sink for best-effort failures (created if None)
        """
        self._primitives = primitives
        self._matcher = matcher
        self._diagnostics = diagnostics or Diagnostics()

    def make_dirs(self, path: str) -> MutationResult:
        """
        Create a directory along with any missing parents.

        Args:
            path: Directory to create

        Returns:
            MutationResult; on failure, the first directory that could not
            be created and why. Parents created before the failure remain.
        """
        path = normalize(path)

        current = "/" if path.startswith("/") else ""
        for part in path.split("/"):
            if not part:
                continue

            current = current + part
            if not is_drive(part) and not is_absolute(part):
                if not self._primitives.is_dir(current):
                    try:
                        self._primitives.mkdir(current)
                    except OSError as e:
                        logger.debug(f"Failed to create {current!r}: {e}")
                        return _failure(current, e)
                    logger.debug(f"Created directory {current!r}")

            current = current + "/"

        return MutationResult()

    def remove_all(self, target: Union[str, Sequence[str]]) -> MutationResult:
        """
        Remove files by path, wildcard mask, or a list of either.

        Masks use the file matching syntax ("*", "**"). The first failure
        aborts the remaining removals.

        Args:
            target: A file, a mask, or a list of files and masks

        Returns:
            MutationResult; on failure, the file that could not be removed

        Raises:
            TypeError: If target is neither a string nor a sequence of strings

        Example:
            >>> result = mutator.remove_all(["**.bak", "**.log"])
            >>> result.raise_for_error()
        """
        if isinstance(target, str):
            # The configured file-exclude rule never shields a file from removal
            for fname in self._matcher.match(target, True, None, MATCH_NOTHING):
                try:
                    self._primitives.remove(fname)
                except OSError as e:
                    logger.debug(f"Failed to remove {fname!r}: {e}")
                    return _failure(fname, e)
                logger.debug(f"Removed {fname!r}")
            return MutationResult()

        if isinstance(target, (list, tuple)):
            for item in target:
                result = self.remove_all(item)
                if not result:
                    return result
            return MutationResult()

        raise TypeError(
            f"Expected a path, mask or list of them, got {type(target).__name__}"
        )

    def remove_dir_recursive(self, path: str) -> MutationResult:
        """
        Remove a directory along with any contained files or subdirectories.

        Children are removed before their parent. Failures below the
        directory are reported to diagnostics and do not stop the walk.

        Args:
            path: Directory to remove

        Returns:
            MutationResult for the removal of path itself
        """
        path = normalize(path)

        # Subdirectories first, hidden ones included
        for dname in self._enumerate(path, match_files=False):
            if dname.endswith("/.") or dname.endswith("/.."):
                continue
            self.remove_dir_recursive(dname)

        for fname in self._enumerate(path, match_files=True):
            try:
                self._primitives.remove(fname)
            except OSError as e:
                self._diagnostics.error("Failed to remove %s: %s", fname, e)

        try:
            self._primitives.rmdir(path)
        except OSError as e:
            self._diagnostics.error("Failed to remove directory %s: %s", path, e)
            return _failure(path, e)

        logger.debug(f"Removed directory {path!r}")
        return MutationResult()

    def _enumerate(self, path: str, match_files: bool) -> List[str]:
        """List every immediate file or subdirectory of path, exclude rules off."""
        mask = join(path, "*")
        try:
            if match_files:
                return self._matcher.match(mask, True, None, MATCH_NOTHING)
            return self._matcher.match(mask, False, MATCH_NOTHING)
        except MatchError as e:
            self._diagnostics.error("Failed to list %s: %s", path, e.cause)
            return []


__all__ = [
    "MutationResult",
    "TreeMutator",
]
