"""
Filesystem engine for buildfs.

FilesystemEngine owns one instance of every component, wires the
path-normalizing adapter in front of the raw primitives, and exposes the
surface used by the build DSL and file generators:

- match(), match_files(), match_dirs()
- find_library(), locate(), path_search()
- make_dirs(), remove_all(), remove_dir_recursive()
- os_id(), is_os(), is_64bit(), platform_info()
- generate_uuid()
- is_file(), is_dir(), stat(), execute(), executef(), output_of()

Example:
    >>> from buildfs.engine import FilesystemEngine
    >>>
    >>> engine = FilesystemEngine()
    >>> engine.match_files("src/**.c")
    ['src/a.c', 'src/b.c', 'src/sub/c.c']
    >>> engine.make_dirs("build/obj").raise_for_error()
"""

import logging
import os
from typing import List, Optional, Sequence, Union

from buildfs.config.parser import EngineConfig
from buildfs.core.adapters import NormalizingFilesystem
from buildfs.core.diagnostics import Diagnostics
from buildfs.core.interfaces import FilesystemPrimitives
from buildfs.core.matcher import ExcludeRule, GlobMatcher
from buildfs.core.mutator import MutationResult, TreeMutator
from buildfs.core.platform import PlatformInfo, PlatformProbe
from buildfs.core.primitives import NativeFilesystem
from buildfs.core.search import PathSearch
from buildfs.core.uuids import UUIDRegistry

logger = logging.getLogger(__name__)


class FilesystemEngine:
    """
    Context object owning the matcher, search, mutator, probe and registry.

    The 64-bit cache and UUID map live on this engine's components, so two
    engines never share state.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        primitives: Optional[FilesystemPrimitives] = None,
        host_os: Optional[str] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        """
        Initialize engine.

        Args:
            config: Engine configuration (defaults if None)
            primitives: Raw OS primitives (NativeFilesystem if None); they
                are wrapped in a NormalizingFilesystem
            host_os: Host OS id (detected if None)
            diagnostics: Warning/error sink (created if None)
        """
        self.config = config or EngineConfig()
        self.diagnostics = diagnostics or Diagnostics()
        self.primitives = NormalizingFilesystem(primitives or NativeFilesystem())

        self.probe = PlatformProbe(
            self.primitives, os_override=self.config.os, host_os=host_os
        )
        self.matcher = GlobMatcher(
            self.primitives,
            case_sensitive=self.probe.host_os != "windows",
            exclude_dirs=self.config.exclude.dirs,
            exclude_files=self.config.exclude.files,
        )
        self.search = PathSearch(
            self.primitives,
            self.matcher,
            self.probe,
            scripts=self.config.scripts,
            search_env=self.config.search_env,
            ld_so_conf=self.config.ld_so_conf,
        )
        self.mutator = TreeMutator(self.primitives, self.matcher, self.diagnostics)
        self.uuids = UUIDRegistry(self.primitives, self.diagnostics)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def match(
        self,
        mask: str,
        match_files: bool,
        exclude_dirs: ExcludeRule = None,
        exclude_files: ExcludeRule = None,
    ) -> List[str]:
        """Perform a wildcard search for files or directories."""
        return self.matcher.match(mask, match_files, exclude_dirs, exclude_files)

    def match_files(self, mask: str) -> List[str]:
        """Perform a wildcard search for files."""
        return self.matcher.match_files(mask)

    def match_dirs(self, mask: str) -> List[str]:
        """Perform a wildcard search for directories."""
        return self.matcher.match_dirs(mask)

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------

    def path_search(self, name: str, *paths: Optional[str]) -> Optional[str]:
        """Find the first directory in the given path-lists containing name."""
        return self.search.path_search(name, *paths)

    def find_library(self, libname: str) -> Optional[str]:
        """Scan the well-known system locations for a library."""
        return self.search.find_library(libname)

    def locate(self, *names: str) -> Optional[str]:
        """Locate a file on the script search paths."""
        return self.search.locate(*names)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def make_dirs(self, path: str) -> MutationResult:
        """Create a directory along with any missing parents."""
        return self.mutator.make_dirs(path)

    def remove_all(self, target: Union[str, Sequence[str]]) -> MutationResult:
        """Remove files by path, mask, or a list of either."""
        return self.mutator.remove_all(target)

    def remove_dir_recursive(self, path: str) -> MutationResult:
        """Remove a directory along with its contents."""
        return self.mutator.remove_dir_recursive(path)

    # ------------------------------------------------------------------
    # Platform
    # ------------------------------------------------------------------

    def os_id(self) -> str:
        """Retrieve the current operating system id."""
        return self.probe.os_id()

    def is_os(self, os_id: str) -> bool:
        """Check the current operating system, case-insensitively."""
        return self.probe.is_os(os_id)

    def is_64bit(self) -> bool:
        """Determine whether the host is a 64-bit system (cached)."""
        return self.probe.is_64bit()

    def platform_info(self) -> PlatformInfo:
        """Collect descriptive platform information."""
        return self.probe.platform_info()

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------

    def generate_uuid(self, name: Optional[str] = None) -> str:
        """Generate a UUID, recording which name produced it."""
        return self.uuids.generate(name)

    # ------------------------------------------------------------------
    # Normalizing wrappers over primitives
    # ------------------------------------------------------------------

    def is_file(self, path: str) -> bool:
        """Determine if a file (not a directory) exists at path."""
        return self.primitives.is_file(path)

    def is_dir(self, path: str) -> bool:
        """Determine if a directory (not a file) exists at path."""
        return self.primitives.is_dir(path)

    def stat(self, path: str) -> os.stat_result:
        """Return information about a file."""
        return self.primitives.stat(path)

    def execute(self, cmd: str) -> int:
        """Run a shell command and return its exit code."""
        logger.debug(f"Executing: {cmd}")
        return self.primitives.execute(cmd)

    def executef(self, fmt: str, *args) -> int:
        """Same as execute(), but accepts %-style formatting arguments."""
        return self.execute(fmt % args if args else fmt)

    def output_of(self, cmd: str) -> str:
        """Run a shell command and return its output."""
        logger.debug(f"Capturing output of: {cmd}")
        return self.primitives.output_of(cmd)


__all__ = [
    "FilesystemEngine",
]
