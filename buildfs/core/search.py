"""
Ordered multi-directory search for buildfs.

PathSearch locates files on ordered search paths:

- path_search(): first directory of one or more path-list strings that
  contains a file
- find_library(): platform-aware shared library lookup (environment
  search variable, dynamic linker configuration, default locations)
- locate(): script lookup on the configured script path, the search
  environment variable and the directory of the running executable

Not finding anything is not an error: every lookup returns None instead.
"""

import logging
import re
from typing import List, Optional, Set, Tuple

from buildfs.core.exceptions import MatchError
from buildfs.core.interfaces import FilesystemPrimitives
from buildfs.core.matcher import GlobMatcher
from buildfs.core.paths import get_directory, is_absolute, join, normalize
from buildfs.core.platform import PlatformProbe

logger = logging.getLogger(__name__)

DEFAULT_LD_SO_CONF = "/etc/ld.so.conf"
DEFAULT_SEARCH_ENV = "BUILDFS_PATH"

LIBRARY_DIRS_64BIT = "/lib64:/usr/lib64:/usr/local/lib64"
LIBRARY_DIRS = "/lib:/usr/lib:/usr/local/lib"


class PathSearch:
    """
    Searches ordered directory lists for files.

    Example:
        >>> search = PathSearch(primitives, matcher, probe)
        >>> search.find_library("z")
        '/usr/lib/libz.so'
        >>> search.locate("project.lua", "project.legacy.lua")
        'scripts/project.lua'
    """

    def __init__(
        self,
        primitives: FilesystemPrimitives,
        matcher: GlobMatcher,
        probe: PlatformProbe,
        scripts: Optional[str] = None,
        search_env: str = DEFAULT_SEARCH_ENV,
        ld_so_conf: str = DEFAULT_LD_SO_CONF,
    ):
        """
        Initialize path search.

        Args:
            primitives: Filesystem primitives for existence checks and env reads
            matcher: Matcher used to expand dynamic linker 'include' globs
            probe: Platform probe selecting library conventions
            scripts: Script search path-list consulted first by locate()
            search_env: Environment variable consulted by locate()
            ld_so_conf: Dynamic linker configuration file
        """
        self._primitives = primitives
        self._matcher = matcher
        self._probe = probe
        self.scripts = scripts
        self.search_env = search_env
        self.ld_so_conf = ld_so_conf

    def split_path_list(self, path_list: str) -> List[str]:
        """
        Split a path-list string into directories.

        Entries are separated by ';' everywhere, and also by ':' on
        non-Windows hosts. Empty entries are dropped.
        """
        if self._probe.host_os == "windows":
            parts = path_list.split(";")
        else:
            parts = re.split(r"[;:]", path_list)
        return [part for part in parts if part]

    def path_search(self, name: str, *paths: Optional[str]) -> Optional[str]:
        """
        Find the first directory containing a file.

        Args:
            name: File name to look for
            *paths: Path-list strings searched in order; None entries are skipped

        Returns:
            Directory containing the file, or None if not found
        """
        for path_list in paths:
            if not path_list:
                continue
            for directory in self.split_path_list(path_list):
                if self._primitives.is_file(join(directory, name)):
                    logger.debug(f"Found {name!r} in {directory!r}")
                    return directory
        return None

    def parse_ld_so_conf(self, conf_file: str) -> List[str]:
        """
        Parse a dynamic linker configuration file for library directories.

        Comments are stripped, 'include' directives are expanded as file
        masks (relative to the including file) and parsed recursively.
        Files that cannot be read, and include masks whose directory cannot
        be listed, contribute no directories.

        Args:
            conf_file: Path to the configuration file

        Returns:
            Library directories in file order
        """
        return self._parse_ld_so_conf(conf_file, set())

    def _parse_ld_so_conf(self, conf_file: str, seen: Set[str]) -> List[str]:
        conf_file = normalize(conf_file)
        if conf_file in seen:
            return []
        seen.add(conf_file)

        try:
            lines = self._primitives.read_text(conf_file).splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Ignoring linker configuration {conf_file!r}: {e}")
            return []

        dirs: List[str] = []
        for line in lines:
            line = line.split("#", 1)[0].strip()
            if not line:
                continue

            words = line.split(None, 1)
            if words[0] == "include" and len(words) == 2:
                mask = words[1].strip()
                if not is_absolute(mask):
                    mask = join(get_directory(conf_file), mask)
                try:
                    included_files = self._matcher.match_files(mask)
                except MatchError as e:
                    logger.debug(f"Skipping include {mask!r} in {conf_file!r}: {e}")
                    continue
                for included in included_files:
                    dirs.extend(self._parse_ld_so_conf(included, seen))
            elif words[0] in ("include", "hwcap"):
                logger.debug(f"Skipping directive in {conf_file!r}: {line!r}")
            else:
                dirs.append(line)

        return dirs

    def _library_conventions(self) -> Tuple[List[str], List[Optional[str]]]:
        """Assemble name formats and the search path for the current OS."""
        if self._probe.is_os("windows"):
            return ["{}.dll", "{}"], [self._primitives.getenv("PATH")]

        if self._probe.is_os("haiku"):
            return ["lib{}.so", "{}.so"], [self._primitives.getenv("LIBRARY_PATH")]

        search_path: List[Optional[str]]
        if self._probe.is_os("macosx"):
            formats = ["lib{}.dylib", "{}.dylib"]
            search_path = [self._primitives.getenv("DYLD_LIBRARY_PATH")]
        else:
            formats = ["lib{}.so", "{}.so"]
            search_path = [self._primitives.getenv("LD_LIBRARY_PATH")]
            search_path.extend(self.parse_ld_so_conf(self.ld_so_conf))

        formats.append("{}")
        if self._probe.is_64bit():
            search_path.append(LIBRARY_DIRS_64BIT)
        search_path.append(LIBRARY_DIRS)
        return formats, search_path

    def find_library(self, libname: str) -> Optional[str]:
        """
        Scan the well-known system locations for a library.

        Each name format is tried against the entire search path before
        moving on to the next format.

        Args:
            libname: Logical library name (e.g. 'z' for libz.so)

        Returns:
            Path to the library file, or None if not found
        """
        formats, search_path = self._library_conventions()

        for fmt in formats:
            name = fmt.format(libname)
            directory = self.path_search(name, *search_path)
            if directory:
                return join(directory, name)

        logger.debug(f"Library {libname!r} not found")
        return None

    def locate(self, *names: str) -> Optional[str]:
        """
        Locate a file on the script search paths.

        Looks at, in order: the name as a direct path, the configured
        script path, the search environment variable, and the directory of
        the running executable.

        Args:
            *names: Candidate file names; the first one found wins

        Returns:
            Path to the file, or None if none was found
        """
        for fname in names:
            if self._primitives.is_file(fname):
                return fname

            directory = self.path_search(
                fname,
                self.scripts,
                self._primitives.getenv(self.search_env),
                get_directory(self._primitives.executable_path()),
            )
            if directory:
                return join(directory, fname)

        return None


__all__ = [
    "DEFAULT_LD_SO_CONF",
    "DEFAULT_SEARCH_ENV",
    "PathSearch",
]
