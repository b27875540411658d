"""
Wildcard matching over the filesystem.

GlobMatcher turns a wildcard mask into a bounded recursive directory walk.
Use "*" to match any part of a file or directory name and "**" to recurse
into subdirectories:

    matcher = GlobMatcher(primitives)
    matcher.match_files("src/**.c")   # ['src/a.c', 'src/b.c', 'src/sub/c.c']
    matcher.match_files("src/*.c")    # ['src/a.c', 'src/b.c']
    matcher.match_dirs("src/*")       # ['src/sub']

Results are returned in listing order, each directory's own matches before
those of its subdirectories, and never contain duplicates.

Exclude rules are regular expressions searched against a single entry
name (not a full path):

- The directory rule filters directories from results and prunes descent.
  By default it rejects hidden directories (names starting with '.').
- The file rule filters files from results. By default it rejects nothing.
"""

import logging
import re
from typing import List, Optional, Pattern, Union

from buildfs.core.exceptions import MatchError
from buildfs.core.interfaces import DirEntry, FilesystemPrimitives
from buildfs.core.paths import get_directory, join, normalize, wildcards

logger = logging.getLogger(__name__)

ExcludeRule = Union[str, Pattern[str], None]

DEFAULT_EXCLUDE_DIRS = r"^\."

# Never matches; pass as a rule to disable excluding
MATCH_NOTHING = re.compile(r"(?!)")

_MARKERS = (".", "..")


def compile_rule(rule: ExcludeRule) -> Optional[Pattern[str]]:
    """
    Compile an exclude rule.

    Args:
        rule: Regex string, compiled pattern or None

    Returns:
        Compiled pattern, or None for a rule that rejects nothing

    Raises:
        re.error: If a string rule is not a valid regular expression
    """
    if rule is None:
        return None
    if isinstance(rule, str):
        return re.compile(rule)
    return rule


def _excluded(rule: Optional[Pattern[str]], name: str) -> bool:
    return rule is not None and rule.search(name) is not None


class GlobMatcher:
    """
    Compiles wildcard masks and walks the filesystem for matches.

    Attributes:
        case_sensitive: Whether masks are compiled case-sensitively
    """

    def __init__(
        self,
        primitives: FilesystemPrimitives,
        case_sensitive: bool = True,
        exclude_dirs: ExcludeRule = DEFAULT_EXCLUDE_DIRS,
        exclude_files: ExcludeRule = None,
    ):
        """
        Initialize matcher.

        Args:
            primitives: Filesystem primitives to list directories with
            case_sensitive: False to match masks case-insensitively
            exclude_dirs: Directory exclude rule used when a call passes None
            exclude_files: File exclude rule used when a call passes None
        """
        self._primitives = primitives
        self.case_sensitive = case_sensitive
        self._default_exclude_dirs = compile_rule(exclude_dirs)
        self._default_exclude_files = compile_rule(exclude_files)

    def match(
        self,
        mask: str,
        match_files: bool,
        exclude_dirs: ExcludeRule = None,
        exclude_files: ExcludeRule = None,
    ) -> List[str]:
        """
        Perform a wildcard search for files or directories.

        Args:
            mask: The search pattern. Use "*" to match any part of a file or
                directory name, "**" to recurse into subdirectories.
            match_files: True to match files, False to match directories.
            exclude_dirs: Directories whose name matches are discarded both
                from results and from recursive descent. None selects the
                default (hidden directories). Pass MATCH_NOTHING to keep all.
            exclude_files: Files whose name matches are discarded from
                results. None selects the default (nothing is excluded).

        Returns:
            Matched paths, in listing order, parents before children

        Raises:
            MatchError: If the base directory exists but cannot be listed
        """
        if exclude_dirs is None:
            dir_rule = self._default_exclude_dirs
        else:
            dir_rule = compile_rule(exclude_dirs)
        if exclude_files is None:
            file_rule = self._default_exclude_files
        else:
            file_rule = compile_rule(exclude_files)

        mask = normalize(mask)

        # Everything up to the first wildcard decides where the walk starts
        basedir = mask
        starpos = mask.find("*")
        if starpos >= 0:
            basedir = mask[:starpos]
        basedir = get_directory(basedir)
        if basedir == ".":
            basedir = ""

        recurse = "**" in mask
        pattern = wildcards(mask, self.case_sensitive)

        logger.debug(
            f"Matching {mask!r} from {basedir or '.'!r} "
            f"(files={match_files}, recurse={recurse})"
        )

        result: List[str] = []
        self._walk(
            basedir,
            pattern,
            match_files,
            dir_rule,
            file_rule,
            recurse,
            result,
            is_base=True,
        )
        return result

    def match_dirs(self, mask: str) -> List[str]:
        """
        Perform a wildcard search for directories.

        Args:
            mask: The search pattern. Use "*" to match any part of a
                directory name, "**" to recurse into subdirectories.

        Returns:
            Matched directory paths
        """
        return self.match(mask, False)

    def match_files(self, mask: str) -> List[str]:
        """
        Perform a wildcard search for files.

        Args:
            mask: The search pattern. Use "*" to match any part of a file
                name, "**" to recurse into subdirectories.

        Returns:
            Matched file paths
        """
        return self.match(mask, True)

    def _walk(
        self,
        directory: str,
        pattern: Pattern[str],
        match_files: bool,
        dir_rule: Optional[Pattern[str]],
        file_rule: Optional[Pattern[str]],
        recurse: bool,
        result: List[str],
        is_base: bool = False,
    ) -> None:
        # Selection pass: entries of the requested kind that survive their
        # exclude rule and match the full mask
        for entry in self._list(directory, is_base):
            if match_files:
                if not entry.is_file or _excluded(file_rule, entry.name):
                    continue
            else:
                if not entry.is_dir or _excluded(dir_rule, entry.name):
                    continue

            fname = join(directory, entry.name)
            if pattern.fullmatch(fname):
                result.append(fname)

        if not recurse:
            return

        # Recursion pass: descend into every directory not pruned by the rule
        for entry in self._list(directory, False):
            if not entry.is_dir or entry.name in _MARKERS:
                continue
            if _excluded(dir_rule, entry.name):
                continue
            self._walk(
                join(directory, entry.name),
                pattern,
                match_files,
                dir_rule,
                file_rule,
                recurse,
                result,
            )

    def _list(self, directory: str, is_base: bool) -> List[DirEntry]:
        try:
            return self._primitives.list_dir(directory)
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as e:
            if is_base:
                raise MatchError(
                    f"Cannot open directory {directory or '.'!r}: {e.strerror or e}",
                    path=directory or ".",
                    cause=e.strerror or str(e),
                ) from e
            logger.debug(f"Skipping unreadable directory {directory!r}: {e}")
            return []


__all__ = [
    "DEFAULT_EXCLUDE_DIRS",
    "MATCH_NOTHING",
    "ExcludeRule",
    "GlobMatcher",
    "compile_rule",
]
