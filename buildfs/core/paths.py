"""
Path string helpers for buildfs.

All paths handled by the engine use forward slashes internally. These
helpers operate purely on strings and never touch the filesystem:

- normalize(): canonical separators, no redundant segments
- join(): join two path strings, respecting absolute right-hand sides
- get_directory(): directory portion of a path
- is_absolute(): absolute path test (POSIX roots, drive letters, UNC)
- wildcards(): compile a wildcard mask into a regular expression

Usage:
    from buildfs.core.paths import normalize, wildcards

    mask = normalize("src\\\\**.c")      # 'src/**.c'
    pattern = wildcards(mask)
    pattern.fullmatch("src/sub/c.c")      # match
"""

import re
from typing import Pattern

# Captures '**' before '*' so the recursive token wins
_WILDCARD_TOKENS = re.compile(r"(\*\*|\*)")
_DRIVE = re.compile(r"^[A-Za-z]:")


def normalize(p: str) -> str:
    """
    Normalize a path string.

    Converts backslashes to forward slashes, collapses repeated separators,
    drops '.' segments, folds 'dir/..' pairs and strips trailing separators.
    Leading '..' segments and wildcard tokens are preserved.

    Args:
        p: Path or mask to normalize

    Returns:
        Normalized path string

    Example:
        >>> normalize("./src//sub/../*.c")
        'src/*.c'
    """
    if not p:
        return p

    p = p.replace("\\", "/")

    prefix = ""
    if p.startswith("//"):
        # UNC share keeps its double slash
        prefix = "//"
        p = p[2:]
    elif p.startswith("/"):
        prefix = "/"
        p = p[1:]

    parts = []
    for part in p.split("/"):
        if part == "" or part == ".":
            continue
        if part == ".." and parts and parts[-1] != ".." and "*" not in parts[-1]:
            parts.pop()
            continue
        if part == ".." and not parts and prefix:
            # Cannot go above the root
            continue
        parts.append(part)

    result = prefix + "/".join(parts)
    if not result:
        return "."
    return result


def join(leading: str, trailing: str) -> str:
    """
    Join two path strings.

    An empty or '.' leading part yields the trailing part unchanged, and an
    absolute trailing part replaces the leading one.

    Example:
        >>> join("src", "a.c")
        'src/a.c'
        >>> join("", "a.c")
        'a.c'
    """
    if not trailing:
        return leading
    if not leading or leading == "." or is_absolute(trailing):
        return trailing
    if leading.endswith("/"):
        return leading + trailing
    return f"{leading}/{trailing}"


def get_directory(p: str) -> str:
    """
    Return the directory portion of a path.

    Returns '.' when the path has no separator, and '/' for entries
    directly below the root.

    Example:
        >>> get_directory("src/sub/a.c")
        'src/sub'
        >>> get_directory("a.c")
        '.'
    """
    i = p.rfind("/")
    if i < 0:
        return "."
    if i == 0:
        return "/"
    return p[:i]


def is_absolute(p: str) -> bool:
    """Check whether a path is absolute (root, UNC, drive letter or $ variable)."""
    if not p:
        return False
    if p[0] in ("/", "\\", "$"):
        return True
    return bool(_DRIVE.match(p))


def is_drive(part: str) -> bool:
    """Check whether a single path segment is a bare drive marker such as 'C:'."""
    return bool(_DRIVE.match(part)) and len(part) == 2


def wildcards(mask: str, case_sensitive: bool = True) -> Pattern[str]:
    """
    Compile a wildcard mask into a regular expression.

    '**' matches any run of characters including separators, '*' matches
    any run of characters within one path segment. Everything else is
    matched literally. Use fullmatch() against a candidate path.

    Args:
        mask: Normalized wildcard mask
        case_sensitive: False to compile with re.IGNORECASE

    Returns:
        Compiled pattern

    Example:
        >>> wildcards("src/*.c").fullmatch("src/a.c") is not None
        True
        >>> wildcards("src/*.c").fullmatch("src/sub/c.c") is None
        True
    """
    pieces = []
    for token in _WILDCARD_TOKENS.split(mask):
        if token == "**":
            pieces.append(".*")
        elif token == "*":
            pieces.append("[^/]*")
        elif token:
            pieces.append(re.escape(token))

    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile("".join(pieces), flags)


__all__ = [
    "normalize",
    "join",
    "get_directory",
    "is_absolute",
    "is_drive",
    "wildcards",
]
