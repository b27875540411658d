"""
Platform identification for buildfs.

This module identifies the host operating system and word size so that
library searches and script helpers can pick platform-specific names and
default locations.

Features:
- Operating system id detection (windows, macosx, linux, bsd, solaris, haiku, aix, hurd)
- User override of the OS id (the --os flag / 'os' config key)
- Case-insensitive OS checks
- 64-bit host detection with per-probe caching
- Descriptive PlatformInfo for diagnostics (architecture, release, Linux distribution)

Usage:
    from buildfs.core.platform import PlatformProbe

    probe = PlatformProbe(primitives)
    if probe.is_os("windows"):
        ...
    if probe.is_64bit():
        ...
"""

import logging
import platform
import threading
from dataclasses import dataclass
from typing import Optional

import distro

from buildfs.core.interfaces import FilesystemPrimitives

logger = logging.getLogger(__name__)


# Known 64-bit architecture identifiers, matched as substrings
HOST_TYPES_64BIT = (
    "x86_64",
    "ia64",
    "amd64",
    "ppc64",
    "powerpc64",
    "sparc64",
)

_SYSTEM_IDS = {
    "windows": "windows",
    "darwin": "macosx",
    "linux": "linux",
    "freebsd": "bsd",
    "netbsd": "bsd",
    "openbsd": "bsd",
    "dragonfly": "bsd",
    "sunos": "solaris",
    "haiku": "haiku",
    "aix": "aix",
    "gnu": "hurd",
}


@dataclass
class PlatformInfo:
    """
    Descriptive platform information.

    Attributes:
        os: OS id ('windows', 'macosx', 'linux', 'bsd', ...)
        arch: Machine architecture as reported by the OS (e.g. 'x86_64')
        release: OS release string
        distribution: Linux distribution id ('ubuntu', 'fedora', ...) or empty
        is_64bit: Whether the host is 64-bit
    """

    os: str
    arch: str
    release: str
    distribution: str
    is_64bit: bool

    def __str__(self) -> str:
        """String representation of platform info."""
        parts = [f"{self.os}-{self.arch}"]
        if self.distribution:
            parts.append(f"({self.distribution})")
        parts.append(f"v{self.release}")
        parts.append("[64-bit]" if self.is_64bit else "[32-bit]")
        return " ".join(parts)


def detect_host_os() -> str:
    """
    Detect the host operating system id.

    Returns:
        OS id: 'windows', 'macosx', 'linux', 'bsd', 'solaris', 'haiku',
        'aix', 'hurd', or the lowercased system name for anything else

    Example:
        >>> detect_host_os()
        'linux'
    """
    system = platform.system().lower()
    if system.startswith(("cygwin", "msys", "mingw")):
        return "windows"
    return _SYSTEM_IDS.get(system, system)


def _detect_distribution() -> str:
    """
    Detect Linux distribution.

    Returns:
        Distribution ID: 'ubuntu', 'centos', 'arch', etc., or empty string
    """
    return distro.id()


class PlatformProbe:
    """
    Host OS and word-size probe.

    The 64-bit answer is computed once per probe and never recomputed; an
    engine owns a single probe so the answer is stable for its lifetime.

    Example:
        >>> probe = PlatformProbe(NativeFilesystem())
        >>> probe.os_id()
        'linux'
        >>> probe.is_os("Linux")
        True
    """

    def __init__(
        self,
        primitives: FilesystemPrimitives,
        os_override: Optional[str] = None,
        host_os: Optional[str] = None,
    ):
        """
        Initialize platform probe.

        Args:
            primitives: Primitives used for environment reads and shell probes
            os_override: OS id to report instead of the host's
            host_os: Host OS id (detected if None)
        """
        self._primitives = primitives
        self._os_override = os_override
        self._host_os = host_os or detect_host_os()
        self._is_64bit: Optional[bool] = None
        self._lock = threading.Lock()

    @property
    def host_os(self) -> str:
        """The real host OS id, ignoring any override."""
        return self._host_os

    def os_id(self) -> str:
        """
        Get the current operating system id.

        Returns:
            The override if one was configured, else the host OS id
        """
        return self._os_override or self._host_os

    def is_os(self, os_id: str) -> bool:
        """
        Check the current operating system id, case-insensitively.

        Args:
            os_id: OS id to compare against

        Returns:
            True if os_id names the current operating system
        """
        return self.os_id().lower() == os_id.lower()

    def is_64bit(self) -> bool:
        """
        Determine whether the host is running a 64-bit architecture.

        The native capability check is trusted first; otherwise an
        OS-appropriate architecture string is inspected. The answer is
        cached for the lifetime of the probe.

        Returns:
            True on a 64-bit host
        """
        with self._lock:
            if self._is_64bit is None:
                self._is_64bit = self._probe_64bit()
                logger.debug(f"64-bit host: {self._is_64bit}")
            return self._is_64bit

    def _probe_64bit(self) -> bool:
        if self._primitives.native_is_64bit():
            return True

        arch = self._host_architecture()
        if not arch:
            return False

        arch = arch.lower()
        return any(host_type in arch for host_type in HOST_TYPES_64BIT)

    def _host_architecture(self) -> str:
        """Read the architecture string for the real host OS."""
        try:
            if self._host_os == "windows":
                return self._primitives.getenv("PROCESSOR_ARCHITECTURE") or ""
            elif self._host_os == "macosx":
                return self._primitives.output_of("echo $HOSTTYPE")
            else:
                return self._primitives.output_of("uname -m")
        except OSError as e:
            logger.debug(f"Architecture probe failed: {e}")
            return ""

    def platform_info(self) -> PlatformInfo:
        """
        Collect descriptive platform information.

        Returns:
            PlatformInfo for the current OS id
        """
        os_id = self.os_id()
        distribution = _detect_distribution() if self._host_os == "linux" else ""

        return PlatformInfo(
            os=os_id,
            arch=platform.machine().lower(),
            release=platform.release(),
            distribution=distribution,
            is_64bit=self.is_64bit(),
        )


__all__ = [
    "HOST_TYPES_64BIT",
    "PlatformInfo",
    "PlatformProbe",
    "detect_host_os",
]
