"""
Diagnostic sinks for buildfs.

Warnings and errors raised by the engine are routed through logging. The
one-time warning sink remembers which keys already fired so a repeated
condition (for example the same UUID clash) is reported once.
"""

import logging
import threading
from typing import Set

logger = logging.getLogger(__name__)


class Diagnostics:
    """
    Warning and error sink.

    Example:
        >>> diagnostics = Diagnostics()
        >>> diagnostics.warn_once("key", "something happened to %s", "x")
        True
        >>> diagnostics.warn_once("key", "something happened to %s", "x")
        False
    """

    def __init__(self, log: logging.Logger = logger):
        self._log = log
        self._warned: Set[str] = set()
        self._lock = threading.Lock()

    def warn(self, msg: str, *args) -> None:
        """Emit a warning."""
        self._log.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        """Emit an error diagnostic."""
        self._log.error(msg, *args)

    def warn_once(self, key: str, msg: str, *args) -> bool:
        """
        Emit a warning the first time a key is seen.

        Args:
            key: Identifier the warning is keyed by
            msg: Message format string (logging %-style)
            *args: Format arguments

        Returns:
            True if the warning was emitted, False if already emitted for key
        """
        with self._lock:
            if key in self._warned:
                return False
            self._warned.add(key)

        self._log.warning(msg, *args)
        return True

    def has_warned(self, key: str) -> bool:
        """Check whether a one-time warning already fired for key."""
        with self._lock:
            return key in self._warned


__all__ = [
    "Diagnostics",
]
