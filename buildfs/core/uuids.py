"""
UUID generation with collision bookkeeping.

Project generators derive identifiers from names (project names, file
paths) so that regenerated files stay stable. UUIDRegistry remembers which
name produced each identifier and warns once when two different names
produce the same one.
"""

import threading
from typing import Dict, Optional

from buildfs.core.diagnostics import Diagnostics
from buildfs.core.interfaces import FilesystemPrimitives


class UUIDRegistry:
    """
    Identifier-to-name registry.

    Example:
        >>> registry = UUIDRegistry(primitives, diagnostics)
        >>> registry.generate("MyProject")
        'C8E2A5F2-...'
    """

    def __init__(
        self,
        primitives: FilesystemPrimitives,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self._primitives = primitives
        self._diagnostics = diagnostics or Diagnostics()
        self._names: Dict[str, str] = {}
        self._lock = threading.Lock()

    def generate(self, name: Optional[str] = None) -> str:
        """
        Generate a UUID.

        Args:
            name: Name the identifier is derived from; when given, the
                mapping is recorded and clashes with a different name are
                reported once per identifier

        Returns:
            Uppercase UUID string
        """
        uuid = self._primitives.uuid(name)
        if name is None:
            return uuid

        with self._lock:
            previous = self._names.get(uuid)
            self._names[uuid] = name

        if previous is not None and previous != name:
            self._diagnostics.warn_once(
                uuid, "UUID clash between %s and %s", previous, name
            )

        return uuid

    def name_of(self, uuid: str) -> Optional[str]:
        """Return the latest name recorded for an identifier."""
        with self._lock:
            return self._names.get(uuid)


__all__ = [
    "UUIDRegistry",
]
