"""Test fixtures for buildfs tests.

Fixtures are organized by type:

- filesystem: FakeFilesystem, in-memory FilesystemPrimitives
- trees: source trees on the real filesystem

Import them in your tests using:
    from tests.fixtures.filesystem import FakeFilesystem
"""

__all__ = [
    "filesystem",
    "trees",
]
