"""
Unit tests for UUID generation, collision bookkeeping and diagnostics.
"""

import logging
import re

import pytest

from buildfs.core.diagnostics import Diagnostics
from buildfs.core.primitives import NativeFilesystem
from buildfs.core.uuids import UUIDRegistry
from tests.fixtures.filesystem import FakeFilesystem

UUID_FORMAT = re.compile(r"^[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}$")


@pytest.fixture
def clashing_fs() -> FakeFilesystem:
    """Filesystem whose identifiers all collide."""
    fs = FakeFilesystem()
    fs.fixed_uuid = "00000000-0000-0000-0000-000000000001"
    return fs


class TestNativeUUIDs:
    """Tests for identifiers from the native primitives."""

    def test_named_is_stable(self):
        registry = UUIDRegistry(NativeFilesystem())

        first = registry.generate("MyProject")
        assert first == registry.generate("MyProject")
        assert UUID_FORMAT.match(first)

    def test_different_names_differ(self):
        registry = UUIDRegistry(NativeFilesystem())
        assert registry.generate("A") != registry.generate("B")

    def test_unnamed_is_random(self):
        registry = UUIDRegistry(NativeFilesystem())

        first = registry.generate()
        assert UUID_FORMAT.match(first)
        assert first != registry.generate()


class TestCollisions:
    """Tests for clash reporting."""

    def test_same_name_never_warns(self, clashing_fs, caplog):
        registry = UUIDRegistry(clashing_fs)

        with caplog.at_level(logging.WARNING):
            registry.generate("A")
            registry.generate("A")

        assert caplog.records == []

    def test_clash_warns_once(self, clashing_fs, caplog):
        """Test that alternating names on one identifier warn a single time."""
        registry = UUIDRegistry(clashing_fs)

        with caplog.at_level(logging.WARNING):
            registry.generate("B")
            registry.generate("A")
            registry.generate("A")
            registry.generate("B")

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].getMessage() == "UUID clash between B and A"

    def test_latest_name_recorded(self, clashing_fs):
        registry = UUIDRegistry(clashing_fs)

        uuid = registry.generate("B")
        registry.generate("A")

        assert registry.name_of(uuid) == "A"

    def test_unnamed_not_recorded(self, clashing_fs, caplog):
        registry = UUIDRegistry(clashing_fs)

        with caplog.at_level(logging.WARNING):
            uuid = registry.generate()
            registry.generate("A")

        assert registry.name_of(uuid) == "A"
        assert caplog.records == []

    def test_unknown_identifier(self, fake_fs):
        assert UUIDRegistry(fake_fs).name_of("nope") is None

    def test_shared_diagnostics(self, clashing_fs):
        """Test that the clash is keyed by identifier in the diagnostics sink."""
        diagnostics = Diagnostics()
        registry = UUIDRegistry(clashing_fs, diagnostics)

        registry.generate("A")
        registry.generate("B")

        assert diagnostics.has_warned(clashing_fs.fixed_uuid)


class TestDiagnostics:
    """Tests for the diagnostics sink."""

    def test_warn_once(self, caplog):
        diagnostics = Diagnostics()

        with caplog.at_level(logging.WARNING):
            assert diagnostics.warn_once("key", "disk %s is full", "C")
            assert not diagnostics.warn_once("key", "disk %s is full", "C")

        assert [r.getMessage() for r in caplog.records] == ["disk C is full"]

    def test_warn_and_error(self, caplog):
        diagnostics = Diagnostics(logging.getLogger("buildfs.test"))

        with caplog.at_level(logging.WARNING):
            diagnostics.warn("first %d", 1)
            diagnostics.error("second %d", 2)

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("WARNING", "first 1"),
            ("ERROR", "second 2"),
        ]
        assert caplog.records[0].name == "buildfs.test"
