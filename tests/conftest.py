"""
Pytest configuration and shared fixtures for buildfs tests.
"""

import pytest
import tempfile
from pathlib import Path
from typing import Generator

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.trees import source_tree
from tests.fixtures.filesystem import FakeFilesystem

from buildfs.config.parser import EngineConfig
from buildfs.engine import FilesystemEngine


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as pure unit tests (no filesystem walk)"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    """Create an empty in-memory filesystem."""
    return FakeFilesystem()


@pytest.fixture
def engine(temp_dir: Path) -> FilesystemEngine:
    """Create an engine on the real filesystem with no linker configuration."""
    config = EngineConfig(ld_so_conf=str(temp_dir / "missing-ld.so.conf"))
    return FilesystemEngine(config)
