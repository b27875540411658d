"""
Unit tests for the path-normalizing adapter and native primitives.
"""

import stat
import sys

import pytest

from buildfs.core.adapters import NormalizingFilesystem
from buildfs.core.primitives import NativeFilesystem
from tests.fixtures.filesystem import FakeFilesystem


class TestNormalizingFilesystem:
    """Tests for NormalizingFilesystem."""

    @pytest.fixture
    def adapter(self, fake_fs):
        fake_fs.add_file("src/a.c")
        return NormalizingFilesystem(fake_fs)

    def test_paths_normalized(self, adapter, fake_fs):
        """Test that path arguments reach the base normalized."""
        assert adapter.is_file("src\\a.c")
        assert adapter.is_dir("./src//")
        assert adapter.list_dir("src/sub/..")[0].name == "a.c"

        assert ("is_file", "src/a.c") in fake_fs.calls
        assert ("is_dir", "src") in fake_fs.calls
        assert ("list_dir", "src") in fake_fs.calls

    def test_mutations_normalized(self, adapter, fake_fs):
        adapter.mkdir("out\\obj\\..")
        adapter.rmdir("./out/")
        adapter.remove("src//a.c")

        assert ("mkdir", "out") in fake_fs.calls
        assert ("rmdir", "out") in fake_fs.calls
        assert ("remove", "src/a.c") in fake_fs.calls

    def test_stat(self, adapter):
        assert stat.S_ISREG(adapter.stat("src\\a.c").st_mode)

    def test_read_text(self, adapter, fake_fs):
        fake_fs.add_file("etc/ld.so.conf", "/opt/lib\n")

        assert adapter.read_text("./etc\\ld.so.conf") == "/opt/lib\n"
        assert ("read_text", "etc/ld.so.conf") in fake_fs.calls

    def test_commands_not_normalized(self, adapter, fake_fs):
        """Test that shell commands pass through untouched."""
        adapter.execute("make -C .\\build")
        adapter.output_of("ls ./src//")

        assert ("execute", "make -C .\\build") in fake_fs.calls
        assert ("output_of", "ls ./src//") in fake_fs.calls

    def test_passthrough(self):
        fs = FakeFilesystem(env={"HOME": "/home/dev"}, native_64bit=True)
        adapter = NormalizingFilesystem(fs)

        assert adapter.base is fs
        assert adapter.getenv("HOME") == "/home/dev"
        assert adapter.native_is_64bit()
        assert adapter.uuid("x") == "UUID-x"
        assert adapter.executable_path() == "/opt/buildfs/bin/buildfs"


class TestNativeFilesystem:
    """Tests for NativeFilesystem on a real tree."""

    def test_list_dir_sorted(self, tmp_path):
        for name in ("b.c", "a.c", "C.h"):
            (tmp_path / name).write_text("")
        (tmp_path / "sub").mkdir()

        entries = NativeFilesystem().list_dir(str(tmp_path))

        assert [e.name for e in entries] == ["C.h", "a.c", "b.c", "sub"]
        assert [e.is_dir for e in entries] == [False, False, False, True]

    def test_current_directory(self, source_tree):
        fs = NativeFilesystem()
        assert [e.name for e in fs.list_dir("")] == ["src"]
        assert fs.is_dir("")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX symlinks")
    def test_symlinks_listed_as_files(self, tmp_path):
        """Test that links to directories are not reported as directories."""
        (tmp_path / "real").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "real", target_is_directory=True)
        (tmp_path / "dangling").symlink_to(tmp_path / "missing")

        entries = {e.name: e for e in NativeFilesystem().list_dir(str(tmp_path))}

        assert entries["real"].is_dir
        assert entries["link"].is_file and not entries["link"].is_dir
        assert entries["dangling"].is_file

    def test_read_text(self, tmp_path):
        (tmp_path / "ld.so.conf").write_text("/opt/one\n")
        fs = NativeFilesystem()

        assert fs.read_text(str(tmp_path / "ld.so.conf")) == "/opt/one\n"
        with pytest.raises(FileNotFoundError):
            fs.read_text(str(tmp_path / "missing"))

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            NativeFilesystem().list_dir(str(tmp_path / "missing"))

    def test_mkdir_rmdir_remove(self, tmp_path):
        fs = NativeFilesystem()
        target = tmp_path / "out"

        fs.mkdir(str(target))
        assert fs.is_dir(str(target))
        with pytest.raises(FileExistsError):
            fs.mkdir(str(target))

        (target / "a.o").write_text("")
        fs.remove(str(target / "a.o"))
        fs.rmdir(str(target))
        assert not target.exists()

    def test_native_word_size(self):
        assert NativeFilesystem().native_is_64bit() == (sys.maxsize > 2**32)

    def test_getenv(self, monkeypatch):
        monkeypatch.setenv("BUILDFS_TEST_VAR", "value")
        monkeypatch.delenv("BUILDFS_TEST_MISSING", raising=False)

        fs = NativeFilesystem()
        assert fs.getenv("BUILDFS_TEST_VAR") == "value"
        assert fs.getenv("BUILDFS_TEST_MISSING") is None

    def test_executable_path(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["/opt/tools/buildfs"])
        assert NativeFilesystem().executable_path().endswith("/opt/tools/buildfs")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell")
    def test_shell_commands(self):
        fs = NativeFilesystem()

        assert fs.output_of("echo hello").strip() == "hello"
        assert fs.execute("exit 3") == 3
