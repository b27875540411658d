"""
Unit tests for the path string helpers.

Tests cover:
- Normalization of separators and redundant segments
- Joining and directory extraction
- Absolute path and drive detection
- Wildcard mask compilation
"""

import pytest

from buildfs.core.paths import (
    normalize,
    join,
    get_directory,
    is_absolute,
    is_drive,
    wildcards,
)


class TestNormalize:
    """Tests for normalize()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("src/a.c", "src/a.c"),
            ("src\\sub\\a.c", "src/sub/a.c"),
            ("src//sub///a.c", "src/sub/a.c"),
            ("./src/./a.c", "src/a.c"),
            ("src/sub/../a.c", "src/a.c"),
            ("../src/a.c", "../src/a.c"),
            ("../../a", "../../a"),
            ("src/", "src"),
            ("/usr/lib/", "/usr/lib"),
            ("/", "/"),
            ("/..", "/"),
            (".", "."),
            ("./", "."),
            ("a/..", "."),
            ("C:\\Work\\src", "C:/Work/src"),
            ("\\\\server\\share\\dir", "//server/share/dir"),
        ],
    )
    def test_normalize(self, raw, expected):
        """Test normalization of separators and segments."""
        assert normalize(raw) == expected

    def test_empty_string_unchanged(self):
        """Test that an empty path stays empty."""
        assert normalize("") == ""

    def test_wildcards_preserved(self):
        """Test that wildcard tokens survive normalization."""
        assert normalize("src\\**.c") == "src/**.c"
        assert normalize("./src/*/x.c") == "src/*/x.c"

    def test_parent_of_wildcard_not_folded(self):
        """Test that '..' after a wildcard segment is kept."""
        assert normalize("src/*/../a.c") == "src/*/../a.c"


class TestJoin:
    """Tests for join()."""

    def test_join_relative(self):
        """Test joining two relative parts."""
        assert join("src", "a.c") == "src/a.c"

    def test_join_empty_leading(self):
        """Test that an empty leading part yields the trailing part."""
        assert join("", "a.c") == "a.c"
        assert join(".", "a.c") == "a.c"

    def test_join_root(self):
        """Test joining below the root directory."""
        assert join("/", "usr") == "/usr"

    def test_join_absolute_trailing(self):
        """Test that an absolute trailing part wins."""
        assert join("src", "/usr/lib") == "/usr/lib"

    def test_join_empty_trailing(self):
        """Test that an empty trailing part yields the leading part."""
        assert join("src", "") == "src"


class TestGetDirectory:
    """Tests for get_directory()."""

    def test_nested(self):
        assert get_directory("src/sub/a.c") == "src/sub"

    def test_no_separator(self):
        assert get_directory("a.c") == "."

    def test_below_root(self):
        assert get_directory("/usr") == "/"

    def test_trailing_separator(self):
        assert get_directory("src/") == "src"


class TestIsAbsolute:
    """Tests for is_absolute() and is_drive()."""

    @pytest.mark.parametrize(
        "path", ["/usr/lib", "\\Windows", "C:/Work", "c:", "$(SolutionDir)"]
    )
    def test_absolute(self, path):
        assert is_absolute(path)

    @pytest.mark.parametrize("path", ["", "src", "./src", "../src", "a.c"])
    def test_relative(self, path):
        assert not is_absolute(path)

    def test_is_drive(self):
        assert is_drive("C:")
        assert not is_drive("C:/")
        assert not is_drive("src")


class TestWildcards:
    """Tests for wildcards()."""

    def test_single_star_stays_in_segment(self):
        """Test that '*' does not cross separators."""
        pattern = wildcards("src/*.c")
        assert pattern.fullmatch("src/a.c")
        assert not pattern.fullmatch("src/sub/c.c")

    def test_double_star_crosses_segments(self):
        """Test that '**' matches across separators."""
        pattern = wildcards("src/**.c")
        assert pattern.fullmatch("src/a.c")
        assert pattern.fullmatch("src/sub/deep/c.c")
        assert not pattern.fullmatch("src/a.h")

    def test_literal_characters_escaped(self):
        """Test that regex metacharacters in masks are literal."""
        pattern = wildcards("lib/a+b(1).c")
        assert pattern.fullmatch("lib/a+b(1).c")
        assert not pattern.fullmatch("lib/aab1.c")

    def test_dot_is_literal(self):
        """Test that '.' in a mask only matches a dot."""
        assert not wildcards("*.c").fullmatch("abc")

    def test_full_match_required(self):
        """Test that a prefix match is not enough."""
        assert not wildcards("src/a").fullmatch("src/a.c")

    def test_case_insensitive(self):
        """Test case-insensitive compilation."""
        assert wildcards("SRC/*.C", case_sensitive=False).fullmatch("src/a.c")
        assert not wildcards("SRC/*.C").fullmatch("src/a.c")
