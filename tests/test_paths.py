"""
Tests for path resolution.
"""

import os

import pytest

from file_manager.paths import is_direct_child, parent, resolve


class TestResolve:
    """Test cases for resolve()."""

    @pytest.mark.parametrize(
        "fragment, expected",
        [
            ("docs", "/home/user/docs"),
            ("./docs", "/home/user/docs"),
            ("..", "/home"),
            ("../../..", "/"),
            ("a//b/./c/..", "/home/user/a/b"),
        ],
    )
    def test_relative_fragment_is_joined_and_normalised(self, fragment, expected):
        result = resolve("/home/user", fragment)
        assert result == expected
        assert os.path.isabs(result)

    @pytest.mark.parametrize("fragment", ["/etc", "/tmp/../var", "/a//b/"])
    def test_absolute_fragment_passes_through_unchanged(self, fragment):
        assert resolve("/home/user", fragment) == fragment


class TestParent:
    """Test cases for parent()."""

    def test_parent_of_nested(self):
        assert parent("/home/user") == "/home"

    def test_parent_of_root_is_root(self):
        assert parent("/") == "/"

    def test_parent_does_not_require_existence(self):
        assert parent("/no/such/place") == "/no/such"


class TestIsDirectChild:
    """Test cases for is_direct_child()."""

    def test_bare_name(self):
        assert is_direct_child("/home/user", resolve("/home/user", "notes.txt"))

    def test_nested_name(self):
        assert not is_direct_child("/home/user", resolve("/home/user", "sub/notes.txt"))

    def test_traversal_back_into_same_directory(self):
        target = resolve("/home/user", "../user/notes.txt")
        assert is_direct_child("/home/user", target)

    def test_comparison_is_case_sensitive(self):
        assert not is_direct_child("/home/User", "/home/user/notes.txt")

    def test_current_directory_is_not_renormalised(self):
        """A trailing separator on the current directory never matches."""
        target = resolve("/home/user/", "notes.txt")
        assert not is_direct_child("/home/user/", target)
