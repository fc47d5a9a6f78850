"""Tests for ignored and protected directory names."""

import pytest
from nmprune.filesystem.protected import IGNORED_NAME_PATTERNS, SKIP_DIR_NAMES, is_ignored_name


class TestProtectedNames:
    """Tests for the SKIP_DIR_NAMES and IGNORED_NAME_PATTERNS constants."""

    def test_user_directories_listed(self) -> None:
        """All XDG user directories are in the skip list."""
        assert {
            "Desktop",
            "Documents",
            "Downloads",
            "Music",
            "Pictures",
            "Public",
            "Templates",
            "Videos",
        } == SKIP_DIR_NAMES

    def test_tooling_patterns_listed(self) -> None:
        """Version control and editor directories are in the ignore patterns."""
        assert ".git" in IGNORED_NAME_PATTERNS
        assert ".vscode" in IGNORED_NAME_PATTERNS
        assert ".idea" in IGNORED_NAME_PATTERNS


class TestIsIgnoredName:
    """Tests for is_ignored_name function."""

    @pytest.mark.parametrize("name", [".git", ".vscode", ".idea", ".cache", ".node_modules", "."])
    def test_hidden_names_ignored(self, name: str) -> None:
        """Anything starting with a dot is ignored."""
        assert is_ignored_name(name) is True

    @pytest.mark.parametrize("name", ["Documents", "Videos", "Public"])
    def test_user_directories_ignored(self, name: str) -> None:
        """Protected user-data directories are ignored."""
        assert is_ignored_name(name) is True

    @pytest.mark.parametrize("name", ["documents", "DOCUMENTS", "Documents2", "MyMusic"])
    def test_exact_case_sensitive_match(self, name: str) -> None:
        """Protected names match exactly and case-sensitively."""
        assert is_ignored_name(name) is False

    def test_node_modules_not_ignored(self) -> None:
        """The target name itself is never ignored."""
        assert is_ignored_name("node_modules") is False

    def test_extra_names(self) -> None:
        """Extra names are ignored in addition to the built-in ones."""
        assert is_ignored_name("vendor", extra_names={"vendor"}) is True
        assert is_ignored_name("vendor") is False
        assert is_ignored_name("Documents", extra_names={"vendor"}) is True
