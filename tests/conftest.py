"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a directory tree under tmp_path.

    Entries ending with "/" are created as directories, anything else as
    a small text file (parents are created as needed).

    Returns:
        Factory returning the tree root (tmp_path).
    """

    def _make(*entries: str) -> Path:
        for entry in entries:
            target = tmp_path / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("content")
        return tmp_path

    return _make


@pytest.fixture
def project_tree(make_tree: Callable[..., Path]) -> Path:
    """A small workspace with three JavaScript projects and some noise."""
    return make_tree(
        "web/package.json",
        "web/node_modules/react/index.js",
        "api/node_modules/express/index.js",
        "api/src/index.js",
        "tools/cli/node_modules/.bin/tsc",
        "notes.txt",
        ".cache/node_modules/pkg/index.js",
    )
