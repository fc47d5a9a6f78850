"""Directory names that are never scanned for node_modules.

This module defines the names of conventional user-data directories and
tooling-metadata directories that the scanner skips entirely, together
with the glob patterns for hidden entries.
"""

import fnmatch
from collections.abc import Iterable

# Conventional XDG user-data directories. Exact, case-sensitive names.
SKIP_DIR_NAMES: frozenset[str] = frozenset(
    {
        "Desktop",
        "Documents",
        "Downloads",
        "Music",
        "Pictures",
        "Public",
        "Templates",
        "Videos",
    }
)

# Glob patterns matched against entry names (not full paths).
# Uses immutable tuple per project conventions.
IGNORED_NAME_PATTERNS: tuple[str, ...] = (
    # Hidden files and directories
    ".*",
    # Version control
    ".git",
    # Editor settings
    ".vscode",
    ".idea",
)


def is_ignored_name(name: str, extra_names: Iterable[str] = ()) -> bool:
    """Check if a directory entry should be skipped by the scanner.

    Matching is case-sensitive: ``Documents`` is skipped, ``documents``
    is not.

    Args:
        name: Base name of the entry (no path separators).
        extra_names: Additional exact names to skip.

    Returns:
        True if the entry must be excluded from matching and recursion.
    """
    if name in SKIP_DIR_NAMES or name in extra_names:
        return True

    return any(fnmatch.fnmatchcase(name, pattern) for pattern in IGNORED_NAME_PATTERNS)
