"""Filesystem scanner for node_modules directories.

Walks a directory tree depth-first from a single root and collects
every directory named ``node_modules`` without descending into it.
Hidden entries and protected user-data directories are skipped, and
a depth ceiling bounds the walk on cyclic or pathological trees.
"""

import logging
import os
from pathlib import Path

from nmprune.core.config import ScanConfig
from nmprune.filesystem.models import MatchSet
from nmprune.filesystem.protected import is_ignored_name

logger = logging.getLogger(__name__)

# Listing errors that are expected while walking a home directory and
# not worth reporting: unreadable directories and paths that vanished.
_BENIGN_LISTING_ERRORS: tuple[type[OSError], ...] = (
    PermissionError,
    FileNotFoundError,
    NotADirectoryError,
)


class NodeModulesScanner:
    """Scans a directory tree for node_modules directories.

    The scanner keeps no state between calls to :meth:`scan`; each call
    is an independent walk that returns its own match set.

    Args:
        config: Scan settings. Defaults to ``ScanConfig()``.
    """

    def __init__(self, config: ScanConfig | None = None) -> None:
        self._config = config if config is not None else ScanConfig()

    def scan(self, root: Path) -> MatchSet:
        """Walk the tree below ``root`` and return all matched directories.

        Per-directory errors never abort the walk. A root that does not
        exist, is not a directory, or is itself a matched directory
        yields an empty match set.

        Args:
            root: Directory to start from. Made absolute before scanning.

        Returns:
            MatchSet with matches in directory-listing order.
        """
        root = Path(os.path.abspath(root))
        logger.debug("Scanning %s (max depth %d)", root, self._config.max_depth)

        paths = self._scan_directory(root, 0)

        logger.debug("Found %d %s directories under %s", len(paths), self._config.target_name, root)
        return MatchSet(root=root, paths=tuple(paths))

    def _scan_directory(self, directory: Path, depth: int) -> list[Path]:
        """Scan a single directory and everything below it.

        Returns the matches of this subtree as a new list; callers merge
        it into their own result.

        Args:
            directory: Directory to list.
            depth: Distance from the scan root (root is 0).

        Returns:
            Matched directories found in this subtree.
        """
        if depth > self._config.max_depth:
            logger.debug("Depth ceiling reached, skipping %s", directory)
            return []

        # Matches are recorded from the parent's listing; never expand one.
        if directory.name == self._config.target_name:
            return []

        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except _BENIGN_LISTING_ERRORS as e:
            logger.debug("Skipping %s: %s", directory, e)
            return []
        except OSError as e:
            logger.warning("Could not scan %s: %s", directory, e)
            return []

        matches: list[Path] = []
        for entry in entries:
            if is_ignored_name(entry.name, self._config.extra_skip_names):
                continue

            if not self._is_directory(entry):
                continue

            child = Path(entry.path)
            if entry.name == self._config.target_name:
                matches.append(child)
            else:
                matches.extend(self._scan_directory(child, depth + 1))

        return matches

    def _is_directory(self, entry: os.DirEntry[str]) -> bool:
        """Check if a listing entry is a directory the walk may enter.

        Symlinks count as directories only when ``follow_symlinks`` is set.
        Entries whose type cannot be determined are treated as files.
        """
        try:
            return entry.is_dir(follow_symlinks=self._config.follow_symlinks)
        except OSError as e:
            logger.debug("Cannot determine type of %s: %s", entry.path, e)
            return False
