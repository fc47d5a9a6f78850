"""Deletion of matched node_modules directories.

Removes each matched directory recursively and forcibly, one at a time
in scan order. A failure on one path is logged and recorded, and the
pass moves on to the next path.
"""

import logging
import os
import shutil
import stat
from collections.abc import Callable, Iterable
from pathlib import Path

from nmprune.core.config import SizeMode
from nmprune.filesystem.models import DeletionResult, RemovalOutcome, RemovalStatus

logger = logging.getLogger(__name__)

# Called before each path is processed with (index, total, path); index is 1-based.
ProgressCallback = Callable[[int, int, Path], None]

_OWNER_RWX = stat.S_IRWXU


def _make_writable(path: str) -> None:
    """Add owner read/write/execute bits to a directory."""
    mode = os.lstat(path).st_mode
    os.chmod(path, stat.S_IMODE(mode) | _OWNER_RWX)


def _ignore_vanished(func: Callable[..., object], path: str, exc: BaseException) -> None:
    """rmtree error handler that only tolerates entries that disappeared."""
    if isinstance(exc, FileNotFoundError):
        return
    raise exc


def _force_remove_error(func: Callable[..., object], path: str, exc: BaseException) -> None:
    """rmtree error handler implementing forced removal.

    Entries that vanished mid-removal are ignored. Permission errors are
    retried once after granting the owner full access to the blocking
    directory. Anything else is re-raised.
    """
    if isinstance(exc, FileNotFoundError):
        return
    if not isinstance(exc, PermissionError):
        raise exc

    _make_writable(os.path.dirname(path))

    if func in (os.unlink, os.remove, os.rmdir):
        func(path)
        return

    # Listing or opening the directory itself failed: unlock it and retry
    # the whole subtree once.
    _make_writable(path)
    shutil.rmtree(path, onexc=_ignore_vanished)


class NodeModulesRemover:
    """Removes matched directories and accumulates size/count statistics.

    Performs no interactive I/O; whether it runs at all is decided by the
    caller.

    Args:
        size_mode: How freed space is measured before each removal.
        dry_run: If True, report what would be deleted without deleting.
        on_progress: Optional callback invoked before each path.
    """

    def __init__(
        self,
        *,
        size_mode: SizeMode = SizeMode.METADATA,
        dry_run: bool = False,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self._size_mode = size_mode
        self._dry_run = dry_run
        self._on_progress = on_progress

    def delete(self, matches: Iterable[Path]) -> DeletionResult:
        """Delete every path in ``matches`` and return aggregate results.

        Paths are processed in order. A failing path never stops the
        remaining ones; the returned count covers exactly the paths that
        were removed.

        Args:
            matches: Match set (or any iterable of absolute paths).

        Returns:
            DeletionResult with count, total size and per-path outcomes.
        """
        paths = list(matches)
        total = len(paths)
        outcomes: list[RemovalOutcome] = []
        count = 0
        total_size = 0

        for index, path in enumerate(paths, start=1):
            if self._on_progress is not None:
                self._on_progress(index, total, path)

            outcome = self._delete_single(path)
            outcomes.append(outcome)

            if outcome.status == RemovalStatus.DELETED:
                count += 1
                total_size += outcome.size_bytes or 0
            elif outcome.status == RemovalStatus.FAILED:
                logger.warning("Could not delete %s: %s", path, outcome.error)

        logger.debug("Deleted %d of %d directories (%d bytes)", count, total, total_size)
        return DeletionResult(count=count, total_size=total_size, outcomes=tuple(outcomes))

    def _delete_single(self, path: Path) -> RemovalOutcome:
        """Measure and remove a single matched directory.

        Args:
            path: Absolute path of the matched directory.

        Returns:
            RemovalOutcome describing what happened.
        """
        size = self._get_size(path)

        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return RemovalOutcome(path=path, status=RemovalStatus.DRY_RUN, size_bytes=size)

        # The tree may have changed since the scan.
        if path.is_symlink():
            return RemovalOutcome(
                path=path,
                status=RemovalStatus.FAILED,
                size_bytes=size,
                error=f"Refusing to remove symlink: {path}",
            )
        if not path.exists():
            return RemovalOutcome(
                path=path,
                status=RemovalStatus.FAILED,
                error=f"Path does not exist: {path}",
            )

        try:
            shutil.rmtree(path, onexc=_force_remove_error)
        except OSError as e:
            return RemovalOutcome(
                path=path,
                status=RemovalStatus.FAILED,
                size_bytes=size,
                error=str(e),
            )

        return RemovalOutcome(path=path, status=RemovalStatus.DELETED, size_bytes=size)

    def _get_size(self, path: Path) -> int | None:
        """Get the best-effort size of a path in bytes.

        In metadata mode this is the directory's own stat size. In
        recursive mode it is the sum of all regular files below it.
        Returns None on any error.

        Args:
            path: Path to measure.

        Returns:
            Size in bytes, or None if unavailable.
        """
        try:
            if self._size_mode == SizeMode.METADATA:
                return path.stat().st_size

            total = 0
            for child in path.rglob("*"):
                try:
                    if child.is_file() and not child.is_symlink():
                        total += child.stat().st_size
                except OSError:
                    continue
            return total
        except OSError:
            return None
