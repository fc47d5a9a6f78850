"""Filesystem domain models for node_modules scanning and removal.

This module defines the data structures passed between the scanner
and the remover: the match set produced by a scan and the per-path
and aggregate results of a deletion pass.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class RemovalStatus(str, Enum):
    """Outcome of a single removal attempt.

    Attributes:
        DELETED: Directory was removed.
        FAILED: Removal failed; the error field explains why.
        DRY_RUN: Nothing was touched (dry-run mode).
    """

    DELETED = "deleted"
    FAILED = "failed"
    DRY_RUN = "dry_run"


@dataclass(frozen=True, slots=True)
class MatchSet:
    """Ordered, immutable set of matched directories found by a scan.

    No path in the set is an ancestor of another, because the scanner
    never descends into a matched directory.

    Attributes:
        root: Absolute scan root that produced the matches.
        paths: Absolute paths of matched directories, in discovery order.
    """

    root: Path
    paths: tuple[Path, ...] = ()

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __bool__(self) -> bool:
        return bool(self.paths)

    def __getitem__(self, index: int) -> Path:
        return self.paths[index]


@dataclass(frozen=True, slots=True)
class RemovalOutcome:
    """Result of a single removal attempt.

    Attributes:
        path: Absolute path that was operated on.
        status: Whether the path was deleted, failed, or skipped (dry-run).
        size_bytes: Best-effort size, None if it could not be determined.
        error: Error message if the removal failed, None otherwise.
    """

    path: Path
    status: RemovalStatus
    size_bytes: int | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the path was removed (or would be, in dry-run mode)."""
        return self.status != RemovalStatus.FAILED


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Aggregate result of a deletion pass.

    Attributes:
        count: Number of paths successfully removed.
        total_size: Sum of the best-effort sizes of removed paths, in bytes.
        outcomes: One outcome per attempted path, in match-set order.
    """

    count: int = 0
    total_size: int = 0
    outcomes: tuple[RemovalOutcome, ...] = field(default_factory=tuple)

    @property
    def attempted(self) -> int:
        """Number of paths the pass attempted."""
        return len(self.outcomes)

    @property
    def failed(self) -> tuple[RemovalOutcome, ...]:
        """Outcomes of paths that could not be removed."""
        return tuple(o for o in self.outcomes if o.status == RemovalStatus.FAILED)

    @property
    def dry_run(self) -> bool:
        """True if every outcome was produced in dry-run mode."""
        return bool(self.outcomes) and all(
            o.status == RemovalStatus.DRY_RUN for o in self.outcomes
        )
