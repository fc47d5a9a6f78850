"""Scan-then-delete orchestration.

Runs the scanner to completion, asks an injected decider whether to
proceed, and only then runs the remover. Keeps the interactive prompt
out of the core so the whole flow can be driven from tests.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from nmprune.core.errors import StartPathError
from nmprune.filesystem.models import DeletionResult, MatchSet
from nmprune.filesystem.remover import NodeModulesRemover
from nmprune.filesystem.scanner import NodeModulesScanner

logger = logging.getLogger(__name__)

# Called once the scan has finished with (matches, scan duration in seconds).
ScanCallback = Callable[[MatchSet, float], None]


class Decider(Protocol):
    """Decides whether a match set should be deleted."""

    def __call__(self, matches: MatchSet) -> bool: ...


def always_confirm(matches: MatchSet) -> bool:
    """Decider that approves every match set (``--yes``)."""
    return True


class CleanupDecision(str, Enum):
    """How a cleanup run ended.

    Attributes:
        NO_MATCHES: The scan found nothing; the decider was not consulted.
        DECLINED: The decider rejected the match set.
        DELETED: The deletion pass ran.
    """

    NO_MATCHES = "no_matches"
    DECLINED = "declined"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class CleanupReport:
    """Everything a cleanup run produced.

    Attributes:
        matches: Match set from the scan.
        decision: How the run ended.
        result: Deletion result, None unless the deletion pass ran.
        scan_seconds: Wall-clock duration of the scan.
        delete_seconds: Wall-clock duration of the deletion pass.
    """

    matches: MatchSet
    decision: CleanupDecision
    result: DeletionResult | None = None
    scan_seconds: float = 0.0
    delete_seconds: float = 0.0


def _home_directory() -> Path:
    """Return the resolved home directory.

    Raises:
        StartPathError: If the home directory cannot be determined or is
            not an accessible directory.
    """
    try:
        home = Path.home().resolve(strict=True)
    except (OSError, RuntimeError, KeyError) as e:
        msg = f"Cannot determine home directory: {e}"
        raise StartPathError(msg) from e

    if not home.is_dir():
        msg = f"Home directory is not a directory: {home}"
        raise StartPathError(msg)

    return home


def resolve_start_path(raw: str | None) -> Path:
    """Resolve the user-supplied start path to an absolute directory.

    An omitted or blank argument means the invoking user's home directory.
    A path that does not exist or is not a directory is reported with a
    warning and replaced by the home directory as well.

    Args:
        raw: Path as given on the command line, or None.

    Returns:
        Absolute, resolved directory path.

    Raises:
        StartPathError: If the home directory cannot be determined.
    """
    if raw is None or not raw.strip():
        return _home_directory()

    candidate = Path(raw.strip())
    try:
        resolved = candidate.expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        logger.warning("Invalid start path %s (%s), using home directory", candidate, e)
        return _home_directory()

    if not resolved.is_dir():
        logger.warning("Start path %s is not a directory, using home directory", resolved)
        return _home_directory()

    return resolved


def run_cleanup(
    root: Path,
    decide: Decider,
    *,
    scanner: NodeModulesScanner | None = None,
    remover: NodeModulesRemover | None = None,
    on_scanned: ScanCallback | None = None,
) -> CleanupReport:
    """Scan ``root``, ask ``decide``, and delete the matches if approved.

    The scan always completes before the decider is consulted. With no
    matches the decider and remover are never called.

    Args:
        root: Absolute directory to scan.
        decide: Callable returning True to proceed with deletion.
        scanner: Scanner to use. Defaults to ``NodeModulesScanner()``.
        remover: Remover to use. Defaults to ``NodeModulesRemover()``.
        on_scanned: Optional callback invoked after the scan, before the
            decider.

    Returns:
        CleanupReport describing the run.
    """
    scanner = scanner if scanner is not None else NodeModulesScanner()

    started = time.perf_counter()
    matches = scanner.scan(root)
    scan_seconds = time.perf_counter() - started

    if on_scanned is not None:
        on_scanned(matches, scan_seconds)

    if not matches:
        return CleanupReport(
            matches=matches,
            decision=CleanupDecision.NO_MATCHES,
            scan_seconds=scan_seconds,
        )

    if not decide(matches):
        logger.debug("Deletion of %d directories declined", len(matches))
        return CleanupReport(
            matches=matches,
            decision=CleanupDecision.DECLINED,
            scan_seconds=scan_seconds,
        )

    remover = remover if remover is not None else NodeModulesRemover()

    started = time.perf_counter()
    result = remover.delete(matches)
    delete_seconds = time.perf_counter() - started

    return CleanupReport(
        matches=matches,
        decision=CleanupDecision.DELETED,
        result=result,
        scan_seconds=scan_seconds,
        delete_seconds=delete_seconds,
    )
