"""Rich display functions for scan and deletion output.

Provides the scan summary, the interactive confirmation prompt, the
deletion progress bar and the final report printed by the CLI.
"""

from pathlib import Path
from types import TracebackType

import typer
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn

from nmprune.core.pipeline import CleanupDecision, CleanupReport, Decider
from nmprune.filesystem.models import DeletionResult, MatchSet
from nmprune.utils.formatting import (
    console,
    create_matches_table,
    format_size,
    print_info,
    print_success,
    print_warning,
)


def _ms(seconds: float) -> int:
    return round(seconds * 1000)


def print_scan_summary(matches: MatchSet, scan_seconds: float) -> None:
    """Print scan duration and the number of directories found."""
    console.print(f"\n[muted]Scan completed in {_ms(scan_seconds)}ms[/]")
    console.print(f"Found [bold]{len(matches)}[/] node_modules directories")


def build_decider(*, auto_confirm: bool, show_matches: bool = True) -> Decider:
    """Build the confirmation gate used by the CLI.

    The returned decider lists the matches (unless ``show_matches`` is
    False) and then either approves immediately or asks the user, with
    "no" as the default answer.

    Args:
        auto_confirm: Approve without prompting (``--yes``/``--dry-run``).
        show_matches: Print the table of matched directories first.

    Returns:
        Decider to pass to ``run_cleanup``.
    """

    def decide(matches: MatchSet) -> bool:
        if show_matches:
            console.print()
            console.print(create_matches_table(matches))

        if auto_confirm:
            return True

        return typer.confirm(
            f"\nDo you want to delete these {len(matches)} node_modules directories?",
            default=False,
        )

    return decide


class DeletionProgress:
    """Progress bar fed by the remover's progress callback.

    The bar is created on the first callback so nothing is drawn when
    the deletion pass never runs. Use as a context manager to make sure
    the live display is stopped.
    """

    def __init__(self, target: Console | None = None, *, enabled: bool = True) -> None:
        self._console = target if target is not None else console
        self._enabled = enabled
        self._progress: Progress | None = None
        self._task: TaskID | None = None
        self._total = 0

    def __call__(self, index: int, total: int, path: Path) -> None:
        if not self._enabled:
            return

        if self._progress is None:
            self._progress = Progress(
                TextColumn("[info]Deleting[/]"),
                BarColumn(),
                MofNCompleteColumn(),
                TextColumn("[muted]{task.fields[project]}[/]"),
                console=self._console,
                transient=True,
            )
            self._progress.start()
            self._task = self._progress.add_task("delete", total=total, project="")
            self._total = total

        if self._progress is None or self._task is None:
            return

        self._progress.update(
            self._task,
            completed=index - 1,
            project=f"{path.parent.name}/{path.name}",
        )

    def close(self) -> None:
        """Stop the live display if it was started."""
        if self._progress is not None and self._task is not None:
            self._progress.update(self._task, completed=self._total)
            self._progress.stop()
        self._progress = None
        self._task = None

    def __enter__(self) -> "DeletionProgress":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def print_deletion_result(result: DeletionResult, delete_seconds: float) -> None:
    """Print the outcome of a deletion pass."""
    if result.dry_run:
        print_info(
            f"Dry-run: {result.attempted} node_modules directories would be deleted "
            f"(at least {format_size(sum(o.size_bytes or 0 for o in result.outcomes))})."
        )
        return

    console.print()
    print_success(f"Successfully deleted {result.count} node_modules directories")
    if result.total_size > 0:
        print_info(f"Freed approximately {format_size(result.total_size)} of disk space")

    failed = result.failed
    if failed:
        print_warning(f"{len(failed)} of {result.attempted} directories could not be deleted")

    console.print(f"[muted]Deletion completed in {_ms(delete_seconds)}ms[/]")


def print_report(report: CleanupReport) -> None:
    """Print the closing message for a cleanup run."""
    if report.decision == CleanupDecision.NO_MATCHES:
        print_success("No node_modules directories found.")
    elif report.decision == CleanupDecision.DECLINED:
        print_info("Operation cancelled.")
    elif report.result is not None:
        print_deletion_result(report.result, report.delete_seconds)
