"""Main CLI application entry point.

Defines the Typer application: scan a directory tree for node_modules
directories, list them, and delete them after confirmation.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from nmprune import __version__
from nmprune.cli.display import (
    DeletionProgress,
    build_decider,
    print_report,
    print_scan_summary,
)
from nmprune.core.config import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, ScanConfig, SizeMode
from nmprune.core.errors import StartPathError
from nmprune.core.pipeline import CleanupReport, resolve_start_path, run_cleanup
from nmprune.filesystem.remover import NodeModulesRemover
from nmprune.filesystem.scanner import NodeModulesScanner
from nmprune.utils.formatting import console, print_error, print_info, print_warning
from nmprune.utils.log import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="nmprune",
    help="Find and delete node_modules directories to reclaim disk space.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nmprune version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    start_path: Annotated[
        str | None,
        typer.Argument(
            help="Directory to scan. Defaults to your home directory.",
            show_default=False,
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    max_depth: Annotated[
        int,
        typer.Option(
            "--max-depth",
            min=0,
            max=MAX_DEPTH_LIMIT,
            help="Maximum directory depth to descend.",
        ),
    ] = DEFAULT_MAX_DEPTH,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-x",
            help="Directory name to skip (repeatable).",
        ),
    ] = None,
    follow_symlinks: Annotated[
        bool,
        typer.Option("--follow-symlinks", help="Descend into symlinked directories."),
    ] = False,
    deep_size: Annotated[
        bool,
        typer.Option(
            "--deep-size",
            help="Measure freed space by walking each directory (slower).",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress non-essential output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Scan for node_modules directories and delete them after confirmation."""
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        config = ScanConfig(
            max_depth=max_depth,
            extra_skip_names=frozenset(exclude or ()),
            follow_symlinks=follow_symlinks,
            size_mode=SizeMode.RECURSIVE if deep_size else SizeMode.METADATA,
        )
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

    try:
        root = resolve_start_path(start_path)
    except StartPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not quiet:
        print_info(f"Scanning for node_modules directories starting from: {root}")
        if yes:
            print_warning("Auto-confirmation enabled (--yes)")
        console.print("[muted]This may take a while for large directory trees...[/]")

    try:
        report = _run(root, config, yes=yes, dry_run=dry_run, quiet=quiet)
    except (KeyboardInterrupt, typer.Abort):
        console.print("\n\n[warning]Operation interrupted by user[/]")
        raise typer.Exit(code=0) from None
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        print_error(f"An error occurred: {e}")
        raise typer.Exit(code=1) from e

    print_report(report)


def _run(
    root: Path,
    config: ScanConfig,
    *,
    yes: bool,
    dry_run: bool,
    quiet: bool,
) -> CleanupReport:
    """Run scan, confirmation and deletion with console feedback."""
    scanner = NodeModulesScanner(config)
    auto_confirm = yes or dry_run
    # Matches are always listed before a prompt, even with --quiet.
    decide = build_decider(auto_confirm=auto_confirm, show_matches=not quiet or not auto_confirm)

    with DeletionProgress(enabled=not quiet and not dry_run) as progress:
        remover = NodeModulesRemover(
            size_mode=config.size_mode,
            dry_run=dry_run,
            on_progress=progress,
        )
        return run_cleanup(
            root,
            decide,
            scanner=scanner,
            remover=remover,
            on_scanned=None if quiet else print_scan_summary,
        )


if __name__ == "__main__":
    app()
