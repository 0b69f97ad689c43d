"""Sweep command.

Removes disposable build and test artifacts from the temp root, or
lists what would be removed with --dry-run.
"""

from pathlib import Path
from typing import Annotated

import typer

from tmpsweep.core.config import load_config
from tmpsweep.sweep.errors import SweepError
from tmpsweep.sweep.estimator import DuSizeEstimator
from tmpsweep.sweep.matcher import CruftMatcher
from tmpsweep.sweep.orchestrator import CleanupOrchestrator
from tmpsweep.utils.formatting import print_error, print_warning

app = typer.Typer(
    help="Delete disposable artifacts from the temp directory.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean(
    tmp_root: Annotated[
        str | None,
        typer.Option(
            "--tmp-root",
            "-r",
            help="Root of the temp directory (default: tmp_root from config, else /tmp).",
            show_default=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be deleted without deleting."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of ~/.config/tmpsweep/config.toml.",
        ),
    ] = None,
) -> None:
    """Sweep the temp root.

    Matching entries are sized with du first, then deleted. Entries that
    cannot be read or removed for lack of permission are skipped.

    Examples:
        tmpsweep clean                      # Sweep /tmp
        tmpsweep clean --dry-run            # Only report what would go
        tmpsweep clean --tmp-root /var/tmp  # Sweep another directory
    """
    try:
        config = load_config(config_path)
        root = tmp_root if tmp_root is not None else config.tmp_root

        orchestrator = CleanupOrchestrator(
            matcher=CruftMatcher(config.rules),
            estimator=DuSizeEstimator(timeout=config.du_timeout_seconds),
        )
        summary = orchestrator.run(root, dry_run=dry_run)
    except SweepError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    skipped = summary.deletion_skipped
    if skipped:
        print_warning(f"{len(skipped)} path(s) could not be deleted (permission denied)")
