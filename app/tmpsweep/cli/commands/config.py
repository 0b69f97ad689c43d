"""Config file commands.

Provides commands to write a starter config file and locate it.
"""

from pathlib import Path
from typing import Annotated

import typer

from tmpsweep.core.config import SweepConfig, save_config
from tmpsweep.core.paths import get_config_path
from tmpsweep.sweep.errors import ConfigurationError
from tmpsweep.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Create and locate the config file.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def init(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Where to write the file instead of ~/.config/tmpsweep/config.toml.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file holding the built-in settings and rules.

    The written file lists every default, ready to be edited.
    """
    target = config_path or get_config_path()
    if target.exists() and not force:
        print_warning(f"Config already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        written = save_config(SweepConfig(), target)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote config to {written}")


@app.command()
def path() -> None:
    """Print the default config file location."""
    console.print(str(get_config_path()), highlight=False, soft_wrap=True, markup=False)
