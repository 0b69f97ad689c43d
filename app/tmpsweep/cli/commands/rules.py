"""Rule listing command."""

from pathlib import Path
from typing import Annotated

import typer

from tmpsweep.core.config import load_config
from tmpsweep.sweep.errors import ConfigurationError
from tmpsweep.utils.formatting import console, create_rules_table, print_error

app = typer.Typer(
    help="Show the name rules used to pick deletion candidates.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_rules(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of ~/.config/tmpsweep/config.toml.",
        ),
    ] = None,
) -> None:
    """Display the active rule set (built-in defaults merged with config)."""
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(create_rules_table(config.rules))
