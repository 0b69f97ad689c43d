"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from tmpsweep import __version__
from tmpsweep.cli.commands import clean, config, rules
from tmpsweep.core.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="tmpsweep",
    help="Sweep disposable build and test artifacts out of a temp directory.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tmpsweep version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """tmpsweep - Clean leftover build and test artifacts from /tmp.

    Go build caches, gopls profiles and Consul test agents pile up in
    the temp directory; tmpsweep finds them by name and removes them.
    """
    configure_logging(verbose)


# Register commands
app.add_typer(clean.app, name="clean")
app.add_typer(rules.app, name="rules")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
