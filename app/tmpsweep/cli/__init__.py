"""CLI package for tmpsweep.

This package contains the Typer application and all subcommands.
"""

from tmpsweep.cli.main import app

__all__ = ["app"]
