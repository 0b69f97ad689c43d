"""CLI commands for tmpsweep.

This package contains all subcommand implementations.
"""

from tmpsweep.cli.commands import clean, config, rules

__all__ = ["clean", "config", "rules"]
