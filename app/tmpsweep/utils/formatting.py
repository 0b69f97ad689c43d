"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tmpsweep.core.theme import get_theme

if TYPE_CHECKING:
    from tmpsweep.sweep.rules import MatchRules


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_rules_table(rules: MatchRules, title: str = "Match Rules") -> Table:
    """Build a table listing every rule in a rule set.

    Rows are grouped by rule kind in the order the matcher evaluates them.

    Args:
        rules: Rule set to display.
        title: Table title.

    Returns:
        Rich Table with one row per rule.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Applies to", style="muted", no_wrap=True)
    table.add_column("Kind", style="info", no_wrap=True)
    table.add_column("Value", style="text")

    table.add_row("directory", "exact", escape(rules.dir_exact_name))
    for prefix in rules.dir_prefixes:
        table.add_row("directory", "prefix", escape(prefix))
    for prefix in rules.file_prefixes:
        table.add_row("file", "prefix", escape(prefix))
    for pattern in rules.file_patterns:
        table.add_row("file", "regex", escape(pattern))
    return table


def _printable(message: str) -> str:
    """Escape markup and replace undecodable file name bytes with U+FFFD.

    Messages carry paths and tool output, so they are also printed with
    ``soft_wrap`` to keep each on one line.
    """
    return escape(message.encode("utf-8", "surrogateescape").decode("utf-8", "replace"))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{_printable(message)}[/]", highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(
        f"[warning]Warning:[/] {_printable(message)}", highlight=False, soft_wrap=True
    )


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(
        f"[error]ERROR:[/] {_printable(message)}", highlight=False, soft_wrap=True
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{_printable(message)}[/]", highlight=False, soft_wrap=True)
