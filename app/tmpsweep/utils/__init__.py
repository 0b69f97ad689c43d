"""Utility modules for tmpsweep.

This module exports commonly used utility functions.
"""

from tmpsweep.utils.formatting import (
    console,
    create_rules_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from tmpsweep.utils.shell import CommandResult, run_command
from tmpsweep.utils.units import format_bytes

__all__ = [
    "CommandResult",
    "console",
    "create_rules_table",
    "err_console",
    "format_bytes",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
