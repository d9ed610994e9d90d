"""Utility modules for gconf-cleaner.

This module exports commonly used utility functions.
"""

from gconfcleaner.utils.formatting import (
    console,
    create_pairs_table,
    err_console,
    format_value,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from gconfcleaner.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_pairs_table",
    "err_console",
    "format_value",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
