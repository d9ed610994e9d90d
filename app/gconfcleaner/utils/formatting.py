"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gconfcleaner.core.theme import get_theme


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


def format_value(value: Any) -> str:
    """Render a store value for display.

    Lists are shown as ``[a,b]`` the way gconftool prints them, booleans
    in lowercase, everything else via ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return "[" + ",".join(format_value(item) for item in value) + "]"
    return str(value)


def create_pairs_table(title: str = "Unknown Entries") -> Table:
    """Create a pre-configured table for displaying unknown pairs.

    Args:
        title: Table title.

    Returns:
        Rich Table with Directory, Key and Value columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Directory", style="directory", no_wrap=True)
    table.add_column("Key", style="key", no_wrap=True)
    table.add_column("Value", style="value", overflow="ellipsis")
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
