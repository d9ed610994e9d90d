"""CLI package for gconf-cleaner.

This package contains the Typer application and all subcommands.
"""

from gconfcleaner.cli.main import app

__all__ = ["app"]
