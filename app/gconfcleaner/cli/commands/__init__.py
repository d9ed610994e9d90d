"""CLI commands for gconf-cleaner.

This package contains all subcommand implementations.
"""

from gconfcleaner.cli.commands import clean, config, scan

__all__ = ["clean", "config", "scan"]
