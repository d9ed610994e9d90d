"""Shared helpers for CLI commands that open a Cleaner.

Settings are loaded once by the main callback and stored in the Typer
context object; commands turn them into a scanned Cleaner here.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import typer

from gconfcleaner.cleaner import Cleaner, EntryFetchError, ScanError, UnknownPair
from gconfcleaner.core.settings import CleanerSettings, SettingsError
from gconfcleaner.store import StoreUnavailableError, open_store
from gconfcleaner.utils.formatting import print_error, print_warning


@dataclass(slots=True)
class ScanReport:
    """Unknown pairs gathered from a full cursor walk.

    Attributes:
        pairs: ``(directory, pair)`` tuples in walk order.
        errors: Directories whose entries could not be read.
    """

    pairs: list[tuple[str, UnknownPair]] = field(default_factory=list)
    errors: list[EntryFetchError] = field(default_factory=list)

    @property
    def keys(self) -> list[str]:
        """Keys of every unknown pair, in walk order."""
        return [pair.key for _directory, pair in self.pairs]


def apply_overrides(
    settings: CleanerSettings,
    *,
    backend: str | None = None,
    dump_path: Path | None = None,
) -> CleanerSettings:
    """Return ``settings`` with CLI overrides applied and re-validated.

    A ``--dump`` file implies the file backend unless a backend was given.

    Raises:
        SettingsError: If the combination is invalid.
    """
    overrides: dict[str, Any] = {}
    if dump_path is not None:
        overrides["dump_path"] = dump_path
        overrides["backend"] = backend or "file"
    elif backend is not None:
        overrides["backend"] = backend
    if not overrides:
        return settings

    try:
        return CleanerSettings.model_validate({**settings.model_dump(), **overrides})
    except ValueError as e:
        raise SettingsError(f"Invalid options: {e}") from e


def require_settings(ctx: typer.Context) -> CleanerSettings:
    """Get the effective settings from the context or exit with an error."""
    obj: dict[str, Any] = ctx.ensure_object(dict)
    error: SettingsError | None = obj.get("settings_error")
    if error is not None:
        print_error(str(error))
        raise typer.Exit(code=1)
    settings: CleanerSettings | None = obj.get("settings")
    return settings if settings is not None else CleanerSettings()


def open_scanned_cleaner(ctx: typer.Context) -> Cleaner:
    """Open the configured store and run a full scan.

    Exits with code 1 when the store is unavailable or the scan fails.
    """
    settings = require_settings(ctx)

    try:
        store = open_store(settings)
    except StoreUnavailableError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    cleaner = Cleaner(store)
    try:
        cleaner.update()
    except ScanError as e:
        cleaner.close()
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return cleaner


def collect_unknown_pairs(cleaner: Cleaner) -> ScanReport:
    """Walk every remaining directory, warning about unreadable ones."""
    report = ScanReport()

    def _on_error(error: EntryFetchError) -> None:
        print_warning(str(error))
        report.errors.append(error)

    for directory, pairs in cleaner.iter_unknown_pairs(on_error=_on_error):
        report.pairs.extend((directory, pair) for pair in pairs)
    return report
