"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from gconfcleaner import __app_name__, __version__
from gconfcleaner.cli.commands import clean, config, scan
from gconfcleaner.cli.session import apply_overrides
from gconfcleaner.core.logs import resolve_log_level, setup_logging
from gconfcleaner.core.settings import SettingsError, load_settings
from gconfcleaner.utils.formatting import err_console

app = typer.Typer(
    name=__app_name__,
    help="Find and remove configuration entries that no schema describes.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class BackendChoice(str, Enum):
    """Available configuration store backends."""

    GCONFTOOL = "gconftool"
    FILE = "file"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{__app_name__} version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
    backend: Annotated[
        BackendChoice | None,
        typer.Option(
            "--backend",
            "-b",
            help="Store backend: gconftool or file.",
            case_sensitive=False,
        ),
    ] = None,
    dump_path: Annotated[
        Path | None,
        typer.Option(
            "--dump",
            "-d",
            help="TOML dump file to audit (implies --backend file).",
        ),
    ] = None,
) -> None:
    """gconf-cleaner - review and remove orphaned configuration entries.

    Walks the configuration store, skips schema and profile subtrees,
    and lists every entry that has a value but no schema.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    default_level = "WARNING"
    try:
        settings = apply_overrides(
            load_settings(),
            backend=backend.value if backend is not None else None,
            dump_path=dump_path,
        )
    except SettingsError as e:
        ctx.obj["settings_error"] = e
    else:
        ctx.obj["settings"] = settings
        default_level = settings.log_level

    setup_logging(
        resolve_log_level(default_level, verbose=verbose, quiet=quiet),
        console=err_console,
    )


# Register commands
app.add_typer(scan.app, name="scan")
app.add_typer(clean.app, name="clean")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
