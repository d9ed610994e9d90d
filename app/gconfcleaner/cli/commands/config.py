"""Settings commands.

Show, locate and initialize the gconf-cleaner settings file.
"""

import json
from typing import Annotated

import typer

from gconfcleaner.cli.session import require_settings
from gconfcleaner.core.paths import ensure_config_dir, get_settings_path
from gconfcleaner.core.settings import CleanerSettings, SettingsError, save_settings
from gconfcleaner.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and initialize settings.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective settings (file values plus command line overrides)."""
    settings = require_settings(ctx)
    console.print_json(json.dumps(settings.model_dump(mode="json")))


@app.command()
def path() -> None:
    """Print the location of the settings file."""
    typer.echo(str(get_settings_path()))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    settings_path = get_settings_path()
    if settings_path.exists() and not force:
        print_info(f"Settings already exist at {settings_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        ensure_config_dir()
        saved = save_settings(CleanerSettings(), settings_path)
    except (RuntimeError, SettingsError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Settings written to {saved}")
