"""Settings model and I/O for gconf-cleaner.

Settings select which configuration store the cleaner audits and how it is
reached:
- gconftool: the live GConf engine, driven through ``gconftool-2`` (default)
- file: a TOML dump file (see ``gconfcleaner.store.toml_file``)

Settings are stored in ~/.config/gconf-cleaner/config.toml. A missing file
means defaults.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from gconfcleaner.core.paths import get_settings_path

StoreBackend = Literal["gconftool", "file"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CleanerSettings(BaseModel):
    """Runtime settings for the cleaner.

    Attributes:
        backend: Which store to audit.
        gconftool_path: gconftool binary used by the gconftool backend.
        command_timeout: Per-command timeout for gconftool in seconds.
        dump_path: TOML dump file used by the file backend.
        log_level: Default log level when neither --verbose nor --quiet is given.
    """

    model_config = ConfigDict(extra="forbid")

    backend: Annotated[
        StoreBackend,
        Field(description="Configuration store backend"),
    ] = "gconftool"
    gconftool_path: Annotated[
        str,
        Field(min_length=1, description="gconftool executable"),
    ] = "gconftool-2"
    command_timeout: Annotated[
        float,
        Field(gt=0, le=600, description="Timeout in seconds per gconftool call"),
    ] = 30.0
    dump_path: Annotated[
        Path | None,
        Field(description="TOML dump file for the file backend"),
    ] = None
    log_level: Annotated[
        LogLevel,
        Field(description="Default log level"),
    ] = "WARNING"

    @model_validator(mode="after")
    def _check_dump_path(self) -> "CleanerSettings":
        if self.backend == "file" and self.dump_path is None:
            msg = "dump_path is required when backend is 'file'"
            raise ValueError(msg)
        return self


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> CleanerSettings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated CleanerSettings; defaults when the file does not exist.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        return CleanerSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return CleanerSettings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: CleanerSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file atomically.

    Args:
        settings: The settings to save.
        path: Destination. If None, uses the default settings path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = settings.model_dump(mode="json", exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path
