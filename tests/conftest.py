"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from gconfcleaner.store.memory import MemoryStore, build_store


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo logging setup done by CLI invocations."""
    yield
    logger = logging.getLogger("gconfcleaner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def simple_store() -> MemoryStore:
    """/apps/foo holds one schema-less key; /schemas/foo is blacklisted."""
    return build_store(
        {
            "/apps/foo/bar": "baz",
            "/schemas/foo/bar": "schema",
        }
    )


@pytest.fixture
def mixed_store() -> MemoryStore:
    """Store with known, unknown, valueless and blacklisted entries."""
    store = build_store(
        {
            "/apps/editor/font": "Monospace 10",
            "/apps/editor/tab_width": 4,
            "/apps/editor/plugins/spell/lang": "en",
            "/apps/old-player/volume": 80,
            "/apps/old-player/profiles/default/color": "#000",
            "/desktop/gnome/interface/theme": "Clearlooks",
            "/system/networking/connections/wireless/ssid": "home",
        },
        schemas={
            "/apps/editor/font": "/schemas/apps/editor/font",
            "/desktop/gnome/interface/theme": "/schemas/desktop/gnome/interface/theme",
        },
    )
    store.set("/apps/editor/tab_width", 4, "/schemas/apps/editor/missing")
    store.set("/apps/editor/plugins/spell/enabled", None)
    return store


@pytest.fixture
def dump_file(tmp_path: Path) -> Path:
    """A TOML dump with one known, one unknown and one valueless entry."""
    path = tmp_path / "dump.toml"
    path.write_text(
        """\
schemas = ["/schemas/apps/foo/known"]

[dirs."/apps/foo"]
bar = "baz"
known = { value = true, schema = "/schemas/apps/foo/known" }
empty = { schema = "/schemas/apps/foo/empty" }

[dirs."/apps/foo/prefs"]
hidden = 1

[dirs."/apps/empty"]
"""
    )
    return path
