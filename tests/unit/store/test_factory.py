"""Tests for open_store()."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from gconfcleaner.core.settings import CleanerSettings
from gconfcleaner.store.base import StoreUnavailableError
from gconfcleaner.store.factory import open_store
from gconfcleaner.store.gconftool import GConfToolStore
from gconfcleaner.store.toml_file import TomlFileStore


class TestOpenStore:
    """Tests for backend selection."""

    def test_file_backend(self, dump_file: Path) -> None:
        """The file backend loads the configured dump."""
        store = open_store(CleanerSettings(backend="file", dump_path=dump_file))

        assert isinstance(store, TomlFileStore)
        assert store.path == dump_file

    @patch("gconfcleaner.store.gconftool.command_exists", return_value=True)
    def test_gconftool_backend(self, _mock_exists: MagicMock) -> None:
        """The default backend drives gconftool with the configured timeout."""
        store = open_store(CleanerSettings(gconftool_path="/opt/gconftool-2", command_timeout=7))

        assert isinstance(store, GConfToolStore)
        assert store.executable == "/opt/gconftool-2"
        assert store.timeout == 7

    @patch("gconfcleaner.store.gconftool.command_exists", return_value=False)
    def test_gconftool_missing(self, _mock_exists: MagicMock) -> None:
        """A missing gconftool surfaces as StoreUnavailableError."""
        with pytest.raises(StoreUnavailableError):
            open_store(CleanerSettings())
