"""Unit tests for the clean command."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from gconfcleaner.cli.main import app
from gconfcleaner.store.memory import MemoryStore, build_store
from gconfcleaner.store.toml_file import TomlFileStore
from typer.testing import CliRunner

runner = CliRunner()


class TestCleanDumpFile:
    """Tests running clean against a TOML dump."""

    def test_dry_run_leaves_file_untouched(self, dump_file: Path) -> None:
        """--dry-run reports without writing."""
        before = dump_file.read_text()

        result = runner.invoke(app, ["--dump", str(dump_file), "clean", "--dry-run"])

        assert result.exit_code == 0
        assert "Entries to Unset (dry-run)" in result.output
        assert "Dry-run: 1 key(s) would be unset." in result.output
        assert dump_file.read_text() == before

    def test_yes_unsets_and_syncs(self, dump_file: Path) -> None:
        """--yes unsets unknown keys and writes the dump back."""
        result = runner.invoke(app, ["--dump", str(dump_file), "clean", "--yes"])

        assert result.exit_code == 0
        assert "All 1 key(s) unset." in result.output

        reloaded = TomlFileStore(dump_file)
        assert reloaded.get("/apps/foo/bar") is None
        assert reloaded.get("/apps/foo/known") is True
        assert reloaded.get("/apps/foo/prefs/hidden") == 1

    def test_declined_confirmation_aborts(self, dump_file: Path) -> None:
        """Answering no leaves the store alone."""
        before = dump_file.read_text()

        result = runner.invoke(app, ["--dump", str(dump_file), "clean"], input="n\n")

        assert result.exit_code == 0
        assert "Aborted." in result.output
        assert dump_file.read_text() == before

    def test_accepted_confirmation_unsets(self, dump_file: Path) -> None:
        """Answering yes unsets the keys."""
        result = runner.invoke(app, ["--dump", str(dump_file), "clean"], input="y\n")

        assert result.exit_code == 0
        assert "Unset 1 key(s)?" in result.output
        assert TomlFileStore(dump_file).get("/apps/foo/bar") is None

    def test_second_run_finds_nothing(self, dump_file: Path) -> None:
        """After cleaning, a new run has nothing left to do."""
        runner.invoke(app, ["--dump", str(dump_file), "clean", "--yes"])

        result = runner.invoke(app, ["--dump", str(dump_file), "clean", "--yes"])

        assert result.exit_code == 0
        assert "No unknown entries found." in result.output


class TestCleanFailures:
    """Tests for store failures during clean."""

    @patch("gconfcleaner.cli.session.open_store")
    def test_unset_failure_exits_nonzero(self, mock_open: MagicMock) -> None:
        """A failed unset is reported and sets exit code 1."""
        store = build_store({"/a/k1": "v1", "/a/k2": "v2"})
        store.fail_on("unset", "/a/k1", "read-only")
        mock_open.return_value = store

        result = runner.invoke(app, ["clean", "--yes"])

        assert result.exit_code == 1
        assert "1 unset, 1 failed" in result.output
        assert "read-only" in result.output
        assert store.get("/a/k1") == "v1"
        assert store.get("/a/k2") is None
        assert store.sync_count == 1

    @patch("gconfcleaner.cli.session.open_store")
    def test_sync_failure_is_a_warning(self, mock_open: MagicMock) -> None:
        """A failed sync is reported but does not fail the run."""
        store = build_store({"/a/k1": "v1"})
        store.fail_on("sync", message="disk full")
        mock_open.return_value = store

        result = runner.invoke(app, ["clean", "--yes"])

        assert result.exit_code == 0
        assert "Sync failed: disk full" in result.output

    @patch("gconfcleaner.cli.session.open_store")
    def test_dry_run_never_syncs(self, mock_open: MagicMock) -> None:
        """--dry-run neither unsets nor syncs."""
        store = build_store({"/a/k1": "v1"})
        mock_open.return_value = store

        result = runner.invoke(app, ["clean", "--dry-run"])

        assert result.exit_code == 0
        assert store.get("/a/k1") == "v1"
        assert store.sync_count == 0

    @patch("gconfcleaner.cli.session.open_store")
    def test_empty_store(self, mock_open: MagicMock) -> None:
        """An empty store needs no cleaning."""
        mock_open.return_value = MemoryStore()

        result = runner.invoke(app, ["clean", "--yes"])

        assert result.exit_code == 0
        assert "No unknown entries found." in result.output
