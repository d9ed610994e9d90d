"""Tests for GConfToolStore output parsing and error handling."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest
from gconfcleaner.store.base import StoreEntry, StoreError, StoreUnavailableError
from gconfcleaner.store.gconftool import GConfToolStore
from gconfcleaner.utils.shell import CommandResult


def _ok(stdout: str = "") -> CommandResult:
    return CommandResult(stdout=stdout, stderr="", returncode=0)


def _fail(stderr: str) -> CommandResult:
    return CommandResult(stdout="", stderr=stderr, returncode=1)


@pytest.fixture
def store() -> GConfToolStore:
    """A store whose executable check always passes."""
    with patch("gconfcleaner.store.gconftool.command_exists", return_value=True):
        return GConfToolStore(timeout=5.0)


class TestConstruction:
    """Tests for availability checks."""

    @patch("gconfcleaner.store.gconftool.command_exists", return_value=False)
    def test_missing_executable(self, _mock_exists: MagicMock) -> None:
        """A missing gconftool binary makes the store unavailable."""
        with pytest.raises(StoreUnavailableError, match="gconftool-2 not found"):
            GConfToolStore()


class TestListChildDirs:
    """Tests for --all-dirs parsing."""

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_parses_indented_lines(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """Each indented output line is one child directory."""
        mock_run.return_value = _ok(" /apps/foo\n /apps/bar\n\n")

        assert store.list_child_dirs("/apps") == ["/apps/foo", "/apps/bar"]
        mock_run.assert_called_once_with(["gconftool-2", "--all-dirs", "/apps"], timeout=5.0)

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_failure_raises(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """A non-zero exit becomes a StoreError carrying stderr."""
        mock_run.return_value = _fail("Failed to contact configuration server\n")

        with pytest.raises(StoreError, match="Failed to contact configuration server"):
            store.list_child_dirs("/apps")

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_timeout_raises(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """A timed out command becomes a StoreError."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="gconftool-2", timeout=5.0)

        with pytest.raises(StoreError, match="timed out"):
            store.list_child_dirs("/apps")


class TestListEntries:
    """Tests for --all-entries parsing with schema name lookups."""

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_parses_entries_and_schema_names(
        self, mock_run: MagicMock, store: GConfToolStore
    ) -> None:
        """Values, missing values and schema names are combined per key."""

        def route(args: list[str], **_kwargs: object) -> CommandResult:
            if args[1] == "--all-entries":
                return _ok(" bar = baz\n width = 80\n unset = (no value set)\n")
            if args[2] == "/apps/foo/width":
                return _ok("/schemas/apps/foo/width\n")
            return _fail(f"No schema known for `{args[2]}'\n")

        mock_run.side_effect = route

        assert store.list_entries("/apps/foo") == [
            StoreEntry("/apps/foo/bar", "baz", None),
            StoreEntry("/apps/foo/width", "80", "/schemas/apps/foo/width"),
            StoreEntry("/apps/foo/unset", None, None),
        ]

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_value_containing_equals(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """Only the first ' = ' separates key and value."""
        mock_run.side_effect = [_ok(" cmd = a = b\n"), _fail("No schema known")]

        assert store.list_entries("/apps/foo") == [StoreEntry("/apps/foo/cmd", "a = b", None)]

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_empty_string_value(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """An empty value stays an empty string."""

        def route(args: list[str], **_kwargs: object) -> CommandResult:
            if args[1] == "--all-entries":
                return _ok(" title = \n bar = baz\n")
            return _fail(f"No schema known for `{args[2]}'\n")

        mock_run.side_effect = route

        assert store.list_entries("/apps/foo") == [
            StoreEntry("/apps/foo/title", "", None),
            StoreEntry("/apps/foo/bar", "baz", None),
        ]


class TestResolveSchema:
    """Tests for schema presence checks."""

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_present(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """A schema that prints its description is present."""
        mock_run.return_value = _ok("Type: int\nDefault Value: 80\n")

        assert store.resolve_schema("/schemas/apps/foo/width")

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_absent(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """'No value set' means no schema."""
        mock_run.return_value = _fail("No value set for `/schemas/apps/foo/x'\n")

        assert not store.resolve_schema("/schemas/apps/foo/x")

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_error(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """Other failures raise StoreError."""
        mock_run.return_value = _fail("Bad key or directory name\n")

        with pytest.raises(StoreError, match="Bad key"):
            store.resolve_schema("bad")


class TestMutation:
    """Tests for unset and sync."""

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_unset(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """unset() runs gconftool --unset."""
        mock_run.return_value = _ok()

        store.unset("/apps/foo/bar")

        mock_run.assert_called_once_with(
            ["gconftool-2", "--unset", "/apps/foo/bar"], timeout=5.0
        )

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_unset_failure(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """A refused unset raises StoreError."""
        mock_run.return_value = _fail("Error unsetting `/apps/foo/bar'\n")

        with pytest.raises(StoreError, match="Error unsetting"):
            store.unset("/apps/foo/bar")

    @patch("gconfcleaner.store.gconftool.run_command")
    def test_sync_runs_nothing(self, mock_run: MagicMock, store: GConfToolStore) -> None:
        """Sync does not spawn a process."""
        store.suggest_sync()

        mock_run.assert_not_called()
