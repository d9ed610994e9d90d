"""Unit tests for shared CLI display functions."""

from unittest.mock import MagicMock, patch

from gconfcleaner.cleaner.models import CleanerActionResult
from gconfcleaner.cli.display import print_unset_results
from rich.table import Table


def _printed_table(mock_console: MagicMock) -> Table:
    table = mock_console.print.call_args_list[0].args[0]
    assert isinstance(table, Table)
    return table


class TestPrintUnsetResults:
    """Tests for print_unset_results."""

    @patch("gconfcleaner.cli.display.print_warning")
    @patch("gconfcleaner.cli.display.console")
    def test_unset_keys_use_removed_style(
        self, mock_console: MagicMock, _mock_warning: MagicMock
    ) -> None:
        """Successfully unset keys are marked as removed; failed ones are not."""
        results = [
            CleanerActionResult(target="/apps/foo/bar", success=True),
            CleanerActionResult(target="/apps/foo/baz", success=False, error="denied"),
        ]

        print_unset_results(results)

        keys = list(_printed_table(mock_console).columns[1].cells)
        assert keys == ["[removed]/apps/foo/bar[/removed]", "/apps/foo/baz"]

    @patch("gconfcleaner.cli.display.print_info")
    @patch("gconfcleaner.cli.display.console")
    def test_dry_run_keys_are_plain(self, mock_console: MagicMock, mock_info: MagicMock) -> None:
        """Dry-run rows are not styled as removed."""
        print_unset_results([CleanerActionResult(target="/a/k", success=True, dry_run=True)])

        assert list(_printed_table(mock_console).columns[1].cells) == ["/a/k"]
        mock_info.assert_called_once_with("Dry-run: 1 key(s) would be unset.")
