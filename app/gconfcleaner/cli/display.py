"""Shared Rich display functions for scan and clean results."""

from rich.markup import escape
from rich.table import Table

from gconfcleaner.cleaner import CleanerActionResult, ScanStats, UnknownPair
from gconfcleaner.utils.formatting import (
    console,
    create_pairs_table,
    format_value,
    print_info,
    print_success,
    print_warning,
)


def print_pairs_table(
    pairs: list[tuple[str, UnknownPair]],
    title: str = "Unknown Entries",
) -> None:
    """Display unknown pairs grouped by directory.

    The directory is only printed on the first row of each group.
    """
    table = create_pairs_table(title)
    previous: str | None = None
    for directory, pair in pairs:
        name = pair.key.rsplit("/", 1)[-1]
        table.add_row(
            escape(directory) if directory != previous else "",
            escape(name),
            escape(format_value(pair.value)),
        )
        previous = directory
    console.print(table)


def print_stats(stats: ScanStats) -> None:
    """Print the scan counters as a dim summary line."""
    console.print(
        f"\n[dim]Scanned {stats.n_dirs} directories, {stats.n_pairs} entries, "
        f"{stats.n_unknown_pairs} unknown[/dim]"
    )


def print_unset_results(results: list[CleanerActionResult]) -> None:
    """Display the outcome of unset operations."""
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Key", no_wrap=True)
    table.add_column("Message")

    for result in results:
        key = escape(result.target)
        if result.dry_run:
            status = "[info]dry-run[/]"
            message = "would unset"
        elif result.success:
            status = "[success]OK[/]"
            message = ""
            key = f"[removed]{escape(result.target)}[/removed]"
        else:
            status = "[error]FAIL[/]"
            message = result.error or "Unknown error"
        table.add_row(status, key, f"[muted]{escape(message)}[/muted]")

    console.print(table)

    success_count = sum(1 for r in results if r.success and not r.dry_run)
    fail_count = sum(1 for r in results if r.failed)
    dry_count = sum(1 for r in results if r.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} key(s) would be unset.")
    elif fail_count:
        print_warning(f"{success_count} unset, {fail_count} failed")
    else:
        print_success(f"All {success_count} key(s) unset.")
