"""Clean command implementation.

Scans for unknown entries, asks for confirmation and unsets them.
"""

from typing import Annotated

import typer

from gconfcleaner.cli.display import print_pairs_table, print_stats, print_unset_results
from gconfcleaner.cli.session import collect_unknown_pairs, open_scanned_cleaner
from gconfcleaner.utils.formatting import print_info, print_success, print_warning

app = typer.Typer(
    help="Unset configuration entries without a schema.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean_entries(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be unset."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Unset every unknown entry after confirmation."""
    if ctx.invoked_subcommand is not None:
        return

    with open_scanned_cleaner(ctx) as cleaner:
        report = collect_unknown_pairs(cleaner)

        if not report.pairs:
            print_success("No unknown entries found.")
            print_stats(cleaner.stats)
            return

        title = "Entries to Unset (dry-run)" if dry_run else "Entries to Unset"
        print_pairs_table(report.pairs, title=title)

        if not dry_run and not yes:
            confirmed = typer.confirm(
                f"\nUnset {len(report.pairs)} key(s)?",
                default=False,
            )
            if not confirmed:
                print_info("Aborted.")
                raise typer.Exit(code=0)

        results = cleaner.unset_keys(report.keys, dry_run=dry_run)
        print_unset_results(results)

        if not dry_run:
            sync_result = cleaner.sync()
            if sync_result.failed:
                print_warning(f"Sync failed: {sync_result.error}")

    if any(r.failed for r in results):
        raise typer.Exit(code=1)
