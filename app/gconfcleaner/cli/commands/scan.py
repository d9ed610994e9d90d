"""Scan command implementation.

Lists every configuration entry that has a value but no schema.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer

from gconfcleaner.cli.display import print_pairs_table, print_stats
from gconfcleaner.cli.session import ScanReport, collect_unknown_pairs, open_scanned_cleaner
from gconfcleaner.cleaner import ScanStats, UnknownPair
from gconfcleaner.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Scan the configuration store for entries without a schema.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


@app.callback(invoke_without_command=True)
def scan_entries(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            min=1,
            help="Limit number of entries to display.",
        ),
    ] = None,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export all results to a JSON file.",
        ),
    ] = None,
) -> None:
    """Scan and display unknown configuration entries.

    Examples:
        gconf-cleaner scan                       # Scan the live GConf store
        gconf-cleaner --dump dump.toml scan      # Scan a TOML dump
        gconf-cleaner scan --format json         # Output as JSON
        gconf-cleaner scan --export unknown.json # Export to JSON file
    """
    if ctx.invoked_subcommand is not None:
        return

    with open_scanned_cleaner(ctx) as cleaner:
        report = collect_unknown_pairs(cleaner)
        stats = cleaner.stats

    if export_path is not None:
        _export_results(report, stats, export_path)

    display = report.pairs[:limit] if limit else report.pairs

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(_to_dict(display, report, stats), default=str))
        return

    if not report.pairs:
        print_success("No unknown entries found.")
    else:
        print_pairs_table(display)
    print_stats(stats)

    if limit and len(display) < len(report.pairs):
        console.print(
            f"[dim](showing {len(display)} of {len(report.pairs)}, limited to {limit})[/dim]"
        )


def _to_dict(
    pairs: list[tuple[str, UnknownPair]],
    report: ScanReport,
    stats: ScanStats,
) -> dict[str, Any]:
    """Build the JSON document for scan output and export."""
    return {
        "stats": stats.to_dict(),
        "unknown": [
            {"directory": directory, "key": pair.key, "value": pair.value}
            for directory, pair in pairs
        ],
        "errors": [{"directory": e.path, "error": e.reason} for e in report.errors],
    }


def _export_results(report: ScanReport, stats: ScanStats, export_path: Path) -> None:
    """Export all unknown pairs to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    data = _to_dict(report.pairs, report, stats)
    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(data, indent=2, default=str))
        print_info(f"Scan results exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
