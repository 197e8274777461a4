"""Inventory command implementation.

Collects installed packages from every package manager and shows
which of them have newer versions available.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from bagpack.cli.types import ManagerChoice, OutputFormat, require_config
from bagpack.core.collector import collect_inventory
from bagpack.models.inventory import CollectionSummary
from bagpack.models.package import PackageManager, PackageRecord
from bagpack.probes.registry import get_probes
from bagpack.utils.formatting import (
    console,
    create_package_table,
    format_package_row,
    print_error,
    print_info,
    print_warning,
)

app = typer.Typer(
    help="Show installed packages and available updates.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_inventory(
    ctx: typer.Context,
    manager: Annotated[
        ManagerChoice,
        typer.Option(
            "--manager",
            "-m",
            help="Package manager to query: brew, npm, pip, or all.",
            case_sensitive=False,
        ),
    ] = ManagerChoice.ALL,
    outdated_only: Annotated[
        bool,
        typer.Option(
            "--outdated-only",
            "-o",
            help="Only show packages with a newer version available.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the full inventory to a JSON file.",
        ),
    ] = None,
    parallel: Annotated[
        bool | None,
        typer.Option(
            "--parallel/--sequential",
            help="Query managers concurrently (default from config).",
        ),
    ] = None,
) -> None:
    """Collect and display installed packages.

    Examples:
        bagpack inventory                      # All managers, grouped tables
        bagpack inventory --manager npm        # Global npm packages only
        bagpack inventory --outdated-only      # Only packages with updates
        bagpack inventory --format json        # Output as JSON
        bagpack inventory --export inv.json    # Export to JSON file
    """
    # Skip if a subcommand is being invoked
    if ctx.invoked_subcommand is not None:
        return

    config = require_config(ctx)
    probes = get_probes(config, manager.to_managers())
    if not probes:
        print_error("No package managers are enabled.")
        raise typer.Exit(code=1)

    summary = collect_inventory(probes, parallel=parallel, config=config)

    # Export always contains the full, unfiltered inventory
    if export_path is not None:
        _export_summary(summary, export_path)

    if output_format == OutputFormat.JSON:
        data = summary.to_dict()
        if outdated_only:
            data["snapshot"]["packages"] = [
                p for p in data["snapshot"]["packages"] if p["status"] == "outdated"
            ]
        console.print_json(json.dumps(data))
    else:
        for warning in summary.warnings:
            print_warning(f"{warning.manager.label}: {warning.message}")
        _print_tables(summary, [p.manager for p in probes], outdated_only)
        _print_summary(summary)

    if len(summary.warnings) == len(probes):
        raise typer.Exit(code=1)


def _export_summary(summary: CollectionSummary, export_path: Path) -> None:
    """Write the summary to a JSON file.

    Raises:
        typer.Exit: If the path is a directory or cannot be written.
    """
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(summary.to_json())
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
    print_info(f"Inventory exported to {export_path}")


def _print_tables(
    summary: CollectionSummary,
    managers: list[PackageManager],
    outdated_only: bool,
) -> None:
    """Print one table per successfully queried manager."""
    failed = set(summary.failed_managers)

    for manager in managers:
        if manager in failed:
            continue

        packages: list[PackageRecord] = summary.snapshot.for_manager(manager)
        if outdated_only:
            packages = [p for p in packages if p.is_outdated]

        if not packages:
            console.print(f"[dim]{manager.label}: no packages to show.[/]")
            continue

        table = create_package_table(f"{manager.label} ({len(packages)})")
        for pkg in packages:
            table.add_row(*format_package_row(pkg))
        console.print(table)


def _print_summary(summary: CollectionSummary) -> None:
    """Print the package and outdated totals."""
    total = len(summary.snapshot.packages)
    outdated = summary.outdated_count()
    parts = [f"{total} packages, {outdated} outdated"]

    if summary.snapshot.generated_at:
        parts.append(f"(collected {summary.snapshot.generated_at})")
    if summary.warnings:
        parts.append(f"({len(summary.warnings)} manager(s) unavailable)")

    console.print(f"\n[dim]{' '.join(parts)}[/]")
