"""Managers command implementation.

Lists the supported package managers and whether they can be queried.
"""

import typer
from rich.table import Table

from bagpack.cli.types import require_config
from bagpack.probes.registry import PROBE_TYPES
from bagpack.utils.formatting import console

app = typer.Typer(
    help="List supported package managers.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_managers(ctx: typer.Context) -> None:
    """Show each package manager, its executable and availability."""
    if ctx.invoked_subcommand is not None:
        return

    config = require_config(ctx)

    table = Table(
        title="Package Managers",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Manager", style="package.name")
    table.add_column("Executable", style="package.version")
    table.add_column("Enabled")
    table.add_column("Available")

    for manager, probe_type in PROBE_TYPES.items():
        settings = config.settings_for(manager)
        probe = probe_type(executable=settings.executable)
        enabled = "[success]yes[/]" if settings.enabled else "[muted]no[/]"
        available = "[success]yes[/]" if probe.is_available() else "[error]no[/]"
        table.add_row(manager.label, probe.executable, enabled, available)

    console.print(table)
