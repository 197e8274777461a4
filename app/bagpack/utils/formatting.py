"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bagpack.core.theme import get_theme, status_style

if TYPE_CHECKING:
    from bagpack.models.package import PackageRecord


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_package_table(title: str = "Installed Packages") -> Table:
    """Create a pre-configured table for displaying packages.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for package display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("", width=1, no_wrap=True)
    table.add_column("Name", style="package.name", no_wrap=True)
    table.add_column("Installed", style="package.version")
    table.add_column("Latest", style="package.version")
    table.add_column("Status", no_wrap=True)
    return table


def format_package_row(pkg: PackageRecord) -> tuple[str, str, str, str, str]:
    """Format a package as a table row with status styling.

    Outdated packages get a filled circle, everything else an empty one.

    Args:
        pkg: The package record to format.

    Returns:
        Tuple of (icon, name, installed, latest, status) with Rich markup.
    """
    style = status_style(pkg.status)
    icon = f"[{style}]●[/]" if pkg.is_outdated else f"[{style}]○[/]"
    name = f"[{style}]{escape(pkg.name)}[/]" if pkg.is_outdated else escape(pkg.name)
    latest = pkg.latest_version or "-"
    status = f"[{style}]{pkg.status.value}[/]"
    return (icon, name, pkg.current_version, latest, status)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
