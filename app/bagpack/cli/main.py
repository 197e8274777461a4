"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from bagpack import __version__
from bagpack.cli.commands import config, inventory, managers
from bagpack.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="bagpack",
    help="Installed packages and their updates across brew, npm and pip.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"bagpack version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to config file (default: ~/.config/bagpack/config.toml).",
        ),
    ] = None,
) -> None:
    """bagpack - Installed packages and their updates.

    Queries Homebrew, global npm and pip, and reports which
    installed packages have newer versions available.
    """
    _configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.add_typer(inventory.app, name="inventory")
app.add_typer(managers.app, name="managers")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
