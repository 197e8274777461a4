"""Config command implementation.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import typer

from bagpack.cli.types import get_config_path, require_config
from bagpack.core.config import BagpackConfig, ConfigError, save_config
from bagpack.core.paths import get_config_path as get_default_config_path
from bagpack.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the configuration file.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as JSON."""
    config = require_config(ctx)
    console.print_json(config.model_dump_json())


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write the default configuration file."""
    path = get_config_path(ctx) or get_default_config_path()

    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_config(BagpackConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Config written to {saved}")
