"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules.
"""

from enum import Enum
from pathlib import Path

import typer

from bagpack.core.config import BagpackConfig, ConfigError, load_config
from bagpack.models.package import PackageManager
from bagpack.utils.formatting import print_error


class ManagerChoice(str, Enum):
    """Package manager selection for CLI commands."""

    BREW = "brew"
    NPM = "npm"
    PIP = "pip"
    ALL = "all"

    def to_managers(self) -> list[PackageManager] | None:
        """Return the selected managers, or None for all of them."""
        if self == ManagerChoice.ALL:
            return None
        return [PackageManager(self.value)]


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_config_path(ctx: typer.Context) -> Path | None:
    """Return the --config path given to the main command, if any."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return obj.get("config_path")
    return None


def require_config(ctx: typer.Context) -> BagpackConfig:
    """Load the configuration or exit with an error.

    Args:
        ctx: Typer context carrying the global --config option.

    Returns:
        The loaded configuration (defaults if no file exists).

    Raises:
        typer.Exit: If the configuration file is invalid.
    """
    try:
        return load_config(get_config_path(ctx))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
