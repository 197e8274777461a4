"""CLI commands for bagpack.

This package contains all subcommand implementations.
"""

from bagpack.cli.commands import config, inventory, managers

__all__ = ["config", "inventory", "managers"]
