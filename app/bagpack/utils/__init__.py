"""Utility modules for bagpack.

This module exports commonly used utility functions.
"""

from bagpack.utils.formatting import (
    console,
    create_package_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from bagpack.utils.shell import (
    CommandResult,
    CommandTimeout,
    DecodeFailure,
    NonSuccessExit,
    ProcessError,
    SpawnFailure,
    command_exists,
    run_command,
)

__all__ = [
    "CommandResult",
    "CommandTimeout",
    "DecodeFailure",
    "NonSuccessExit",
    "ProcessError",
    "SpawnFailure",
    "command_exists",
    "console",
    "create_package_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
