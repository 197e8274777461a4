"""Abstract base class for package manager probes.

This module defines the Probe interface that every package manager
probe implements, and the errors a probe can fail with.
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import Any

from bagpack.models.package import PackageManager, PackageRecord, PackageStatus
from bagpack.utils.shell import CommandResult, ProcessError, command_exists, run_command

logger = logging.getLogger(__name__)


class CollectionError(Exception):
    """Base exception for probe failures."""


class CommandFailure(CollectionError):
    """Raised when a package manager command fails to run or exits badly."""

    def __init__(self, error: ProcessError) -> None:
        self.error = error
        super().__init__(str(error))


class ParseFailure(CollectionError):
    """Raised when package manager output has an unexpected structure."""


class Probe(ABC):
    """Abstract base class for all package manager probes.

    A probe lists the installed packages of one manager, asks the manager
    which of them are outdated and merges both answers into records.
    Lookup tables live only for the duration of ``collect()``.

    Example:
        >>> probe = BrewProbe()
        >>> for record in probe.collect():
        ...     print(f"{record.name}: {record.current_version}")
    """

    #: Program invoked when no executable override is configured.
    default_executable: str

    def __init__(self, executable: str | None = None, timeout: float | None = None) -> None:
        self.executable = executable or self.default_executable
        self.timeout = timeout

    @property
    @abstractmethod
    def manager(self) -> PackageManager:
        """Return the package manager this probe handles."""

    @abstractmethod
    def list_installed(self) -> dict[str, str]:
        """Query installed packages.

        Returns:
            Mapping of package name to installed version.

        Raises:
            CollectionError: If the command fails or its output is invalid.
        """

    @abstractmethod
    def list_outdated(self) -> dict[str, str]:
        """Query packages with a newer version available.

        Returns:
            Mapping of package name to latest version. Empty if nothing
            is outdated.

        Raises:
            CollectionError: If the command fails or its output is invalid.
        """

    def is_available(self) -> bool:
        """Check if the manager executable is on PATH."""
        return command_exists(self.executable)

    def collect(self) -> list[PackageRecord]:
        """Collect all installed packages with their update status.

        The outdated query is skipped when nothing is installed.

        Returns:
            One PackageRecord per installed package.

        Raises:
            CollectionError: If either query fails.
        """
        installed = self.list_installed()
        if not installed:
            logger.debug("%s reports no installed packages", self.manager.value)
            return []

        latest = self.list_outdated()
        return self._build_records(installed, latest)

    def _build_records(
        self,
        installed: dict[str, str],
        latest: dict[str, str],
    ) -> list[PackageRecord]:
        """Cross-reference installed versions against latest versions.

        Args:
            installed: Mapping of package name to installed version.
            latest: Mapping of package name to latest version.

        Returns:
            Records in installed-map order.
        """
        records: list[PackageRecord] = []
        for name, current_version in installed.items():
            latest_version = latest.get(name)
            if latest_version is not None and latest_version != current_version:
                status = PackageStatus.OUTDATED
            else:
                status = PackageStatus.CURRENT

            records.append(
                PackageRecord(
                    name=name,
                    current_version=current_version,
                    manager=self.manager,
                    status=status,
                    latest_version=latest_version,
                )
            )
        return records

    def _run(self, *args: str, allowed_exit_codes: Collection[int] = ()) -> CommandResult:
        """Run the manager executable with the given arguments.

        Raises:
            CommandFailure: If the process layer reports any failure.
        """
        try:
            return run_command(
                [self.executable, *args],
                allowed_exit_codes=allowed_exit_codes,
                timeout=self.timeout,
            )
        except ProcessError as e:
            raise CommandFailure(e) from e

    def _load_json(self, text: str, what: str) -> Any:
        """Parse command output as JSON.

        Args:
            text: Raw command output.
            what: Command description used in the error message.

        Raises:
            ParseFailure: If the output is not valid JSON.
        """
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            msg = f"Failed to parse {what} JSON: {e}"
            raise ParseFailure(msg) from e


def non_blank(value: object) -> str | None:
    """Return ``value`` stripped if it is a string with visible content, else None."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
