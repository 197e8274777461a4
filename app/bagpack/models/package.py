"""Package models for inventory collection.

This module defines the core data structures for representing
installed packages reported by the supported package managers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PackageManager(str, Enum):
    """Enumeration of supported package managers.

    The set is closed: supporting another manager means adding a probe
    for it and registering it with the collector.
    """

    BREW = "brew"
    NPM = "npm"
    PIP = "pip"

    @property
    def label(self) -> str:
        """Return the human-readable name shown in the UI."""
        return _MANAGER_LABELS[self]


_MANAGER_LABELS: dict[PackageManager, str] = {
    PackageManager.BREW: "Homebrew",
    PackageManager.NPM: "npm (global)",
    PackageManager.PIP: "pip (system)",
}


class PackageStatus(str, Enum):
    """Update state of an installed package.

    UNKNOWN is reserved for data sources that cannot tell; the current
    probes only ever produce CURRENT or OUTDATED.
    """

    CURRENT = "current"
    OUTDATED = "outdated"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """One installed package as reported by one package manager.

    Attributes:
        name: Package name (e.g., 'wget', 'typescript')
        current_version: Installed version string
        manager: Package manager that reported this package
        status: Update state of the package
        latest_version: Latest available version (if reported as outdated)
        installed_at: ISO format installation timestamp (if available)
    """

    name: str
    current_version: str
    manager: PackageManager
    status: PackageStatus
    latest_version: str | None = field(default=None)
    installed_at: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if not self.current_version:
            msg = "Package version cannot be empty"
            raise ValueError(msg)

    @property
    def is_outdated(self) -> bool:
        """Check if a newer version is available."""
        return self.status == PackageStatus.OUTDATED

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "current_version": self.current_version,
            "latest_version": self.latest_version,
            "installed_at": self.installed_at,
            "status": self.status.value,
            "manager": self.manager.value,
        }
