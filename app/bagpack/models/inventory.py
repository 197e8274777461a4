"""Inventory result models.

This module defines the snapshot produced by one collection pass and
the summary handed to callers, including per-manager warnings.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from bagpack.models.package import PackageManager, PackageRecord, PackageStatus


@dataclass(slots=True)
class InventorySnapshot:
    """Aggregated package records from one collection pass.

    Attributes:
        generated_at: ISO 8601 timestamp of the collection (None if unavailable).
        packages: Records grouped by manager in collection order.
    """

    generated_at: str | None = None
    packages: list[PackageRecord] = field(default_factory=list)

    def extend(self, records: list[PackageRecord]) -> None:
        """Append records from one probe."""
        self.packages.extend(records)

    def outdated_count(self) -> int:
        """Return the number of packages flagged as outdated."""
        return sum(1 for pkg in self.packages if pkg.status == PackageStatus.OUTDATED)

    def for_manager(self, manager: PackageManager) -> list[PackageRecord]:
        """Return the records reported by a single manager."""
        return [pkg for pkg in self.packages if pkg.manager == manager]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generated_at": self.generated_at,
            "packages": [pkg.to_dict() for pkg in self.packages],
        }


@dataclass(frozen=True, slots=True)
class CollectionWarning:
    """A package manager that could not be queried.

    Attributes:
        manager: The manager whose probe failed.
        message: Human-readable reason for the failure.
    """

    manager: PackageManager
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"manager": self.manager.value, "message": self.message}


@dataclass(frozen=True, slots=True)
class CollectionSummary:
    """Top-level result of a collection call.

    Attributes:
        snapshot: The collected packages and their timestamp.
        warnings: One entry per manager that failed entirely.
    """

    snapshot: InventorySnapshot
    warnings: tuple[CollectionWarning, ...] = ()

    def outdated_count(self) -> int:
        """Return the number of outdated packages in the snapshot."""
        return self.snapshot.outdated_count()

    @property
    def failed_managers(self) -> list[PackageManager]:
        """Return the managers that produced a warning."""
        return [warning.manager for warning in self.warnings]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "snapshot": self.snapshot.to_dict(),
            "warnings": [warning.to_dict() for warning in self.warnings],
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
