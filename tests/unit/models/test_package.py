"""Unit tests for package models.

Tests for PackageRecord, PackageManager and PackageStatus.
"""

import dataclasses

import pytest
from bagpack.models.package import PackageManager, PackageRecord, PackageStatus


class TestPackageManager:
    """Tests for PackageManager enum."""

    def test_values_are_lowercase(self) -> None:
        """Enum values serialize as lowercase names."""
        assert [m.value for m in PackageManager] == ["brew", "npm", "pip"]

    def test_labels(self) -> None:
        """Each manager has a display label."""
        assert PackageManager.BREW.label == "Homebrew"
        assert PackageManager.NPM.label == "npm (global)"
        assert PackageManager.PIP.label == "pip (system)"


class TestPackageStatus:
    """Tests for PackageStatus enum."""

    def test_values(self) -> None:
        """Status values serialize as lowercase names."""
        assert PackageStatus.CURRENT.value == "current"
        assert PackageStatus.OUTDATED.value == "outdated"
        assert PackageStatus.UNKNOWN.value == "unknown"


class TestPackageRecord:
    """Tests for PackageRecord dataclass."""

    def test_create_minimal(self) -> None:
        """Record can be created with required fields only."""
        record = PackageRecord(
            name="requests",
            current_version="2.32.3",
            manager=PackageManager.PIP,
            status=PackageStatus.CURRENT,
        )

        assert record.latest_version is None
        assert record.installed_at is None
        assert record.is_outdated is False

    def test_is_outdated(self) -> None:
        """is_outdated reflects the OUTDATED status."""
        record = PackageRecord(
            name="wget",
            current_version="1.24.5",
            manager=PackageManager.BREW,
            status=PackageStatus.OUTDATED,
            latest_version="1.24.6",
        )
        assert record.is_outdated is True

    def test_immutable(self) -> None:
        """Records cannot be modified after construction."""
        record = PackageRecord(
            name="wget",
            current_version="1.24.5",
            manager=PackageManager.BREW,
            status=PackageStatus.CURRENT,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "curl"  # type: ignore[misc]

    def test_empty_name_rejected(self) -> None:
        """Empty package names are rejected."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            PackageRecord(
                name="",
                current_version="1.0",
                manager=PackageManager.NPM,
                status=PackageStatus.CURRENT,
            )

    def test_empty_version_rejected(self) -> None:
        """Empty versions are rejected."""
        with pytest.raises(ValueError, match="version cannot be empty"):
            PackageRecord(
                name="typescript",
                current_version="",
                manager=PackageManager.NPM,
                status=PackageStatus.CURRENT,
            )

    def test_to_dict(self) -> None:
        """to_dict uses boundary field names and lowercase enum values."""
        record = PackageRecord(
            name="wget",
            current_version="1.24.5",
            manager=PackageManager.BREW,
            status=PackageStatus.OUTDATED,
            latest_version="1.24.6",
        )

        assert record.to_dict() == {
            "name": "wget",
            "current_version": "1.24.5",
            "latest_version": "1.24.6",
            "installed_at": None,
            "status": "outdated",
            "manager": "brew",
        }
