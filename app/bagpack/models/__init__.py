"""Data models for bagpack.

This module exports the core data structures used throughout the application.
"""

from bagpack.models.inventory import CollectionSummary, CollectionWarning, InventorySnapshot
from bagpack.models.package import PackageManager, PackageRecord, PackageStatus

__all__ = [
    "CollectionSummary",
    "CollectionWarning",
    "InventorySnapshot",
    "PackageManager",
    "PackageRecord",
    "PackageStatus",
]
