"""Inventory collection across all package managers.

Runs every probe, merges the successful results into one snapshot and
turns each failed probe into a warning. Collection never raises.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import UTC, datetime

from bagpack.core.config import BagpackConfig
from bagpack.models.inventory import CollectionSummary, CollectionWarning, InventorySnapshot
from bagpack.models.package import PackageManager, PackageRecord
from bagpack.probes.base import CollectionError, Probe
from bagpack.probes.registry import get_probes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProbeSuccess:
    """A probe that returned its records."""

    manager: PackageManager
    packages: list[PackageRecord]


@dataclass(frozen=True, slots=True)
class ProbeFailure:
    """A probe that could not produce any records."""

    manager: PackageManager
    message: str


ProbeOutcome = ProbeSuccess | ProbeFailure


def run_probe(probe: Probe) -> ProbeOutcome:
    """Run a single probe and capture its result as an outcome.

    Args:
        probe: The probe to run.

    Returns:
        ProbeSuccess with the records, or ProbeFailure with the reason.
    """
    manager = probe.manager
    try:
        packages = probe.collect()
    except CollectionError as e:
        logger.warning("%s probe failed: %s", manager.value, e)
        return ProbeFailure(manager=manager, message=str(e))
    except Exception as e:
        # Collection must always return a summary
        logger.exception("%s probe crashed", manager.value)
        return ProbeFailure(manager=manager, message=f"unexpected error: {e}")

    logger.debug("%s probe returned %d packages", manager.value, len(packages))
    return ProbeSuccess(manager=manager, packages=packages)


def _run_sequential(probes: Sequence[Probe]) -> list[ProbeOutcome]:
    return [run_probe(probe) for probe in probes]


def _run_parallel(probes: Sequence[Probe]) -> list[ProbeOutcome]:
    """Run probes on one thread each, returning outcomes in probe order."""
    if not probes:
        return []
    with ThreadPoolExecutor(max_workers=len(probes)) as executor:
        futures = [executor.submit(run_probe, probe) for probe in probes]
        return [future.result() for future in futures]


def _timestamp() -> str | None:
    """Return the current instant in ISO 8601 format, or None on failure."""
    try:
        return datetime.now(UTC).isoformat()
    except (ValueError, OverflowError, OSError) as e:
        logger.warning("Could not format collection timestamp: %s", e)
        return None


def collect_inventory(
    probes: Sequence[Probe] | None = None,
    *,
    parallel: bool | None = None,
    config: BagpackConfig | None = None,
) -> CollectionSummary:
    """Collect installed packages from every package manager.

    Probes run in the order given (brew, npm, pip by default). Records are
    appended in that order even when probes run concurrently. A failing
    probe contributes a warning instead of records.

    Args:
        probes: Probes to run. If None, built from ``config``.
        parallel: Run probes concurrently. If None, taken from ``config``.
        config: Collection settings. Defaults apply if None.

    Returns:
        CollectionSummary with the snapshot and one warning per failed probe.
    """
    config = config or BagpackConfig()
    if probes is None:
        probes = get_probes(config)
    if parallel is None:
        parallel = config.parallel

    snapshot = InventorySnapshot(generated_at=_timestamp())
    warnings: list[CollectionWarning] = []

    outcomes = _run_parallel(probes) if parallel else _run_sequential(probes)

    for outcome in outcomes:
        if isinstance(outcome, ProbeSuccess):
            snapshot.extend(outcome.packages)
        else:
            warnings.append(CollectionWarning(manager=outcome.manager, message=outcome.message))

    return CollectionSummary(snapshot=snapshot, warnings=tuple(warnings))
