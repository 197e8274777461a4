"""Registry of probes in collection order."""

from bagpack.core.config import BagpackConfig
from bagpack.models.package import PackageManager
from bagpack.probes.base import Probe
from bagpack.probes.brew import BrewProbe
from bagpack.probes.npm import NpmProbe
from bagpack.probes.pip import PipProbe

# Iteration order of this mapping is the order of the collected package list
PROBE_TYPES: dict[PackageManager, type[Probe]] = {
    PackageManager.BREW: BrewProbe,
    PackageManager.NPM: NpmProbe,
    PackageManager.PIP: PipProbe,
}


def get_probes(
    config: BagpackConfig | None = None,
    managers: list[PackageManager] | None = None,
) -> list[Probe]:
    """Get probe instances for the enabled managers.

    Args:
        config: Configuration supplying executables and timeout. Defaults apply if None.
        managers: Restrict to these managers. If None, all enabled managers are used.

    Returns:
        List of probe instances in registry order.
    """
    config = config or BagpackConfig()
    probes: list[Probe] = []

    for manager, probe_type in PROBE_TYPES.items():
        if managers is not None and manager not in managers:
            continue

        settings = config.settings_for(manager)
        if not settings.enabled:
            continue

        probes.append(probe_type(executable=settings.executable, timeout=config.command_timeout))

    return probes
