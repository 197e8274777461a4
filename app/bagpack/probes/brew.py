"""Homebrew probe implementation.

Lists installed formulae with ``brew list --versions`` and their latest
versions with ``brew outdated --json=v2``.
"""

import logging

from bagpack.models.package import PackageManager
from bagpack.probes.base import ParseFailure, Probe, non_blank

logger = logging.getLogger(__name__)


class BrewProbe(Probe):
    """Probe for Homebrew formulae.

    ``brew list --versions`` prints one ``<name> <version...>`` line per
    formula; when several versions are installed the last one wins.
    """

    default_executable = "brew"

    @property
    def manager(self) -> PackageManager:
        """Return BREW as the package manager."""
        return PackageManager.BREW

    def list_installed(self) -> dict[str, str]:
        """Parse ``brew list --versions`` output.

        Raises:
            CommandFailure: If brew cannot be run or exits non-zero.
        """
        result = self._run("list", "--versions")

        installed: dict[str, str] = {}
        for line in result.stdout.splitlines():
            parts = line.split()
            if not parts:
                continue
            if len(parts) < 2:
                logger.debug("Skipping brew line without version: %r", line[:100])
                continue
            installed[parts[0]] = parts[-1]
        return installed

    def list_outdated(self) -> dict[str, str]:
        """Parse ``brew outdated --json=v2`` output.

        Each formula's latest version is ``latest_version`` when present,
        otherwise ``current_version``. Blank strings count as missing.

        Raises:
            CommandFailure: If brew cannot be run or exits non-zero.
            ParseFailure: If the output is not a JSON object with a formulae list.
        """
        result = self._run("outdated", "--json=v2")
        if not result.stdout.strip():
            return {}

        data = self._load_json(result.stdout, "brew outdated")
        if not isinstance(data, dict):
            msg = "Unexpected brew outdated output: expected a JSON object"
            raise ParseFailure(msg)

        formulae = data.get("formulae") or []
        if not isinstance(formulae, list):
            msg = "Unexpected brew outdated output: 'formulae' is not a list"
            raise ParseFailure(msg)

        latest: dict[str, str] = {}
        for formula in formulae:
            if not isinstance(formula, dict):
                logger.debug("Skipping non-object brew formula entry: %r", formula)
                continue

            name = non_blank(formula.get("name"))
            version = non_blank(formula.get("latest_version")) or non_blank(
                formula.get("current_version")
            )
            if name is None or version is None:
                logger.debug("Skipping brew formula without name/version: %r", formula)
                continue
            latest[name] = version
        return latest
