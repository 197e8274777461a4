"""pip probe implementation.

Lists installed distributions with ``pip list --format=json`` and the
outdated ones with ``pip list --outdated --format=json``.
"""

import logging
from typing import Any

from bagpack.models.package import PackageManager
from bagpack.probes.base import ParseFailure, Probe, non_blank

logger = logging.getLogger(__name__)


class PipProbe(Probe):
    """Probe for pip-installed Python distributions."""

    default_executable = "pip"

    @property
    def manager(self) -> PackageManager:
        """Return PIP as the package manager."""
        return PackageManager.PIP

    def list_installed(self) -> dict[str, str]:
        """Parse ``pip list --format=json`` output.

        Raises:
            CommandFailure: If pip cannot be run or exits non-zero.
            ParseFailure: If the output is not a JSON array.
        """
        result = self._run("list", "--format=json")
        data = self._load_json(result.stdout, "pip list")
        return self._parse_entries(data, "pip list", "version")

    def list_outdated(self) -> dict[str, str]:
        """Parse ``pip list --outdated --format=json`` output.

        Raises:
            CommandFailure: If pip cannot be run or exits non-zero.
            ParseFailure: If non-blank output is not a JSON array.
        """
        result = self._run("list", "--outdated", "--format=json")
        if not result.stdout.strip():
            return {}

        data = self._load_json(result.stdout, "pip outdated")
        return self._parse_entries(data, "pip outdated", "latest_version")

    def _parse_entries(self, data: Any, what: str, version_key: str) -> dict[str, str]:
        """Build a name to version mapping from a pip JSON array.

        Args:
            data: Decoded JSON document.
            what: Command description used in messages.
            version_key: Entry field holding the version.

        Returns:
            Mapping of package name to version.

        Raises:
            ParseFailure: If ``data`` is not a list.
        """
        if not isinstance(data, list):
            msg = f"Unexpected {what} output: expected a JSON array"
            raise ParseFailure(msg)

        versions: dict[str, str] = {}
        for entry in data:
            if not isinstance(entry, dict):
                logger.debug("Skipping non-object %s entry: %r", what, entry)
                continue

            name = non_blank(entry.get("name"))
            version = non_blank(entry.get(version_key))
            if name is None or version is None:
                logger.debug("Skipping %s entry without name/%s: %r", what, version_key, entry)
                continue
            versions[name] = version
        return versions
