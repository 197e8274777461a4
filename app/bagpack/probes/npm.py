"""npm probe implementation.

Lists globally installed packages with ``npm ls -g --depth=0 --json``
and their latest versions with ``npm outdated -g --json``.
"""

import logging

from bagpack.models.package import PackageManager
from bagpack.probes.base import ParseFailure, Probe, non_blank

logger = logging.getLogger(__name__)

# npm outdated exits 1 when at least one package is outdated
_OUTDATED_EXIT_CODES = frozenset({1})


class NpmProbe(Probe):
    """Probe for globally installed npm packages."""

    default_executable = "npm"

    @property
    def manager(self) -> PackageManager:
        """Return NPM as the package manager."""
        return PackageManager.NPM

    def list_installed(self) -> dict[str, str]:
        """Parse the ``dependencies`` map of ``npm ls`` JSON output.

        Dependencies without a version are dropped.

        Raises:
            CommandFailure: If npm cannot be run or exits non-zero.
            ParseFailure: If the output is not a JSON object.
        """
        result = self._run("ls", "-g", "--depth=0", "--json")

        data = self._load_json(result.stdout, "npm ls")
        if not isinstance(data, dict):
            msg = "Unexpected npm ls output: expected a JSON object"
            raise ParseFailure(msg)

        dependencies = data.get("dependencies") or {}
        if not isinstance(dependencies, dict):
            msg = "Unexpected npm ls output: 'dependencies' is not an object"
            raise ParseFailure(msg)

        installed: dict[str, str] = {}
        for name, details in dependencies.items():
            version = non_blank(details.get("version")) if isinstance(details, dict) else None
            if version is None:
                logger.debug("Skipping npm package without version: %s", name)
                continue
            installed[name] = version
        return installed

    def list_outdated(self) -> dict[str, str]:
        """Parse ``npm outdated -g --json`` output.

        Raises:
            CommandFailure: If npm cannot be run or exits with a code other than 0 or 1.
            ParseFailure: If non-blank output is not a JSON object.
        """
        result = self._run("outdated", "-g", "--json", allowed_exit_codes=_OUTDATED_EXIT_CODES)
        if not result.stdout.strip():
            return {}

        data = self._load_json(result.stdout, "npm outdated")
        if not isinstance(data, dict):
            msg = "Unexpected npm outdated output: expected a JSON object"
            raise ParseFailure(msg)

        latest: dict[str, str] = {}
        for name, details in data.items():
            version = non_blank(details.get("latest")) if isinstance(details, dict) else None
            if version is None:
                logger.debug("Skipping npm outdated entry without latest: %s", name)
                continue
            latest[name] = version
        return latest
