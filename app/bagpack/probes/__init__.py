"""Package manager probes.

This module exports the probe classes for querying installed packages.
"""

from bagpack.probes.base import CollectionError, CommandFailure, ParseFailure, Probe
from bagpack.probes.brew import BrewProbe
from bagpack.probes.npm import NpmProbe
from bagpack.probes.pip import PipProbe
from bagpack.probes.registry import PROBE_TYPES, get_probes

__all__ = [
    "PROBE_TYPES",
    "BrewProbe",
    "CollectionError",
    "CommandFailure",
    "NpmProbe",
    "ParseFailure",
    "PipProbe",
    "Probe",
    "get_probes",
]
