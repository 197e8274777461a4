"""Query entry point for embedding applications.

Frontends call ``get_inventory()`` and render the returned structure.
"""

import logging
from typing import Any

from bagpack.core.collector import collect_inventory
from bagpack.core.config import BagpackConfig, ConfigError, load_config

logger = logging.getLogger(__name__)


def get_inventory() -> dict[str, Any]:
    """Collect the inventory and return it in its JSON-ready form.

    Uses the user's configuration file when present. An invalid
    configuration falls back to defaults so the query always answers.

    Returns:
        Dictionary with ``snapshot`` and ``warnings`` keys; enum values
        are lowercase strings.
    """
    try:
        config = load_config()
    except ConfigError as e:
        logger.warning("Ignoring invalid configuration: %s", e)
        config = BagpackConfig()

    return collect_inventory(config=config).to_dict()
