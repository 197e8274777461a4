"""Collection configuration and settings.

This module provides the configuration model and I/O functions for
inventory collection: which managers to query, which executable to run
for each of them, an optional per-command timeout and whether probes
run in parallel.

Configuration is stored in ~/.config/bagpack/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bagpack.core.paths import get_config_path
from bagpack.models.package import PackageManager

logger = logging.getLogger(__name__)


class ManagerSettings(BaseModel):
    """Settings for a single package manager.

    Attributes:
        enabled: Whether the manager is queried during collection.
        executable: Program to run instead of the manager's default name.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: Annotated[
        bool,
        Field(description="Query this manager during collection"),
    ] = True
    executable: Annotated[
        str | None,
        Field(min_length=1, description="Executable name or path (None = default)"),
    ] = None


class BagpackConfig(BaseModel):
    """Configuration for inventory collection.

    Attributes:
        brew: Homebrew settings.
        npm: npm settings.
        pip: pip settings.
        command_timeout: Timeout in seconds for each external command (None = no timeout).
        parallel: Run the probes concurrently.
    """

    model_config = ConfigDict(extra="forbid")

    brew: ManagerSettings = Field(default_factory=ManagerSettings)
    npm: ManagerSettings = Field(default_factory=ManagerSettings)
    pip: ManagerSettings = Field(default_factory=ManagerSettings)
    command_timeout: Annotated[
        float | None,
        Field(gt=0, description="Per-command timeout in seconds"),
    ] = None
    parallel: Annotated[
        bool,
        Field(description="Run probes concurrently"),
    ] = False

    def settings_for(self, manager: PackageManager) -> ManagerSettings:
        """Return the settings block for a manager."""
        settings: ManagerSettings = getattr(self, manager.value)
        return settings

    @property
    def enabled_managers(self) -> list[PackageManager]:
        """Return the enabled managers in collection order."""
        return [m for m in PackageManager if self.settings_for(m).enabled]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> BagpackConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses default config path.

    Returns:
        Validated BagpackConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return BagpackConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return BagpackConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: BagpackConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The BagpackConfig object to save.
        path: Path to save the config. If None, uses default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
