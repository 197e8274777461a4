"""Theme management for the bagpack CLI.

Provides color theming with user override support via a TOML file.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from bagpack.core.paths import get_theme_path
from bagpack.models.package import PackageStatus

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Color configuration for the bagpack CLI.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    # Base colors
    text: str = "#ffffff"
    muted: str = "#a1a1aa"
    header: str = "#7de5ff"
    border: str = "#3f3f46"

    # Semantic colors
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Package status
    status_current: str = "#7de5ff"
    status_outdated: str = "#f97316"
    status_unknown: str = "#a1a1aa"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Load the colors section from a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Dictionary of color name to hex value, or None if loading failed.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse TOML file %s: %s", path, e)
        return None
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None

    colors_raw: object = data.get("colors", {})
    if not isinstance(colors_raw, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return None
    return {
        key: value
        for key, value in cast(dict[str, object], colors_raw).items()
        if isinstance(value, str)
    }


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors, applying user overrides on top of the defaults.

    Args:
        path: Theme file to read. If None, uses ~/.config/bagpack/theme.toml.

    Returns:
        ThemeColors instance. Defaults are used if the overrides are invalid.
    """
    theme_path = path or get_theme_path()
    user_colors = _load_toml_colors(theme_path)
    if user_colors is None:
        return ThemeColors()

    logger.debug("Loaded user theme overrides from %s", theme_path)
    try:
        return ThemeColors(**user_colors)
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def status_style(status: PackageStatus) -> str:
    """Return the theme style name for a package status."""
    return f"status_{status.value}"


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: ThemeColors instance to convert. If None, loads theme automatically.

    Returns:
        Rich Theme instance configured with the color scheme.
    """
    if colors is None:
        colors = load_theme()

    styles: dict[str, str] = {
        "text": colors.text,
        "muted": colors.muted,
        "header": colors.header,
        "border": colors.border,
        "success": colors.success,
        "warning": colors.warning,
        "error": f"bold {colors.error}",
        "info": colors.info,
        "status_current": colors.status_current,
        "status_outdated": f"bold {colors.status_outdated}",
        "status_unknown": colors.status_unknown,
        # Convenience styles
        "bold_header": f"bold {colors.header}",
        "dim": colors.muted,
        "package.name": f"bold {colors.text}",
        "package.version": colors.muted,
    }

    return Theme(styles)


# Module-level cached theme instance
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading and caching it if necessary.

    Returns:
        Cached Rich Theme instance.
    """
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme


def reload_theme() -> Theme:
    """Force reload the theme from the user theme file.

    Returns:
        Newly loaded Rich Theme instance.
    """
    global _cached_theme
    _cached_theme = None
    return get_theme()
