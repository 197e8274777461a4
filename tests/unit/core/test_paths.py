"""Unit tests for XDG path helpers."""

from pathlib import Path

import pytest
from bagpack.core.paths import APP_NAME, get_config_dir, get_config_path, get_theme_path


class TestPaths:
    """Tests for path helpers."""

    def test_app_name(self) -> None:
        """Directories are named after the application."""
        assert APP_NAME == "bagpack"

    def test_default_config_dir(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Without XDG_CONFIG_HOME, ~/.config/bagpack is used."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / ".config" / "bagpack"

    def test_xdg_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """XDG_CONFIG_HOME overrides the base directory."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / "bagpack"
        assert get_config_path() == tmp_path / "bagpack" / "config.toml"
        assert get_theme_path() == tmp_path / "bagpack" / "theme.toml"
