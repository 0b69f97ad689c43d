"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from tmpsweep.core.paths import (
    APP_NAME,
    DEFAULT_TMP_ROOT,
    get_config_dir,
    get_config_path,
    get_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_config_home_uses_default(self) -> None:
        """An empty XDG_CONFIG_HOME is treated as unset."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestFilePaths:
    """Tests for the config and theme file paths."""

    def test_get_config_path(self, tmp_path: Path) -> None:
        """get_config_path returns config.toml in config dir."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_path()

        assert result == tmp_path / APP_NAME / "config.toml"

    def test_get_theme_path(self, tmp_path: Path) -> None:
        """get_theme_path returns theme.toml in config dir."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_theme_path()

        assert result == tmp_path / APP_NAME / "theme.toml"

    def test_paths_are_not_created(self, tmp_path: Path) -> None:
        """Resolving paths has no filesystem side effects."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            get_config_path()

        assert not (tmp_path / APP_NAME).exists()


def test_default_tmp_root() -> None:
    """The conventional temp directory is the default root."""
    assert DEFAULT_TMP_ROOT == "/tmp"
