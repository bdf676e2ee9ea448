"""Unit tests for ConfigService."""

from pathlib import Path

import pytest

from svcmgr.exceptions import ConfigError
from svcmgr.services.config import CONFIG_ENV_VAR, ConfigService


class TestConfigService:
    """Tests for ConfigService."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing config file should yield default settings."""
        config = ConfigService(tmp_path / "config.yaml").load()

        assert config.executables.launchctl == "launchctl"
        assert config.executables.brew == "brew"
        assert config.list_defaults.sort is False
        assert config.brew.include_by_default is False

    def test_reads_yaml(self, tmp_path: Path) -> None:
        """Values and camelCase aliases should be read from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "executables:\n"
            "  brew: /opt/homebrew/bin/brew\n"
            "list:\n"
            "  sort: true\n"
            "brew:\n"
            "  includeByDefault: true\n",
            encoding="utf-8",
        )

        config = ConfigService(path).load()

        assert config.executables.brew == "/opt/homebrew/bin/brew"
        assert config.list_defaults.sort is True
        assert config.brew.include_by_default is True

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigService(path).load().list_defaults.sort is False

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("list: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigService(path).load()

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("list:\n  sort: [1, 2]\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid config file"):
            ConfigService(path).load()

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            ConfigService(path).load()

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """SVCMGR_CONFIG should be used when no explicit path is given."""
        path = tmp_path / "custom.yaml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert ConfigService().config_path == path

    def test_explicit_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))

        assert ConfigService(tmp_path / "cli.yaml").config_path == tmp_path / "cli.yaml"
