"""Tests for configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from rush.config import ConfigError, RushConfig, default_config_paths, load_config
from rush.environment import Environment


class TestRushConfig:
    """Tests for the RushConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = RushConfig()

        assert config.log_level == "WARNING"
        assert config.show_log_time is False
        assert config.create_parents is False

    def test_log_level_normalized(self) -> None:
        """Test log level names are case-insensitive."""
        config = RushConfig(log_level="debug")

        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_invalid_log_level(self) -> None:
        """Test unknown level names are rejected."""
        with pytest.raises(ValueError):
            RushConfig(log_level="LOUD")

    def test_unknown_field_rejected(self) -> None:
        """Test typos in config keys are reported."""
        with pytest.raises(ValueError):
            RushConfig.model_validate({"log_levle": "INFO"})


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_sources(self, tmp_path: Path) -> None:
        """Test defaults are used without files or variables."""
        config = load_config([tmp_path / "missing.yaml"], Environment())

        assert config == RushConfig()

    def test_yaml_file(self, tmp_path: Path) -> None:
        """Test values are read from the first existing YAML file."""
        first = tmp_path / "first.yaml"
        first.write_text("log_level: info\ncreate_parents: true\n")
        second = tmp_path / "second.yaml"
        second.write_text("log_level: error\n")

        config = load_config([tmp_path / "missing.yaml", first, second], Environment())

        assert config.log_level == "INFO"
        assert config.create_parents is True

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        """Test an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config([path], Environment()) == RushConfig()

    def test_env_overrides_yaml(self, tmp_path: Path) -> None:
        """Test environment variables take precedence over the file."""
        path = tmp_path / "rush.yaml"
        path.write_text("log_level: info\nshow_log_time: false\n")
        env = Environment({"RUSH_LOG_LEVEL": "debug", "RUSH_SHOW_LOG_TIME": "yes"})

        config = load_config([path], env)

        assert config.log_level == "DEBUG"
        assert config.show_log_time is True

    def test_invalid_bool_env(self, tmp_path: Path) -> None:
        """Test unparseable booleans are reported."""
        env = Environment({"RUSH_CREATE_PARENTS": "sometimes"})

        with pytest.raises(ConfigError):
            load_config([], env)

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Test validation errors become ConfigError."""
        path = tmp_path / "rush.yaml"
        path.write_text("log_level: loud\n")

        with pytest.raises(ConfigError):
            load_config([path], Environment())

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML becomes ConfigError."""
        path = tmp_path / "rush.yaml"
        path.write_text("log_level: [unclosed\n")

        with pytest.raises(ConfigError):
            load_config([path], Environment())

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        """Test a YAML list is rejected."""
        path = tmp_path / "rush.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            load_config([path], Environment())

    def test_reads_process_environment_by_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the process environment is used when none is given."""
        monkeypatch.setenv("RUSH_LOG_LEVEL", "error")

        config = load_config([tmp_path / "missing.yaml"])

        assert config.log_level == "ERROR"

    def test_default_paths(self, temp_home: Path) -> None:
        """Test the lookup order of config files."""
        paths = default_config_paths()

        assert paths[0] == Path("rush.yaml")
        assert paths[2] == temp_home / ".config" / "rush" / "config.yaml"
