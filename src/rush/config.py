"""Configuration management for rush.

Priority: Environment Variables > YAML Config > Defaults
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from rush.environment import Environment

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

ENV_PREFIX = "RUSH_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def default_config_paths() -> list[Path]:
    """Get config file locations in lookup order."""
    return [
        Path("rush.yaml"),
        Path("rush.yml"),
        Path.home() / ".config" / "rush" / "config.yaml",
        Path.home() / ".config" / "rush" / "config.yml",
    ]


class ConfigError(Exception):
    """Invalid configuration."""

    pass


class RushConfig(BaseModel):
    """Settings for rush."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = "WARNING"
    show_log_time: bool = False
    create_parents: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and check the log level name."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


def _load_yaml_config(paths: list[Path]) -> dict[str, Any]:
    """Load the first YAML config file that exists."""
    for path in paths:
        if path.exists():
            logger.debug("Loading config from %s", path)
            try:
                with open(path, encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Config file {path} must contain a mapping")
            return data
    return {}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def _env_overrides(environment: Environment) -> dict[str, Any]:
    """Collect RUSH_* overrides from an environment store."""
    overrides: dict[str, Any] = {}
    for field_name, field_info in RushConfig.model_fields.items():
        var_name = f"{ENV_PREFIX}{field_name.upper()}"
        if var_name not in environment:
            continue
        raw = environment.get(var_name)
        overrides[field_name] = _parse_bool(var_name, raw) if field_info.annotation is bool else raw
    return overrides


def load_config(
    config_paths: list[Path] | None = None,
    environment: Environment | None = None,
) -> RushConfig:
    """Load configuration from YAML files and environment variables.

    Args:
        config_paths: Files to look for, first existing one wins.
            Defaults to ``default_config_paths()``.
        environment: Variables to read overrides from. Defaults to a copy
            of the process environment.

    Returns:
        Validated RushConfig.

    Raises:
        ConfigError: If a config file or override is invalid.
    """
    if environment is None:
        environment = Environment()
        environment.parse_whole_process_environment()

    values = _load_yaml_config(config_paths if config_paths is not None else default_config_paths())
    values.update(_env_overrides(environment))

    try:
        return RushConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
