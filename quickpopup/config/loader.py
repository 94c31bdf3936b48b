"""Configuration loading utilities."""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from quickpopup.config.schema import Config


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or validated."""


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".quickpopup" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from a JSON file.

    A missing default file yields the built-in defaults. A missing explicit
    path, unreadable JSON or invalid values raise :class:`ConfigError`.
    """
    path = config_path or get_config_path()

    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug(f"No config at {path}, using defaults")
        return Config()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    logger.debug(f"Loaded config from {path}")
    return config
