"""Configuration module for quickpopup."""

from quickpopup.config.loader import ConfigError, get_config_path, load_config
from quickpopup.config.schema import Config, PopupSettings, SplitterSettings

__all__ = [
    "Config",
    "ConfigError",
    "PopupSettings",
    "SplitterSettings",
    "get_config_path",
    "load_config",
]
