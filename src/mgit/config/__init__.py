"""Configuration module for mgit."""

from mgit.config.loader import load_config, resolve_config_path
from mgit.config.logging import configure_logging
from mgit.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "configure_logging",
    "get_settings",
    "load_config",
    "resolve_config_path",
]
