"""Configuration loading."""

from ferry.config.settings import get_config, get_config_loaded_sources

__all__ = [
    "get_config",
    "get_config_loaded_sources",
]
