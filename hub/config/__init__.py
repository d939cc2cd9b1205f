"""Configuration module exports."""

from hub.settings import Settings, get_settings

from hub.config.hub_config import (
    Config,
    FactoryOptions,
    ReposOptions,
    load_config,
)

__all__ = [
    "Settings",
    "get_settings",
    "Config",
    "FactoryOptions",
    "ReposOptions",
    "load_config",
]
