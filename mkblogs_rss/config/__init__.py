"""Configuration management for the feed aggregator."""

from .loader import Config, default_config_path, load_config, save_config
from .models import ConfigModel, FetchConfig

__all__ = [
    "Config",
    "ConfigModel",
    "FetchConfig",
    "default_config_path",
    "load_config",
    "save_config",
]
