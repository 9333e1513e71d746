"""Configuration module for eletract."""

from eletract.config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    create_example_config,
    load_config,
)
from eletract.config.models import EletractConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "EletractConfig",
    "load_config",
    "create_example_config",
    "ConfigLoadError",
]
