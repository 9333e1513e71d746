"""Configuration loading utilities."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from eletract.config.models import EletractConfig

DEFAULT_CONFIG_PATH = "~/.config/eletract/config.yaml"


class ConfigLoadError(Exception):
    """Raised when configuration cannot be loaded or validated."""

    pass


def load_config(config_path: Optional[str] = None) -> EletractConfig:
    """Load and validate configuration from YAML file.

    An explicitly given path must exist. When no path is given, the user-level
    default location is read if present, otherwise built-in defaults are used.

    Args:
        config_path: Path to configuration file. If None, falls back to
                    ~/.config/eletract/config.yaml or built-in defaults.

    Returns:
        Validated EletractConfig instance

    Raises:
        ConfigLoadError: If file not found, invalid YAML, or validation fails
    """
    if config_path is None:
        config_file = Path(DEFAULT_CONFIG_PATH).expanduser()
        if not config_file.exists():
            return EletractConfig()
    else:
        config_file = Path(config_path).expanduser()
        if not config_file.exists():
            raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigLoadError(f"Failed to read {config_file}: {e}") from e

    if config_data is None:
        raise ConfigLoadError(f"Configuration file is empty: {config_file}")

    if not isinstance(config_data, dict):
        raise ConfigLoadError(f"Configuration must be a mapping: {config_file}")

    try:
        return EletractConfig(**config_data)
    except ValidationError as e:
        raise ConfigLoadError(f"Configuration validation failed:\n{e}") from e


def create_example_config(output_path: str = DEFAULT_CONFIG_PATH) -> Path:
    """Create an example configuration file holding the built-in defaults.

    Args:
        output_path: Where to write the example config

    Returns:
        Path of the written file

    Raises:
        ConfigLoadError: If file cannot be written
    """
    output_file = Path(output_path).expanduser()

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            yaml.dump(
                EletractConfig().model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
    except OSError as e:
        raise ConfigLoadError(f"Failed to write example config to {output_path}: {e}") from e

    return output_file
