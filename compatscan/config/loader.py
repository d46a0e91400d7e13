"""Configuration loading and parsing."""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

DEFAULT_CONFIG_NAME = "compatscan.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    'steam': {
        'root': None,
    },
    'api': {
        'base_url': 'https://store.steampowered.com/api',
        'request_delay': 0.2,
    },
    'logging': {
        'level': 'WARNING',
        'console': True,
        'file': None,
    },
    'output': {
        'color': True,
    },
}


class ConfigError(Exception):
    """Configuration-related errors."""
    pass


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load and parse configuration file.

    With no explicit path, ./compatscan.yaml is used when present and the
    built-in defaults otherwise. Values from the file are merged over the
    defaults.

    Args:
        config_path: Path to a YAML config file

    Returns:
        Parsed configuration dictionary

    Raises:
        ConfigError: If config file cannot be loaded or parsed
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Determine config file path
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            return config
    else:
        config_path = Path(config_path).expanduser()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    # Load YAML
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}")

    # Empty file means defaults
    if user_config is None:
        return config

    if not isinstance(user_config, dict):
        raise ConfigError("Configuration file must contain a YAML dictionary")

    return merge_config(config, user_config)


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge override into a copy of base.

    Args:
        base: Base configuration
        override: Values taking precedence

    Returns:
        Merged configuration dictionary
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_config(result[key], value)
        else:
            result[key] = value
    return result


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'api.request_delay')
        default: Default value if path not found

    Returns:
        Configuration value or default

    Example:
        >>> get_config_value(config, 'api.request_delay')
        0.2
    """
    keys = path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value
