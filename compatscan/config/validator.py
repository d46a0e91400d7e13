"""Configuration validation."""

import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    for section in ('steam', 'api', 'logging', 'output'):
        if not isinstance(config.get(section, {}), dict):
            errors.append(f"{section} must be a mapping")

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )

    errors.extend(_validate_steam(config.get('steam', {})))
    errors.extend(_validate_api(config.get('api', {})))
    errors.extend(_validate_logging(config.get('logging', {})))
    errors.extend(_validate_output(config.get('output', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )


def _validate_steam(section: Dict[str, Any]) -> List[str]:
    """Validate steam section."""
    errors = []

    root = section.get('root')
    if root is not None and (not isinstance(root, str) or not root.strip()):
        errors.append("steam.root must be a non-empty path string or null")

    return errors


def _validate_api(section: Dict[str, Any]) -> List[str]:
    """Validate api section."""
    errors = []

    base_url = section.get('base_url')
    if base_url is not None:
        if not isinstance(base_url, str) or not base_url.startswith(('http://', 'https://')):
            errors.append("api.base_url must be an http:// or https:// URL")

    delay = section.get('request_delay', 0.2)
    # bool is an int subclass
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        errors.append("api.request_delay must be a number")
    elif delay < 0:
        errors.append("api.request_delay must be >= 0")
    elif delay > 10:
        logger.warning(f"api.request_delay of {delay}s will make scans very slow")

    return errors


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging section."""
    errors = []

    level = section.get('level', 'WARNING')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        errors.append(f"logging.level must be one of: {', '.join(LOG_LEVELS)}")

    console = section.get('console', True)
    if not isinstance(console, bool):
        errors.append("logging.console must be true or false")

    log_file = section.get('file')
    if log_file is not None and not isinstance(log_file, str):
        errors.append("logging.file must be a path string or null")

    return errors


def _validate_output(section: Dict[str, Any]) -> List[str]:
    """Validate output section."""
    errors = []

    color = section.get('color', True)
    if not isinstance(color, bool):
        errors.append("output.color must be true or false")

    return errors
