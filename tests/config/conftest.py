"""
Shared fixtures for config module tests.
"""
import pytest
import yaml


@pytest.fixture
def valid_config():
    """Complete valid configuration."""
    return {
        'steam': {
            'root': '~/.local/share/Steam',
        },
        'api': {
            'base_url': 'https://store.steampowered.com/api',
            'request_delay': 0.5,
        },
        'logging': {
            'level': 'INFO',
            'console': True,
            'file': None,
        },
        'output': {
            'color': False,
        },
    }


@pytest.fixture
def temp_config_file(tmp_path, valid_config):
    """Create temporary config file."""
    config_file = tmp_path / "compatscan.yaml"
    config_file.write_text(yaml.dump(valid_config))
    return config_file
