"""Configuration management for gdocs.

Handles loading and saving YAML configuration from ~/.config/gdocs-mcp/.
"""

import copy
import os
import yaml
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    env_path = os.getenv("GDOCS_CONFIG_DIR")
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / "gdocs-mcp"


def get_config_file_path() -> Path:
    """
    Get the path to the config file, respecting the GDOCS_CONFIG_FILE env var.
    """
    env_path = os.getenv("GDOCS_CONFIG_FILE")
    if env_path:
        return Path(env_path)
    return get_config_dir() / "config.yaml"


DEFAULT_CONFIG = {
    "auth": {
        "credentials_path": None,
        "token_path": None,
        "interactive": True,
    },
    "server": {
        "name": "google-docs-mcp-server",
    },
}


def load_config() -> dict:
    """Load the gdocs configuration from the config file."""
    config_file = get_config_file_path()
    if not config_file.exists():
        logger.debug(f"Config file not found at {config_file}, using default config.")
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
            if config is None:
                return copy.deepcopy(DEFAULT_CONFIG)
            return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), config)
    except yaml.YAMLError as e:
        logger.error(f"Error loading config file {config_file}: {e}")
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(config_data: dict):
    """Save the gdocs configuration to the config file."""
    config_file = get_config_file_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, 'w') as f:
        yaml.safe_dump(config_data, f, default_flow_style=False)
    logger.debug(f"Configuration saved to {config_file}")


def get_config_value(key: str, default: Any = None) -> Any:
    """Retrieve a configuration value using a dot-separated key."""
    config_data = load_config()
    keys = key.split('.')
    value = config_data
    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value


def set_config_value(key: str, value: Any):
    """Set a configuration value using a dot-separated key and save."""
    config_data = load_config()
    keys = key.split('.')
    current_level = config_data
    for i, k in enumerate(keys):
        if i == len(keys) - 1:
            current_level[k] = value
        else:
            if k not in current_level or not isinstance(current_level[k], dict):
                current_level[k] = {}
            current_level = current_level[k]
    save_config(config_data)


def get_credentials_path() -> Path:
    """
    Path to the OAuth client secrets file.

    Resolution order: CREDENTIALS_PATH env var, auth.credentials_path in the
    config file, then credentials.json in the config directory.
    """
    env_path = os.getenv("CREDENTIALS_PATH")
    if env_path:
        return Path(env_path).expanduser()
    configured = get_config_value("auth.credentials_path")
    if configured:
        return Path(configured).expanduser()
    return get_config_dir() / "credentials.json"


def get_token_path() -> Path:
    """
    Path to the persisted user token.

    Resolution order: TOKEN_PATH env var, auth.token_path in the config
    file, then token.json in the config directory.
    """
    env_path = os.getenv("TOKEN_PATH")
    if env_path:
        return Path(env_path).expanduser()
    configured = get_config_value("auth.token_path")
    if configured:
        return Path(configured).expanduser()
    return get_config_dir() / "token.json"


def _deep_merge(base: dict, new: dict) -> dict:
    """Recursively merge dictionary `new` into `base`."""
    for k, v in new.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            base[k] = _deep_merge(base[k], v)
        else:
            base[k] = v
    return base
