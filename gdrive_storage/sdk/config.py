"""Configuration management for gdrive-storage.

Settings come from environment variables, optionally backed by a YAML file
at ~/.config/gdrive-storage/config.yaml. Environment values always win.
"""

import os
import yaml
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CLIENT_ID_KEY = "GOOGLE_DRIVE_CLIENT_ID"
CLIENT_SECRET_KEY = "GOOGLE_DRIVE_CLIENT_SECRET"
REFRESH_TOKEN_KEY = "GOOGLE_DRIVE_REFRESH_TOKEN"
FOLDER_ID_KEY = "GOOGLE_DRIVE_FOLDER_ID"

# Order matters: missing keys are reported in this order
REQUIRED_KEYS = (CLIENT_ID_KEY, CLIENT_SECRET_KEY, REFRESH_TOKEN_KEY)

DEFAULT_DISK = "google"

# Environment variable -> dot-separated key in the YAML file
_FILE_KEYS = {
    CLIENT_ID_KEY: "drive.client_id",
    CLIENT_SECRET_KEY: "drive.client_secret",
    REFRESH_TOKEN_KEY: "drive.refresh_token",
    FOLDER_ID_KEY: "drive.folder_id",
}


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    env_path = os.getenv("GDRIVE_STORAGE_CONFIG_DIR")
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / "gdrive-storage"


def get_config_file_path() -> Path:
    """
    Get the path to the config file, respecting the GDRIVE_STORAGE_CONFIG_FILE env var.
    """
    env_path = os.getenv("GDRIVE_STORAGE_CONFIG_FILE")
    if env_path:
        return Path(env_path)
    return get_config_dir() / "config.yaml"


DEFAULT_CONFIG = {
    "drive": {},
    "storage": {
        "disk": DEFAULT_DISK
    }
}


def _default_config() -> dict:
    return _deep_merge({}, DEFAULT_CONFIG)


def load_config() -> dict:
    """Load the configuration from the config file."""
    config_file = get_config_file_path()
    if not config_file.exists():
        logger.debug(f"Config file not found at {config_file}, using default config.")
        return _default_config()

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
            if config is None:
                return _default_config()
            return _deep_merge(_default_config(), config)
    except yaml.YAMLError as e:
        logger.error(f"Error loading config file {config_file}: {e}")
        return _default_config()


def save_config(config_data: dict):
    """Save the configuration to the config file."""
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


def _deep_merge(base: dict, new: dict) -> dict:
    """Recursively merge dictionary `new` into `base`."""
    for k, v in new.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            base[k] = _deep_merge(base[k], v)
        elif isinstance(v, dict):
            base[k] = _deep_merge({}, v)
        else:
            base[k] = v
    return base


@dataclass(frozen=True)
class DriveSettings:
    """Resolved Drive configuration. Empty values mean 'not configured'."""

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    refresh_token: Optional[str] = None
    folder_id: Optional[str] = None
    disk: str = DEFAULT_DISK

    def missing_keys(self) -> List[str]:
        """Names of the required variables that have no value, in stable order."""
        values = {
            CLIENT_ID_KEY: self.client_id,
            CLIENT_SECRET_KEY: self.client_secret,
            REFRESH_TOKEN_KEY: self.refresh_token,
        }
        return [key for key in REQUIRED_KEYS if not values[key]]

    def require_credentials(self):
        """
        Ensure all required credentials are present.

        Raises:
            ConfigurationError: naming every missing variable
        """
        missing = self.missing_keys()
        if missing:
            message = f"Missing Google Drive configuration (.env): {', '.join(missing)}"
            logger.error(message)
            raise ConfigurationError(message, missing_keys=missing)


def _lookup(env_key: str, config_data: dict) -> Optional[str]:
    value = os.getenv(env_key)
    if value:
        return value

    current = config_data
    for k in _FILE_KEYS[env_key].split('.'):
        if isinstance(current, dict) and k in current:
            current = current[k]
        else:
            return None
    return str(current) if current else None


def load_settings() -> DriveSettings:
    """
    Resolve Drive settings from the environment and the config file.

    Missing values are left as None; call DriveSettings.require_credentials()
    to enforce them.
    """
    config_data = load_config()
    disk = (config_data.get("storage") or {}).get("disk") or DEFAULT_DISK

    return DriveSettings(
        client_id=_lookup(CLIENT_ID_KEY, config_data),
        client_secret=_lookup(CLIENT_SECRET_KEY, config_data),
        refresh_token=_lookup(REFRESH_TOKEN_KEY, config_data),
        folder_id=_lookup(FOLDER_ID_KEY, config_data),
        disk=disk,
    )
