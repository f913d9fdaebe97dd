"""Settings loading for uhd-helper.

This module loads tool settings from an optional YAML file and
environment variables.

Contract:
- Inputs: Settings file path, environment variables
- Outputs: HelperSettings objects
- Side Effects: load_settings() and create_default_settings() write the
  default settings.yaml if missing
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..storage.paths import default_settings_path
from .settings import HelperSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = """# uhd-helper settings
# Environment variables prefixed with UHD_HELPER_ take precedence.

# Logging level: debug, info, warning, error
log_level: "warning"

# Catalog document location
# Default: $XDG_CONFIG_HOME/uhd-helper/config.json (or ~/.config/uhd-helper/config.json)
# config_path: "~/.config/uhd-helper/config.json"

# Asset root written into a newly created catalog
# Default: /usr/share/uhd on Linux
# default_asset_root: "/usr/share/uhd"
"""


def create_default_settings(settings_path: Path | None = None) -> Path:
    """Create a commented default settings file if it doesn't exist.

    Args:
        settings_path: Target path (default: settings.yaml in config dir)

    Returns:
        Path of the settings file

    Example:
        >>> path = create_default_settings()
        >>> assert path.exists()
    """
    if settings_path is None:
        settings_path = default_settings_path()

    if settings_path.exists():
        logger.debug(f"Settings file already exists: {settings_path}")
        return settings_path

    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(DEFAULT_SETTINGS, encoding="utf-8")
    logger.info(f"Created default settings: {settings_path}")
    return settings_path


def load_settings(settings_path: Path | None = None) -> HelperSettings:
    """Load settings from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables are prefixed with UHD_HELPER_ (e.g., UHD_HELPER_LOG_LEVEL).
    A settings file that cannot be read, parsed or validated is ignored with
    a warning, leaving defaults and environment variables.

    Args:
        settings_path: Optional settings file (default: settings.yaml in config
            dir, created with commented defaults if missing)

    Returns:
        Validated settings
    """
    if settings_path is None:
        settings_path = default_settings_path()

        # Create default settings if they don't exist
        if not settings_path.exists():
            try:
                create_default_settings(settings_path)
            except OSError as e:
                logger.warning(f"Failed to create default settings at {settings_path}: {e}")

    yaml_settings: dict = {}
    if settings_path.exists():
        try:
            with open(settings_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                yaml_settings = loaded
                logger.debug(f"Loaded settings from {settings_path}")
            else:
                logger.warning(f"Ignoring settings file {settings_path}: root is not a mapping")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load settings from {settings_path}: {e}")

    # Only pass YAML values that don't have corresponding env vars
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        if not isinstance(key, str):
            continue
        env_key = f"UHD_HELPER_{key.upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    try:
        settings = HelperSettings(**filtered_yaml)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid settings in {settings_path}: {e}")
        settings = HelperSettings()
    logger.debug(f"Settings loaded: log_level={settings.log_level}, config_path={settings.config_path}")
    return settings
