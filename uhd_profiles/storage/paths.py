"""Path resolution for uhd-helper storage locations.

The catalog document lives in an XDG-style config directory.

Contract:
- Inputs: Environment variables (XDG_CONFIG_HOME, HOME)
- Outputs: Resolved Path objects
- Side Effects: None (directories are created on save, not on lookup)
"""

import os
from pathlib import Path

APP_DIR_NAME = "uhd-helper"
CONFIG_FILE_NAME = "config.json"
SETTINGS_FILE_NAME = "settings.yaml"


def get_config_base_dir() -> Path:
    """Get the base directory for per-user configuration.

    Returns:
        $XDG_CONFIG_HOME if set and non-empty, else $HOME/.config if HOME is
        set and non-empty, else the current working directory
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)

    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".config"

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the uhd-helper configuration directory.

    Returns:
        Path to <config base>/uhd-helper
    """
    return get_config_base_dir() / APP_DIR_NAME


def default_config_path() -> Path:
    """Get the default catalog document path.

    Example:
        >>> path = default_config_path()
        >>> assert path.name == "config.json"
    """
    return get_config_dir() / CONFIG_FILE_NAME


def default_settings_path() -> Path:
    """Get the default settings file path (may not exist)."""
    return get_config_dir() / SETTINGS_FILE_NAME
