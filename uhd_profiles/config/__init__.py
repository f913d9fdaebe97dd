"""Configuration module for uhd_profiles.

Provides tool settings loading from YAML and environment variables.

Public Interface:
    - HelperSettings: Settings model
    - load_settings: Load settings
    - create_default_settings: Create default settings file
"""

from .loader import create_default_settings
from .loader import load_settings
from .settings import HelperSettings

__all__ = [
    "HelperSettings",
    "load_settings",
    "create_default_settings",
]
