"""Models for uhd_profiles."""

from .base import CamelCaseModel
from .profiles import OFFICIAL_DISPLAY_NAME
from .profiles import OFFICIAL_PROFILE_ID
from .profiles import CatalogConfig
from .profiles import Profile

__all__ = [
    "CamelCaseModel",
    "CatalogConfig",
    "Profile",
    "OFFICIAL_PROFILE_ID",
    "OFFICIAL_DISPLAY_NAME",
]
