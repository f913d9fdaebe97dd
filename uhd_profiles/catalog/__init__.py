"""Profile catalog: persistence, identity rules, directory swaps, reconciliation.

Public Interface:
    - CatalogStore: Load/save the catalog document
    - ProfileManager: Consumer-facing operations
    - find_profile, ensure_official_profile, normalize_profiles, generate_profile_id
    - apply_profile, rename_active_to_idle
    - add_profile_from_active, delete_profile, reset_to_official
    - refresh_from_disk
"""

from .identity import ensure_official_profile
from .identity import find_profile
from .identity import generate_profile_id
from .identity import normalize_profiles
from .lifecycle import add_profile_from_active
from .lifecycle import delete_profile
from .lifecycle import reset_to_official
from .manager import ProfileManager
from .scanner import refresh_from_disk
from .store import CatalogStore
from .swap import apply_profile
from .swap import rename_active_to_idle

__all__ = [
    "CatalogStore",
    "ProfileManager",
    "find_profile",
    "ensure_official_profile",
    "normalize_profiles",
    "generate_profile_id",
    "apply_profile",
    "rename_active_to_idle",
    "add_profile_from_active",
    "delete_profile",
    "reset_to_official",
    "refresh_from_disk",
]
