"""uhd_profiles library layer.

Keeps a catalog of named asset profiles under one asset root and makes
exactly one of them the content of the active slot.

Public Interface:
    Modules:
    - catalog: Catalog store, identity rules, swap engine, lifecycle, scanner
    - config: Tool settings
    - storage: Document codec and config paths
    - models: Catalog data structures
"""

from .catalog import CatalogStore
from .catalog import ProfileManager
from .errors import CatalogLoadError
from .errors import CatalogSaveError
from .errors import FilesystemError
from .errors import InvalidProfileError
from .errors import ProfileError
from .models import CatalogConfig
from .models import Profile

__all__ = [
    "CatalogStore",
    "ProfileManager",
    "CatalogConfig",
    "Profile",
    "ProfileError",
    "InvalidProfileError",
    "FilesystemError",
    "CatalogLoadError",
    "CatalogSaveError",
]
