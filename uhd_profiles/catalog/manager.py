"""Profile manager: the consumer-facing catalog API.

Holds the store and the loaded ``CatalogConfig`` and delegates to the engine
functions, which receive that config explicitly.
"""

import logging
from pathlib import Path

from uhd_profiles.errors import ProfileError
from uhd_profiles.models.profiles import CatalogConfig
from uhd_profiles.models.profiles import Profile

from . import lifecycle
from . import scanner
from . import swap
from .store import CatalogStore

logger = logging.getLogger(__name__)


class ProfileManager:
    """Profile catalog operations over a single asset root.

    Example:
        >>> manager = ProfileManager(CatalogStore(default_config_path()))
        >>> manager.initialize()
        >>> manager.apply_profile("official")
    """

    def __init__(self, store: CatalogStore) -> None:
        self.store = store
        self._config: CatalogConfig | None = None

    @property
    def config(self) -> CatalogConfig:
        """Loaded catalog state.

        Raises:
            ProfileError: If the catalog has not been loaded
        """
        if self._config is None:
            raise ProfileError("Profile catalog is not loaded")
        return self._config

    def initialize(self) -> None:
        """Load the catalog and reconcile it with the asset root.

        On a load failure any previously loaded state is kept.
        """
        config = self.store.load()
        self._config = config
        scanner.refresh_from_disk(config, self.store)
        logger.info(f"Profile catalog ready: {len(config.profiles)} profiles, active '{config.active_profile_id}'")

    @property
    def profiles(self) -> list[Profile]:
        return self.config.profiles

    @property
    def active_profile_id(self) -> str:
        return self.config.active_profile_id

    @property
    def asset_root(self) -> Path:
        return self.config.asset_root

    @property
    def images_path(self) -> Path:
        return self.config.images_path

    @property
    def config_path(self) -> Path:
        return self.store.path

    def get_profile(self, profile_id: str) -> Profile | None:
        return next((p for p in self.config.profiles if p.id == profile_id), None)

    def apply_profile(self, profile_id: str) -> None:
        swap.apply_profile(self.config, profile_id, self.store)

    def add_profile_from_active(self, display_name: str) -> Profile:
        return lifecycle.add_profile_from_active(self.config, display_name, self.store)

    def delete_profile(self, profile_id: str) -> Profile:
        return lifecycle.delete_profile(self.config, profile_id, self.store)

    def reset_to_official(self) -> None:
        lifecycle.reset_to_official(self.config, self.store)

    def refresh_from_disk(self) -> list[Profile]:
        return scanner.refresh_from_disk(self.config, self.store)
