"""Profile lifecycle: create from the official baseline, delete, reset."""

import logging

from uhd_profiles import fsops
from uhd_profiles.errors import FilesystemError
from uhd_profiles.errors import InvalidProfileError
from uhd_profiles.errors import ProfileError
from uhd_profiles.models.profiles import OFFICIAL_PROFILE_ID
from uhd_profiles.models.profiles import CatalogConfig
from uhd_profiles.models.profiles import Profile

from .identity import find_profile
from .identity import generate_profile_id
from .store import CatalogStore
from .swap import apply_profile
from .swap import ensure_asset_root

logger = logging.getLogger(__name__)


def add_profile_from_active(config: CatalogConfig, display_name: str, store: CatalogStore) -> Profile:
    """Create a new profile as a copy of the official baseline.

    The source is the official folder, or the active slot when the official
    profile is active and its folder has been moved in. The currently active
    profile is never the source otherwise.

    Args:
        config: Catalog state (mutated)
        display_name: Label of the new profile; also seeds its id
        store: Store used to persist the catalog

    Returns:
        The created profile

    Raises:
        ProfileError: If the official profile is missing from the catalog
        FilesystemError: If no baseline exists, the destination folder
            already exists, or the copy fails
        CatalogSaveError: If the catalog cannot be saved after the copy
    """
    ensure_asset_root(config)

    official = find_profile(config, OFFICIAL_PROFILE_ID)
    if official is None:
        raise ProfileError("Official profile is missing")

    source_path = config.profile_path(official)
    if not fsops.folder_exists(source_path):
        if config.active_profile_id == OFFICIAL_PROFILE_ID and fsops.folder_exists(config.images_path):
            source_path = config.images_path
        else:
            raise FilesystemError(f"Official profile folder does not exist: {source_path}", source_path)

    profile_id = generate_profile_id(config, display_name)
    profile = Profile(
        id=profile_id,
        display_name=display_name or profile_id,
        folder_name=config.idle_profile_prefix + profile_id,
        is_official=False,
    )

    dest = config.profile_path(profile)
    if fsops.folder_exists(dest):
        raise FilesystemError(f"Profile folder already exists: {dest}", dest)

    fsops.copy_tree(source_path, dest)

    config.profiles.append(profile)
    store.save(config)
    logger.info(f"Created profile '{profile.id}' from {source_path}")
    return profile


def delete_profile(config: CatalogConfig, profile_id: str, store: CatalogStore) -> Profile:
    """Delete a profile and its folder.

    The active profile and the official profile are protected. If the folder
    cannot be removed the catalog entry is kept.

    Returns:
        The removed profile

    Raises:
        InvalidProfileError: If the id is empty, active, unknown or official
        FilesystemError: If the profile folder cannot be removed
        CatalogSaveError: If the catalog cannot be saved after removal
    """
    if not profile_id:
        raise InvalidProfileError("Profile id is empty")
    if profile_id == config.active_profile_id:
        raise InvalidProfileError("Cannot delete the active profile")

    profile = find_profile(config, profile_id)
    if profile is None:
        raise InvalidProfileError("Profile not found")
    if profile.is_official or profile.id == OFFICIAL_PROFILE_ID:
        raise InvalidProfileError("Cannot delete the official profile")

    target_path = config.profile_path(profile)
    if fsops.folder_exists(target_path):
        fsops.remove_tree(target_path)

    config.profiles = [p for p in config.profiles if p.id != profile_id]
    store.save(config)
    logger.info(f"Deleted profile '{profile_id}'")
    return profile


def reset_to_official(config: CatalogConfig, store: CatalogStore) -> CatalogConfig:
    """Activate the official profile."""
    return apply_profile(config, OFFICIAL_PROFILE_ID, store)
