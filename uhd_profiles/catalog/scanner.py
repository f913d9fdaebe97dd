"""Reconciliation of the catalog against folders found on disk."""

import logging

from uhd_profiles import fsops
from uhd_profiles.models.profiles import CatalogConfig
from uhd_profiles.models.profiles import Profile

from .identity import normalize_profiles
from .store import CatalogStore
from .swap import ensure_asset_root

logger = logging.getLogger(__name__)


def seed_official_folder(config: CatalogConfig) -> bool:
    """Copy the active slot into the official folder if the latter is missing.

    Whatever is active at that point is assumed to be the official baseline.
    Nothing verifies this, so a non-official profile active on first run
    seeds the official folder with its content.

    Returns:
        True if the official folder was created

    Raises:
        FilesystemError: If the copy fails
    """
    if fsops.folder_exists(config.official_path) or not fsops.folder_exists(config.images_path):
        return False

    fsops.copy_tree(config.images_path, config.official_path)
    logger.info(f"Seeded official folder {config.official_path} from {config.images_path}")
    return True


def discover_profiles(config: CatalogConfig) -> list[Profile]:
    """Append profiles for untracked prefixed folders under the asset root.

    Skips the active slot, the backup slot, folders already owned by a
    profile, and folders without the idle prefix. The id is the folder name
    without the prefix, lowercased.

    Returns:
        Newly appended profiles
    """
    known_folders = {profile.folder_name for profile in config.profiles}
    prefix = config.idle_profile_prefix
    discovered: list[Profile] = []

    for folder in fsops.list_dirs(config.asset_root):
        name = folder.name
        if name in (config.images_folder_name, config.backup_profile_folder) or name in known_folders:
            continue
        if not name.startswith(prefix):
            continue

        profile_id = name[len(prefix) :].lower()
        if not profile_id:
            continue

        profile = Profile(id=profile_id, display_name=profile_id, folder_name=name, is_official=False)
        config.profiles.append(profile)
        discovered.append(profile)
        logger.info(f"Discovered profile '{profile_id}' in {folder}")

    return discovered


def refresh_from_disk(config: CatalogConfig, store: CatalogStore) -> list[Profile]:
    """Reconcile the catalog with the asset root and save it.

    Re-running with no disk changes adds nothing.

    Returns:
        Profiles discovered by this scan that survived normalization

    Raises:
        FilesystemError: If the asset root cannot be created or seeding fails
        CatalogSaveError: If the catalog cannot be saved
    """
    ensure_asset_root(config)
    seed_official_folder(config)

    discovered = discover_profiles(config)
    normalize_profiles(config)
    store.save(config)

    kept = [profile for profile in discovered if any(p is profile for p in config.profiles)]
    logger.debug(f"Refreshed catalog from {config.asset_root}: {len(kept)} new profiles")
    return kept
