"""Directory swap engine.

Activating a profile moves the current active-slot content back to its
owner's folder (or to the backup slot) and moves the target's folder into
the active slot. Each move is a single rename; the sequence as a whole is
not atomic, and a failure part-way through is reported, not repaired.
"""

import logging
from pathlib import Path

from uhd_profiles import fsops
from uhd_profiles.errors import FilesystemError
from uhd_profiles.errors import InvalidProfileError
from uhd_profiles.models.profiles import CatalogConfig
from uhd_profiles.models.profiles import Profile

from .identity import find_profile
from .store import CatalogStore

logger = logging.getLogger(__name__)


def ensure_asset_root(config: CatalogConfig) -> None:
    """Create the asset root if it is missing.

    Raises:
        FilesystemError: If it exists as a file or cannot be created
    """
    fsops.ensure_dir(config.asset_root)


def rename_active_to_idle(config: CatalogConfig) -> Path | None:
    """Move the active slot's content out of the way.

    The content goes to the recorded active profile's folder, replacing any
    directory already there. With no recorded (or known) active profile it
    goes to the backup slot, replacing the previous backup.

    Returns:
        Where the content was moved, or None if the active slot was empty

    Raises:
        FilesystemError: If the destination cannot be cleared or the move fails
    """
    images_path = config.images_path
    if not fsops.folder_exists(images_path):
        return None

    active: Profile | None = None
    if config.active_profile_id:
        active = find_profile(config, config.active_profile_id)

    if active is not None and active.folder_name:
        dest = config.profile_path(active)
        if fsops.folder_exists(dest):
            fsops.remove_tree(dest)
        fsops.rename_dir(images_path, dest)
        logger.debug(f"Returned active content to profile '{active.id}' at {dest}")
        return dest

    dest = config.backup_path
    if fsops.folder_exists(dest):
        try:
            fsops.remove_tree(dest)
        except FilesystemError as e:
            logger.warning(f"Could not clear backup slot: {e}")
    fsops.rename_dir(images_path, dest)
    logger.info(f"Moved unowned active content to backup slot {dest}")
    return dest


def apply_profile(config: CatalogConfig, profile_id: str, store: CatalogStore) -> CatalogConfig:
    """Make ``profile_id`` the active profile.

    Args:
        config: Catalog state (mutated)
        profile_id: Profile to activate
        store: Store used to persist the new active pointer

    Returns:
        The updated catalog

    Raises:
        InvalidProfileError: If the id is unknown
        FilesystemError: If the profile folder is missing (and the profile is
            not already active with a populated active slot), or a move fails;
            after a failed move the active slot may be left empty
        CatalogSaveError: If the catalog cannot be saved after the moves
    """
    ensure_asset_root(config)

    target = find_profile(config, profile_id)
    if target is None:
        raise InvalidProfileError(f"Unknown profile id: {profile_id}")

    target_path = config.profile_path(target)
    if not fsops.folder_exists(target_path):
        if profile_id == config.active_profile_id and fsops.folder_exists(config.images_path):
            logger.debug(f"Profile '{profile_id}' is already active")
            return config
        raise FilesystemError(f"Profile folder does not exist: {target_path}", target_path)

    rename_active_to_idle(config)
    fsops.rename_dir(target_path, config.images_path)

    config.active_profile_id = target.id
    store.save(config)
    logger.info(f"Applied profile '{target.id}'")
    return config
