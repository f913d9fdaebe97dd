"""Profile identity rules: lookup, official profile, normalization, id generation.

All functions operate on an explicit ``CatalogConfig`` and mutate it in place.
"""

import logging

from uhd_profiles.models.profiles import OFFICIAL_DISPLAY_NAME
from uhd_profiles.models.profiles import OFFICIAL_PROFILE_ID
from uhd_profiles.models.profiles import CatalogConfig
from uhd_profiles.models.profiles import Profile

logger = logging.getLogger(__name__)

FALLBACK_ID = "profile"
MAX_ID_SUFFIX = 10000
_SEPARATORS = frozenset(" -_")


def find_profile(config: CatalogConfig, profile_id: str) -> Profile | None:
    """Find a profile by id.

    Returns:
        First profile with a matching id, or None
    """
    for profile in config.profiles:
        if profile.id == profile_id:
            return profile
    return None


def ensure_official_profile(config: CatalogConfig) -> CatalogConfig:
    """Guarantee the reserved official profile exists and is authoritative.

    Appends the official profile if missing. Otherwise forces its folder to
    ``official_profile_folder`` and its flag to True, and fills an empty
    display name. Any other profile carrying the official flag is demoted.
    """
    official = find_profile(config, OFFICIAL_PROFILE_ID)

    for profile in config.profiles:
        if profile.is_official and profile.id != OFFICIAL_PROFILE_ID:
            logger.warning(f"Profile '{profile.id}' is marked official; clearing flag")
            profile.is_official = False

    if official is None:
        config.profiles.append(
            Profile(
                id=OFFICIAL_PROFILE_ID,
                display_name=OFFICIAL_DISPLAY_NAME,
                folder_name=config.official_profile_folder,
                is_official=True,
            )
        )
        logger.debug("Added official profile")
        return config

    official.folder_name = config.official_profile_folder
    official.is_official = True
    if not official.display_name:
        official.display_name = OFFICIAL_DISPLAY_NAME
    return config


def normalize_profiles(config: CatalogConfig) -> CatalogConfig:
    """Deduplicate profiles and fill missing fields.

    Drops empty ids and repeated ids (first occurrence wins), then fills an
    empty display name with the id and an empty folder with the official
    folder or ``idle_profile_prefix + id``. Idempotent.
    """
    seen_ids: set[str] = set()
    normalized: list[Profile] = []

    for profile in config.profiles:
        if not profile.id:
            continue
        if profile.id in seen_ids:
            logger.debug(f"Dropping duplicate profile id: {profile.id}")
            continue
        seen_ids.add(profile.id)

        if not profile.display_name:
            profile.display_name = profile.id
        if not profile.folder_name:
            if profile.is_official:
                profile.folder_name = config.official_profile_folder
            else:
                profile.folder_name = config.idle_profile_prefix + profile.id
        normalized.append(profile)

    config.profiles = normalized
    return config


def slugify(text: str) -> str:
    """Derive an id candidate from a display name.

    Keeps lowercased ASCII letters and digits and collapses runs of space,
    hyphen and underscore into one underscore. Other characters are dropped.

    Example:
        >>> slugify("My Theme -- v2")
        'my_theme_v2'
    """
    out: list[str] = []
    for ch in text:
        if ch.isascii() and ch.isalnum():
            out.append(ch.lower())
        elif ch in _SEPARATORS and out and out[-1] != "_":
            out.append("_")
    if out and out[-1] == "_":
        out.pop()
    return "".join(out)


def generate_profile_id(config: CatalogConfig, display_name: str) -> str:
    """Generate an id for a new profile that no existing profile uses.

    Tries the slug, then ``slug_2`` through ``slug_9999``. If all are
    taken, returns ``slug_x`` without a uniqueness guarantee.
    """
    base = slugify(display_name) or FALLBACK_ID
    existing = {profile.id for profile in config.profiles}

    if base not in existing:
        return base
    for i in range(2, MAX_ID_SUFFIX):
        candidate = f"{base}_{i}"
        if candidate not in existing:
            return candidate
    return f"{base}_x"
