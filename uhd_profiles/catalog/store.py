"""Catalog document persistence.

Loads the catalog document into a ``CatalogConfig`` with per-field
type-checked defaults, and saves it back as a complete rewrite.

Contract:
- Inputs: Catalog document path
- Outputs: CatalogConfig objects
- Side Effects: load() creates and saves a default document if none exists;
  save() creates the parent directory and overwrites the file in place
"""

import logging
import math
from pathlib import Path
from typing import Any

from pydantic.alias_generators import to_camel

from uhd_profiles.errors import CatalogLoadError
from uhd_profiles.errors import CatalogSaveError
from uhd_profiles.models.profiles import OFFICIAL_PROFILE_ID
from uhd_profiles.models.profiles import CatalogConfig
from uhd_profiles.models.profiles import Profile
from uhd_profiles.platform import DEFAULTS
from uhd_profiles.platform import default_asset_root
from uhd_profiles.platform import images_folder_name
from uhd_profiles.storage.document import DocumentError
from uhd_profiles.storage.document import parse_document
from uhd_profiles.storage.document import serialize_document

from .identity import ensure_official_profile
from .identity import normalize_profiles

logger = logging.getLogger(__name__)

# Older documents used snake_case keys and called the asset root "uhd_dir"
_LEGACY_KEYS = {"asset_root": ("uhdDir", "uhd_dir")}


def _lookup(obj: dict[str, Any], field_name: str) -> Any:
    for key in (to_camel(field_name), field_name, *_LEGACY_KEYS.get(field_name, ())):
        if key in obj:
            return obj[key]
    return None


def _get_str(obj: dict[str, Any], field_name: str, fallback: str) -> str:
    value = _lookup(obj, field_name)
    return value if isinstance(value, str) else fallback


def _get_int(obj: dict[str, Any], field_name: str, fallback: int) -> int:
    value = _lookup(obj, field_name)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return fallback
    if isinstance(value, float) and not math.isfinite(value):
        return fallback
    return int(value)


def _get_bool(obj: dict[str, Any], field_name: str, fallback: bool) -> bool:
    value = _lookup(obj, field_name)
    return value if isinstance(value, bool) else fallback


def _parse_profile(obj: dict[str, Any], idle_prefix: str) -> Profile:
    profile_id = _get_str(obj, "id", "")
    return Profile(
        id=profile_id,
        display_name=_get_str(obj, "display_name", profile_id),
        folder_name=_get_str(obj, "folder_name", idle_prefix + profile_id),
        is_official=_get_bool(obj, "is_official", False),
    )


class CatalogStore:
    """Loads and saves the profile catalog document.

    The store holds no catalog state of its own: ``load`` returns a fresh
    ``CatalogConfig`` and ``save`` writes whatever config it is given.
    """

    def __init__(self, path: Path, default_asset_root: Path | None = None) -> None:
        """Initialize store.

        Args:
            path: Catalog document path
            default_asset_root: Asset root for newly created documents
                (default: platform-specific)
        """
        self._path = Path(path)
        self._default_asset_root = default_asset_root

    @property
    def path(self) -> Path:
        return self._path

    def new_config(self) -> CatalogConfig:
        """Build a default catalog with no profiles."""
        asset_root = self._default_asset_root if self._default_asset_root is not None else default_asset_root()
        return CatalogConfig(
            schema_version=DEFAULTS.schema_version,
            asset_root=asset_root,
            images_folder_name=images_folder_name(),
            idle_profile_prefix=DEFAULTS.idle_profile_prefix,
            official_profile_folder=DEFAULTS.official_profile_folder,
            backup_profile_folder=DEFAULTS.backup_profile_folder,
        )

    def load(self) -> CatalogConfig:
        """Load the catalog document.

        If no document exists, a default one is created, normalized and saved.

        Returns:
            Loaded catalog with the official profile ensured, profiles
            normalized and an active profile id set

        Raises:
            CatalogLoadError: If the document cannot be opened or parsed, or
                its root is not an object
            CatalogSaveError: If a newly created default document cannot be saved
        """
        if not self._path.exists():
            config = self._finish(self.new_config())
            self.save(config)
            logger.info(f"Created default catalog: {self._path}")
            return config

        try:
            with open(self._path, encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(f"Failed to open config file: {self._path}") from e

        try:
            root = parse_document(content)
        except DocumentError as e:
            raise CatalogLoadError(f"Failed to parse config JSON: {e}") from e

        if not isinstance(root, dict):
            raise CatalogLoadError("Config JSON root is not an object")

        config = self._finish(self._from_document(root))
        logger.debug(f"Loaded catalog from {self._path} ({len(config.profiles)} profiles)")
        return config

    def save(self, config: CatalogConfig) -> None:
        """Write the full catalog document, replacing any existing file.

        The file is overwritten in place; an interrupted write can leave it
        truncated.

        Raises:
            CatalogSaveError: If the document cannot be written
        """
        document = config.model_dump(mode="json", by_alias=True)
        try:
            text = serialize_document(document, indent=2)
        except DocumentError as e:
            raise CatalogSaveError(str(e)) from e

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(text + "\n")
        except OSError as e:
            raise CatalogSaveError(f"Failed to open config file for writing: {self._path}") from e
        logger.debug(f"Saved catalog to {self._path}")

    def _from_document(self, root: dict[str, Any]) -> CatalogConfig:
        defaults = self.new_config()
        idle_prefix = _get_str(root, "idle_profile_prefix", defaults.idle_profile_prefix)

        profiles: list[Profile] = []
        raw_profiles = _lookup(root, "profiles")
        if isinstance(raw_profiles, list):
            for item in raw_profiles:
                if not isinstance(item, dict):
                    continue
                profile = _parse_profile(item, idle_prefix)
                if profile.id:
                    profiles.append(profile)

        return CatalogConfig(
            schema_version=_get_int(root, "schema_version", defaults.schema_version),
            asset_root=Path(_get_str(root, "asset_root", str(defaults.asset_root))),
            images_folder_name=_get_str(root, "images_folder_name", defaults.images_folder_name),
            idle_profile_prefix=idle_prefix,
            official_profile_folder=_get_str(root, "official_profile_folder", defaults.official_profile_folder),
            backup_profile_folder=_get_str(root, "backup_profile_folder", defaults.backup_profile_folder),
            active_profile_id=_get_str(root, "active_profile_id", ""),
            profiles=profiles,
        )

    @staticmethod
    def _finish(config: CatalogConfig) -> CatalogConfig:
        ensure_official_profile(config)
        normalize_profiles(config)
        if not config.active_profile_id:
            config.active_profile_id = OFFICIAL_PROFILE_ID
        return config
