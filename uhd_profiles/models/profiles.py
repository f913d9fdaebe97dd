"""Profile catalog models for uhd_profiles."""

from pathlib import Path

from pydantic import Field

from uhd_profiles.models.base import CamelCaseModel

OFFICIAL_PROFILE_ID = "official"
OFFICIAL_DISPLAY_NAME = "NI Official"


class Profile(CamelCaseModel):
    """A named set of assets stored in its own folder under the asset root."""

    id: str = Field(description="Stable, unique profile identifier")
    display_name: str = Field(default="", description="Human-readable label (defaults to id)")
    folder_name: str = Field(default="", description="Folder, relative to the asset root, holding idle content")
    is_official: bool = Field(default=False, description="Whether this is the reserved official baseline")


class CatalogConfig(CamelCaseModel):
    """In-memory catalog state.

    This is the single state container every catalog operation receives
    explicitly. It is loaded and saved as a whole by ``CatalogStore``.

    Attributes:
        schema_version: Document schema version
        asset_root: Directory holding every profile folder and the active slot
        images_folder_name: Name of the active slot under ``asset_root``
        idle_profile_prefix: Prefix of non-official profile folders
        official_profile_folder: Reserved folder of the official baseline
        backup_profile_folder: Reserved single-capacity backup folder
        active_profile_id: Id of the profile materialized in the active slot
        profiles: Known profiles, in insertion order
    """

    schema_version: int = 1
    asset_root: Path
    images_folder_name: str
    idle_profile_prefix: str
    official_profile_folder: str
    backup_profile_folder: str
    active_profile_id: str = ""
    profiles: list[Profile] = Field(default_factory=list)

    @property
    def images_path(self) -> Path:
        """Path of the active slot."""
        return self.asset_root / self.images_folder_name

    @property
    def official_path(self) -> Path:
        """Path of the official baseline folder."""
        return self.asset_root / self.official_profile_folder

    @property
    def backup_path(self) -> Path:
        """Path of the backup slot."""
        return self.asset_root / self.backup_profile_folder

    def profile_path(self, profile: Profile) -> Path:
        """Path holding ``profile``'s content while it is idle."""
        return self.asset_root / profile.folder_name
