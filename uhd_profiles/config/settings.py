"""Settings model for uhd-helper.

This module defines tool-level settings, separate from the profile catalog
document which holds the asset layout and the profile list.

Contract:
- Inputs: Environment variables, YAML settings file
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class HelperSettings(BaseSettings):
    """Configuration for the uhd-helper tool.

    Attributes:
        log_level: Logging level (default: warning)
        config_path: Catalog document path override (default: XDG config dir)
        default_asset_root: Asset root used when a new catalog is created
            (default: platform-specific)

    Example:
        >>> settings = HelperSettings()
        >>> assert settings.log_level == "warning"
    """

    model_config = SettingsConfigDict(
        env_prefix="UHD_HELPER_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "warning"
    config_path: str | None = None
    default_asset_root: str | None = None

    @field_validator("config_path", "default_asset_root")
    @classmethod
    def expand_user(cls, v: str | None) -> str | None:
        """Expand ~ in path settings; empty strings mean unset."""
        if not v:
            return None
        return str(Path(v).expanduser())

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().lower()
