"""Platform detection and built-in catalog defaults.

Contract:
- Inputs: The running platform
- Outputs: Default asset root, active slot name, reserved folder names
- Side Effects: None
"""

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class OsKind(str, Enum):
    """Platforms with a known asset root."""

    LINUX = "linux"
    UNKNOWN = "unknown"


class LayoutVersion(str, Enum):
    """Known asset-root layouts."""

    DEFAULT = "default"


@dataclass(frozen=True)
class AppDefaults:
    """Built-in values used when a catalog document is created or a field is missing."""

    idle_profile_prefix: str = "I_P_"
    official_profile_folder: str = "R_NI"
    backup_profile_folder: str = "I_P__backup"
    schema_version: int = 1


DEFAULTS = AppDefaults()


def detect_os() -> OsKind:
    """Detect the running platform."""
    if sys.platform.startswith("linux"):
        return OsKind.LINUX
    return OsKind.UNKNOWN


def default_asset_root(os_kind: OsKind | None = None) -> Path:
    """Get the default asset root for a platform.

    Args:
        os_kind: Platform to resolve for (default: detected platform)

    Returns:
        ``/usr/share/uhd`` on Linux, an empty path on unknown platforms
    """
    if os_kind is None:
        os_kind = detect_os()
    if os_kind is OsKind.LINUX:
        return Path("/usr/share/uhd")
    return Path()


def images_folder_name(version: LayoutVersion = LayoutVersion.DEFAULT) -> str:
    """Get the active slot folder name for a layout version."""
    return "images"
