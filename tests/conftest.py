"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from uhd_profiles.catalog.manager import ProfileManager
from uhd_profiles.catalog.store import CatalogStore

OFFICIAL_FILES = {
    "usrp_b200_fpga.bin": "official-b200",
    "x300/usrp_x310_fpga_HG.lvbitx": "official-x310",
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from the real config dir and UHD_HELPER_* settings."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for var in ("UHD_HELPER_LOG_LEVEL", "UHD_HELPER_CONFIG_PATH", "UHD_HELPER_DEFAULT_ASSET_ROOT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """Empty asset root directory."""
    root = tmp_path / "uhd"
    root.mkdir()
    return root


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Catalog document path (not created)."""
    return tmp_path / "config" / "uhd-helper" / "config.json"


@pytest.fixture
def store(config_path: Path, asset_root: Path) -> CatalogStore:
    """Store whose new documents point at the test asset root."""
    return CatalogStore(config_path, default_asset_root=asset_root)


@pytest.fixture
def make_tree() -> Callable[[Path, dict[str, str]], Path]:
    """Create a directory holding the given relative files."""

    def _make(root: Path, files: dict[str, str]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return root

    return _make


@pytest.fixture
def read_tree() -> Callable[[Path], dict[str, bytes]]:
    """Snapshot every file under a directory as {relative path: bytes}."""

    def _read(root: Path) -> dict[str, bytes]:
        return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}

    return _read


@pytest.fixture
def official_snapshot() -> dict[str, bytes]:
    """Expected read_tree() of any folder holding the official images."""
    return {relative: content.encode() for relative, content in sorted(OFFICIAL_FILES.items())}


@pytest.fixture
def official_images(asset_root: Path, make_tree: Callable[[Path, dict[str, str]], Path]) -> Path:
    """First-run layout: only the active slot exists, holding the official images."""
    return make_tree(asset_root / "images", OFFICIAL_FILES)


@pytest.fixture
def manager(store: CatalogStore, official_images: Path) -> ProfileManager:
    """Manager initialized over a first-run asset root."""
    profile_manager = ProfileManager(store)
    profile_manager.initialize()
    return profile_manager
