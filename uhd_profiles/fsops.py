"""Directory primitives used by the catalog engine.

Each helper performs one filesystem call and turns ``OSError`` into
``FilesystemError`` naming the offending path(s). Nothing is retried.
"""

import logging
import shutil
from pathlib import Path

from uhd_profiles.errors import FilesystemError

logger = logging.getLogger(__name__)


def folder_exists(path: Path) -> bool:
    """Return True if ``path`` exists and is a directory."""
    try:
        return path.is_dir()
    except OSError:
        return False


def ensure_dir(path: Path) -> None:
    """Create ``path`` (and parents) unless it already is a directory.

    Raises:
        FilesystemError: If the path exists as a non-directory or cannot be created
    """
    if path.exists():
        if not path.is_dir():
            raise FilesystemError(f"Path exists but is not a directory: {path}", path)
        return

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Failed to create directory: {path}", path) from e
    logger.debug(f"Created directory {path}")


def remove_tree(path: Path) -> None:
    """Recursively delete ``path``.

    Raises:
        FilesystemError: If removal fails
    """
    try:
        if path.is_symlink() or not path.is_dir():
            path.unlink(missing_ok=True)
        else:
            shutil.rmtree(path)
    except OSError as e:
        raise FilesystemError(f"Failed to remove: {path}", path) from e
    logger.debug(f"Removed {path}")


def rename_dir(src: Path, dst: Path) -> None:
    """Move ``src`` to ``dst`` with a single rename.

    Raises:
        FilesystemError: If the rename fails
    """
    try:
        src.rename(dst)
    except OSError as e:
        raise FilesystemError(f"Failed to rename from {src} to {dst}", src, dst) from e
    logger.debug(f"Renamed {src} -> {dst}")


def copy_tree(src: Path, dst: Path) -> None:
    """Recursively copy ``src`` into ``dst``.

    Existing files under ``dst`` are overwritten. Symlinks are copied as links.

    Raises:
        FilesystemError: If the source is missing or copying fails
    """
    if not src.exists():
        raise FilesystemError(f"Source does not exist: {src}", src)

    try:
        shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Failed to copy from {src} to {dst}", src, dst) from e
    logger.debug(f"Copied {src} -> {dst}")


def list_dirs(parent: Path) -> list[Path]:
    """List immediate subdirectories of ``parent``, sorted by name.

    Returns:
        Subdirectory paths, or an empty list if ``parent`` is not a directory
    """
    if not folder_exists(parent):
        return []
    try:
        return sorted((entry for entry in parent.iterdir() if entry.is_dir()), key=lambda p: p.name)
    except OSError as e:
        logger.warning(f"Failed to list {parent}: {e}")
        return []
