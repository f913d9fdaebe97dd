"""Exceptions raised by profile catalog operations.

Every failure carries a human-readable message as its ``str()``; callers
surface it verbatim.
"""

from pathlib import Path


class ProfileError(Exception):
    """Base exception for profile catalog failures."""

    pass


class InvalidProfileError(ProfileError, ValueError):
    """Raised for empty, unknown or protected profile ids.

    Always raised before any filesystem mutation.
    """

    pass


class FilesystemError(ProfileError):
    """Raised when a directory cannot be created, moved, copied or removed."""

    def __init__(self, message: str, *paths: Path) -> None:
        super().__init__(message)
        self.paths = tuple(Path(p) for p in paths)


class CatalogLoadError(ProfileError):
    """Raised when the catalog document cannot be opened or parsed."""

    pass


class CatalogSaveError(ProfileError):
    """Raised when the catalog document cannot be written.

    When raised after a mutation, the in-memory catalog and possibly the
    directory layout have already changed.
    """

    pass
