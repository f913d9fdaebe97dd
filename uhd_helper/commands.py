"""Command handlers over the profile catalog.

Each handler runs one catalog operation and reports the outcome as a
``CommandResult`` for whichever front-end is rendering it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from uhd_profiles.catalog.manager import ProfileManager
from uhd_profiles.errors import ProfileError
from uhd_profiles.models.profiles import Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command: success flag plus a message for the operator."""

    ok: bool
    message: str


@dataclass(frozen=True)
class ProfileEntry:
    """A profile as shown in a listing."""

    id: str
    label: str
    is_active: bool
    is_official: bool


def profile_label(profile: Profile, active_id: str) -> str:
    """Build the listing label, e.g. ``"NI Official [active] (official)"``."""
    label = profile.display_name
    if profile.id == active_id:
        label += " [active]"
    if profile.is_official:
        label += " (official)"
    return label


class ProfileCommands:
    """Command handlers shared by the CLI and the interactive session."""

    def __init__(self, manager: ProfileManager) -> None:
        self.manager = manager

    def _run(self, action: Callable[[], object], success: str) -> CommandResult:
        try:
            action()
        except ProfileError as e:
            logger.debug(f"Command failed: {e}")
            return CommandResult(ok=False, message=str(e))
        return CommandResult(ok=True, message=success)

    def initialize(self) -> CommandResult:
        return self._run(self.manager.initialize, "Profiles loaded")

    def entries(self) -> list[ProfileEntry]:
        """List profiles in catalog order."""
        active_id = self.manager.active_profile_id
        return [
            ProfileEntry(
                id=profile.id,
                label=profile_label(profile, active_id),
                is_active=profile.id == active_id,
                is_official=profile.is_official,
            )
            for profile in self.manager.profiles
        ]

    def listing(self) -> CommandResult:
        entries = self.entries()
        if not entries:
            return CommandResult(ok=False, message="No profiles found")
        return CommandResult(ok=True, message="\n".join(f"{e.id}\t{e.label}" for e in entries))

    def apply(self, profile_id: str) -> CommandResult:
        return self._run(lambda: self.manager.apply_profile(profile_id), "Profile applied")

    def add(self, display_name: str) -> CommandResult:
        return self._run(lambda: self.manager.add_profile_from_active(display_name), "Profile created")

    def delete(self, profile_id: str) -> CommandResult:
        return self._run(lambda: self.manager.delete_profile(profile_id), "Profile deleted")

    def reset(self) -> CommandResult:
        return self._run(self.manager.reset_to_official, "Official profile applied")

    def refresh(self) -> CommandResult:
        return self._run(self.manager.refresh_from_disk, "Profiles refreshed")

    def status(self) -> CommandResult:
        manager = self.manager
        lines = [
            f"Active profile: {manager.active_profile_id or '(none)'}",
            f"Asset root:     {manager.asset_root}",
            f"Images path:    {manager.images_path}",
            f"Config path:    {manager.config_path}",
        ]
        return CommandResult(ok=True, message="\n".join(lines))
