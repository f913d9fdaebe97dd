"""
Unit tests for command handlers and the interactive session.
"""

from pathlib import Path

import pytest

from uhd_helper.commands import CommandResult
from uhd_helper.commands import ProfileCommands
from uhd_helper.commands import profile_label
from uhd_helper.interactive import ACTIONS
from uhd_helper.interactive import InteractiveSession
from uhd_profiles.catalog.manager import ProfileManager
from uhd_profiles.models.profiles import Profile

OFFICIAL = Profile(id="official", display_name="NI Official", is_official=True)
ACTION_INDEX = {name: index for index, (name, _) in enumerate(ACTIONS)}


@pytest.fixture
def commands(manager: ProfileManager) -> ProfileCommands:
    return ProfileCommands(manager)


class FakePrompter:
    """Scripted prompter recording everything shown."""

    def __init__(
        self, choices: list[int | None], answers: list[str] | None = None, confirms: list[bool] | None = None
    ) -> None:
        self.choices = list(choices)
        self.answers = list(answers or [])
        self.confirms = list(confirms or [])
        self.shown: list[tuple[str, bool]] = []
        self.menus: list[tuple[str, list[str]]] = []

    def show(self, message: str, error: bool = False) -> None:
        self.shown.append((message, error))

    def choose(self, title: str, options: list[str]) -> int | None:
        self.menus.append((title, options))
        return self.choices.pop(0)

    def ask(self, prompt: str) -> str:
        return self.answers.pop(0)

    def confirm(self, prompt: str) -> bool:
        return self.confirms.pop(0)


@pytest.mark.unit
class TestProfileLabel:
    """Test listing labels."""

    @pytest.mark.parametrize(
        ("profile", "active_id", "expected"),
        [
            (OFFICIAL, "official", "NI Official [active] (official)"),
            (OFFICIAL, "theme", "NI Official (official)"),
            (Profile(id="theme", display_name="Theme"), "theme", "Theme [active]"),
            (Profile(id="theme", display_name="Theme"), "official", "Theme"),
        ],
    )
    def test_label(self, profile: Profile, active_id: str, expected: str) -> None:
        assert profile_label(profile, active_id) == expected


@pytest.mark.unit
class TestProfileCommands:
    """Test command handlers."""

    def test_entries(self, commands: ProfileCommands) -> None:
        commands.add("My Theme")

        entries = commands.entries()

        assert [(e.id, e.is_active, e.is_official) for e in entries] == [
            ("official", True, True),
            ("my_theme", False, False),
        ]

    def test_listing(self, commands: ProfileCommands) -> None:
        commands.add("My Theme")

        result = commands.listing()

        assert result == CommandResult(ok=True, message="official\tNI Official [active] (official)\nmy_theme\tMy Theme")

    def test_listing_empty_catalog(self, commands: ProfileCommands) -> None:
        commands.manager.config.profiles = []

        assert commands.listing() == CommandResult(ok=False, message="No profiles found")

    def test_success_messages(self, commands: ProfileCommands) -> None:
        assert commands.add("Theme") == CommandResult(ok=True, message="Profile created")
        assert commands.apply("theme") == CommandResult(ok=True, message="Profile applied")
        assert commands.reset() == CommandResult(ok=True, message="Official profile applied")
        assert commands.delete("theme") == CommandResult(ok=True, message="Profile deleted")
        assert commands.refresh() == CommandResult(ok=True, message="Profiles refreshed")

    def test_failures_become_results(self, commands: ProfileCommands) -> None:
        assert commands.apply("nope") == CommandResult(ok=False, message="Unknown profile id: nope")
        assert commands.delete("official") == CommandResult(ok=False, message="Cannot delete the active profile")

    def test_initialize_failure(self, commands: ProfileCommands, config_path: Path) -> None:
        config_path.write_text("[]", encoding="utf-8")

        assert commands.initialize() == CommandResult(ok=False, message="Config JSON root is not an object")

    def test_status(self, commands: ProfileCommands, asset_root: Path, config_path: Path) -> None:
        result = commands.status()

        assert result.ok
        assert result.message.splitlines() == [
            "Active profile: official",
            f"Asset root:     {asset_root}",
            f"Images path:    {asset_root / 'images'}",
            f"Config path:    {config_path}",
        ]


@pytest.mark.unit
class TestInteractiveSession:
    """Test the interactive menu loop."""

    def test_cancel_at_action_menu_exits(self, commands: ProfileCommands) -> None:
        prompter = FakePrompter(choices=[None])

        InteractiveSession(commands, prompter).run()

        assert ("\nProfiles:", False) in prompter.shown
        assert ("  NI Official [active] (official)", False) in prompter.shown

    def test_add_apply_then_quit(self, commands: ProfileCommands) -> None:
        prompter = FakePrompter(
            choices=[ACTION_INDEX["add"], ACTION_INDEX["apply"], 1, ACTION_INDEX["quit"]],
            answers=["My Theme"],
        )

        InteractiveSession(commands, prompter).run()

        assert ("Profile created", False) in prompter.shown
        assert ("Profile applied", False) in prompter.shown
        assert commands.manager.active_profile_id == "my_theme"
        assert prompter.menus[2] == ("Profiles", ["NI Official [active] (official)", "My Theme"])

    def test_failed_command_shown_as_error(self, commands: ProfileCommands) -> None:
        prompter = FakePrompter(choices=[ACTION_INDEX["delete"], 0, ACTION_INDEX["quit"]], confirms=[True])

        InteractiveSession(commands, prompter).run()

        assert ("Cannot delete the active profile", True) in prompter.shown

    def test_delete_requires_confirmation(self, commands: ProfileCommands) -> None:
        commands.add("Theme")
        prompter = FakePrompter(choices=[1], confirms=[False])

        assert InteractiveSession(commands, prompter).dispatch("delete") is None
        assert commands.manager.get_profile("theme") is not None

    def test_delete_confirmed(self, commands: ProfileCommands) -> None:
        commands.add("Theme")
        prompter = FakePrompter(choices=[1], confirms=[True])

        result = InteractiveSession(commands, prompter).dispatch("delete")

        assert result == CommandResult(ok=True, message="Profile deleted")
        assert commands.manager.get_profile("theme") is None

    def test_cancel_profile_selection(self, commands: ProfileCommands) -> None:
        prompter = FakePrompter(choices=[None])

        assert InteractiveSession(commands, prompter).dispatch("apply") is None

    def test_no_profiles_available(self, commands: ProfileCommands) -> None:
        commands.manager.config.profiles = []
        prompter = FakePrompter(choices=[])

        assert InteractiveSession(commands, prompter).dispatch("apply") is None
        assert prompter.shown == [("No profiles available", True)]

    def test_reset_and_refresh(self, commands: ProfileCommands) -> None:
        session = InteractiveSession(commands, FakePrompter(choices=[]))

        assert session.dispatch("reset") == CommandResult(ok=True, message="Official profile applied")
        assert session.dispatch("refresh") == CommandResult(ok=True, message="Profiles refreshed")

    def test_unknown_action(self, commands: ProfileCommands) -> None:
        with pytest.raises(ValueError, match="Unknown action"):
            InteractiveSession(commands, FakePrompter(choices=[])).dispatch("explode")
