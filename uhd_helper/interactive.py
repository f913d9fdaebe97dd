"""Interactive list/select/act session.

The session only talks to the operator through a ``Prompter``, so the same
loop can drive a terminal, a test double or another front-end.
"""

import logging
from typing import Protocol

import click

from .commands import CommandResult
from .commands import ProfileCommands

logger = logging.getLogger(__name__)

ACTIONS = [
    ("apply", "Apply profile"),
    ("add", "Add profile from official baseline"),
    ("delete", "Delete profile"),
    ("reset", "Reset to official"),
    ("refresh", "Refresh from disk"),
    ("quit", "Quit"),
]


class Prompter(Protocol):
    """Operator I/O used by ``InteractiveSession``."""

    def show(self, message: str, error: bool = False) -> None:
        """Render a message (error messages may be styled differently)."""
        ...

    def choose(self, title: str, options: list[str]) -> int | None:
        """Let the operator pick one option; return its index, or None to cancel."""
        ...

    def ask(self, prompt: str) -> str:
        """Collect a line of text."""
        ...

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question."""
        ...


class ClickPrompter:
    """Terminal prompter built on click."""

    def show(self, message: str, error: bool = False) -> None:
        if error:
            click.secho(message, fg="red", err=True)
        else:
            click.echo(message)

    def choose(self, title: str, options: list[str]) -> int | None:
        click.echo(f"\n{title}:")
        for number, option in enumerate(options, start=1):
            click.echo(f"  {number}. {option}")
        choice = click.prompt("Select (0 to cancel)", type=click.IntRange(0, len(options)), default=0)
        return None if choice == 0 else choice - 1

    def ask(self, prompt: str) -> str:
        return click.prompt(prompt, default="", show_default=False)

    def confirm(self, prompt: str) -> bool:
        return click.confirm(prompt, default=False)


class InteractiveSession:
    """Menu loop: pick an action, pick a profile where needed, report the result."""

    def __init__(self, commands: ProfileCommands, prompter: Prompter | None = None) -> None:
        self.commands = commands
        self.prompter = prompter or ClickPrompter()

    def run(self) -> None:
        """Run until the operator quits or cancels the action menu."""
        while True:
            self._show_profiles()
            index = self.prompter.choose("Actions", [label for _, label in ACTIONS])
            if index is None:
                return
            action = ACTIONS[index][0]
            if action == "quit":
                return

            result = self.dispatch(action)
            if result is not None:
                self.prompter.show(result.message, error=not result.ok)

    def dispatch(self, action: str) -> CommandResult | None:
        """Run one menu action.

        Returns:
            The command outcome, or None if the operator cancelled
        """
        if action == "apply":
            profile_id = self._select_profile()
            return None if profile_id is None else self.commands.apply(profile_id)

        if action == "add":
            name = self.prompter.ask("Profile name")
            return self.commands.add(name)

        if action == "delete":
            profile_id = self._select_profile()
            if profile_id is None:
                return None
            if not self.prompter.confirm(f"Delete profile '{profile_id}' and its folder?"):
                return None
            return self.commands.delete(profile_id)

        if action == "reset":
            return self.commands.reset()

        if action == "refresh":
            return self.commands.refresh()

        raise ValueError(f"Unknown action: {action}")

    def _show_profiles(self) -> None:
        entries = self.commands.entries()
        if not entries:
            self.prompter.show("No profiles found", error=True)
            return
        self.prompter.show("\nProfiles:")
        for entry in entries:
            self.prompter.show(f"  {entry.label}")

    def _select_profile(self) -> str | None:
        entries = self.commands.entries()
        if not entries:
            self.prompter.show("No profiles available", error=True)
            return None
        index = self.prompter.choose("Profiles", [entry.label for entry in entries])
        if index is None:
            return None
        return entries[index].id
