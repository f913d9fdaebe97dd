"""uhd-helper CLI.

Switches, creates and deletes UHD image profiles. With no subcommand the
interactive session starts.
"""

import logging
import sys
from pathlib import Path

import click

from uhd_profiles.catalog.manager import ProfileManager
from uhd_profiles.catalog.store import CatalogStore
from uhd_profiles.config.loader import load_settings
from uhd_profiles.config.settings import HelperSettings
from uhd_profiles.storage.paths import default_config_path

from .commands import CommandResult
from .commands import ProfileCommands
from .interactive import InteractiveSession

logger = logging.getLogger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def configure_logging(level: str) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_commands(settings: HelperSettings, config_path: Path | None = None) -> ProfileCommands:
    """Build command handlers from settings and an optional config path override.

    The catalog path is, in order: ``config_path``, the ``config_path``
    setting, the default XDG location.
    """
    if config_path is None:
        config_path = Path(settings.config_path) if settings.config_path else default_config_path()

    default_root = Path(settings.default_asset_root) if settings.default_asset_root else None
    store = CatalogStore(config_path, default_asset_root=default_root)
    return ProfileCommands(ProfileManager(store))


def report(result: CommandResult) -> None:
    """Print a command result; exit 1 if it failed."""
    if result.ok:
        click.echo(result.message)
        return
    click.echo(f"Error: {result.message}", err=True)
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Catalog document path (default: ~/.config/uhd-helper/config.json)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: from settings, else warning)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None):
    """uhd-helper - Switch between UHD image profiles."""
    settings = load_settings()
    if log_level is None:
        log_level = settings.log_level
    configure_logging(log_level)

    commands = build_commands(settings, config_path)
    result = commands.initialize()
    if not result.ok:
        click.echo(f"Failed to initialize: {result.message}", err=True)
        sys.exit(1)

    ctx.obj = commands
    if ctx.invoked_subcommand is None:
        InteractiveSession(commands).run()


@cli.command("list")
@click.pass_obj
def list_profiles(commands: ProfileCommands):
    """List profiles (tab-separated id and label)."""
    report(commands.listing())


@cli.command()
@click.pass_obj
def status(commands: ProfileCommands):
    """Show the active profile and paths."""
    report(commands.status())


@cli.command()
@click.argument("profile_id")
@click.pass_obj
def apply(commands: ProfileCommands, profile_id: str):
    """Make PROFILE_ID the active profile."""
    report(commands.apply(profile_id))


@cli.command()
@click.argument("name")
@click.pass_obj
def add(commands: ProfileCommands, name: str):
    """Create a profile NAME as a copy of the official images."""
    report(commands.add(name))


@cli.command()
@click.argument("profile_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def delete(commands: ProfileCommands, profile_id: str, yes: bool):
    """Delete PROFILE_ID and its folder."""
    if not yes and not click.confirm(f"Delete profile '{profile_id}' and its folder?"):
        click.echo("Cancelled")
        return
    report(commands.delete(profile_id))


@cli.command()
@click.pass_obj
def reset(commands: ProfileCommands):
    """Make the official profile active."""
    report(commands.reset())


@cli.command()
@click.pass_obj
def refresh(commands: ProfileCommands):
    """Pick up profile folders added on disk."""
    report(commands.refresh())


@cli.command()
@click.pass_obj
def interactive(commands: ProfileCommands):
    """Run the interactive menu."""
    InteractiveSession(commands).run()


def main():
    """Entry point for uhd-helper CLI."""
    try:
        cli()
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
