"""uhd-helper front-end.

Command handlers, the click CLI and the interactive session over
uhd_profiles.
"""

from .commands import CommandResult
from .commands import ProfileCommands
from .commands import ProfileEntry

__all__ = [
    "CommandResult",
    "ProfileCommands",
    "ProfileEntry",
]
