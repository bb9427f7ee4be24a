"""
Discord bot commands for the Subject Helper Bot.
"""

from .create_subject import setup_create_subject_command
from .helper_commands import setup_helper_commands

__all__ = [
    "setup_create_subject_command",
    "setup_helper_commands",
]
