"""Discord gateway interface."""

from .bot import PunchlineBot
from .commands import COMMANDS, Command, CommandName, parse_command

__all__ = [
    "PunchlineBot",
    "COMMANDS",
    "Command",
    "CommandName",
    "parse_command",
]
