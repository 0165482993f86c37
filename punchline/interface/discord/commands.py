"""Chat command parsing."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

from punchline.interface.error import CommandError

_POINTS_PATTERN = re.compile(r"^-?\d+$")


class CommandName(str, Enum):
    """Command names, matched case-sensitively after the prefix."""

    RANK_JOKE = "rankjoke"
    LEADERBOARD = "leaderboard"
    RANDOM_JOKE = "randomJoke"
    MY_RANK = "myrank"
    BEST_JOKE = "bestjoke"
    COMMANDS = "commands"


class Command(BaseModel):
    """A parsed chat command."""

    model_config = ConfigDict(frozen=True)

    name: CommandName
    points: int | None = None  # Only set for rankjoke


# Usage and description shown by the commands listing
COMMANDS: list[tuple[CommandName, str, str]] = [
    (
        CommandName.RANK_JOKE,
        "[points]",
        "Reply to a joke message to add or deduct points (±100 max).",
    ),
    (CommandName.LEADERBOARD, "", "Show the top users by total points."),
    (CommandName.RANDOM_JOKE, "", "Fetch a random stored joke."),
    (CommandName.MY_RANK, "", "Show your personal total points and rank."),
    (CommandName.BEST_JOKE, "", "Display the highest scoring joke."),
    (CommandName.COMMANDS, "", "List all available commands."),
]


def parse_command(text: str, prefix: str = "!") -> Command | None:
    """Parse a chat message into a command.

    Commands without arguments must be the whole message. ``rankjoke`` takes
    its points from the first word after the command; anything after that
    is ignored.

    Args:
        text: Raw message content
        prefix: Command prefix

    Returns:
        The command, or None if the message is not a command

    Raises:
        CommandError: If the rankjoke points are missing or not an integer
    """
    content = text.strip()
    if not content.startswith(prefix):
        return None

    words = content[len(prefix):].split()
    if not words:
        return None

    try:
        name = CommandName(words[0])
    except ValueError:
        return None

    if name == CommandName.RANK_JOKE:
        argument = words[1] if len(words) > 1 else ""
        if not _POINTS_PATTERN.match(argument):
            raise CommandError(f"Invalid points. Usage: {prefix}{name.value} [points]")
        return Command(name=name, points=int(argument))

    if len(words) > 1:
        return None

    return Command(name=name)
