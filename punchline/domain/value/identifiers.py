"""Strongly typed identifiers for Punchline domain entities.

Chat platforms hand out opaque string ids (Discord snowflakes), so every
identifier wraps ``str``. NewType keeps joke ids and user ids from being
mixed up.
"""

from typing import NewType

# A joke is identified by the id of the chat message that carries it
JokeId = NewType("JokeId", str)
UserId = NewType("UserId", str)
