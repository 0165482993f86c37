"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class CommandError(InterfaceError):
    """Chat command could not be parsed.

    The message is shown to the user as-is.
    """

    pass
