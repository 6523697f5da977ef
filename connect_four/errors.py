"""Exceptions raised by the game."""


class Connect4Error(Exception):
    """Base class for every error the game reports."""

    message = "[CONNECT_4_ERROR]"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class ChannelRecvError(Connect4Error):
    """Receiving from a communication channel failed."""

    message = "[CONNECT_4_ERROR] - Channel Recv"


class ChannelSendError(Connect4Error):
    """Sending on a communication channel failed."""

    message = "[CONNECT_4_ERROR] - Channel Send"


class InvalidInputError(Connect4Error):
    """The user entered something that cannot be used."""

    message = "[CONNECT_4_ERROR] - Input Error"


class ColumnFullError(Connect4Error):
    """A token was played in a column that has no room left."""

    message = "[CONNECT_4_ERROR] - Column is full"