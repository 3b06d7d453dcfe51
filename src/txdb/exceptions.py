"""
Custom exceptions for the transactional key-value store.
"""

from typing import Optional


class TxdbError(Exception):
    """Base exception for all txdb errors."""
    pass


class CommandError(TxdbError):
    """Exception raised when an input line is not a valid command.

    ``message`` is the exact text shown to the user (without the ``> `` prefix).
    """

    def __init__(self, message: str, verb: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.verb = verb


class ArityError(CommandError):
    """Exception raised when a known verb gets the wrong number of arguments."""

    def __init__(self, verb: str) -> None:
        super().__init__(f"Incorrect number of arguments for {verb} command", verb)


class InvalidValueError(CommandError):
    """Exception raised when an integer argument cannot be parsed."""

    def __init__(self, verb: str) -> None:
        super().__init__(f"Invalid value supplied to {verb}", verb)


class UnknownCommandError(CommandError):
    """Exception raised for an unrecognised verb."""

    def __init__(self, verb: Optional[str] = None) -> None:
        super().__init__("INVALID COMMAND", verb)


class SessionTerminatedError(TxdbError):
    """Exception raised when a command is sent to a session that has ended."""
    pass


class InputStreamError(TxdbError):
    """Exception raised when the input stream can no longer be read."""
    pass
