"""
Dispatcher: applies one command to a session.
"""

from enum import Enum
from typing import NamedTuple, Optional

from .commands import (
    Begin,
    Command,
    Commit,
    End,
    Get,
    NumEqualTo,
    Rollback,
    Set,
    Unset,
)
from .exceptions import SessionTerminatedError
from .scope import Scope
from .transaction import TransactionSignal, TransactionStack

NULL = "NULL"
NO_TRANSACTION = "NO TRANSACTION"


class SessionState(Enum):
    """Run state of a session."""
    RUNNING = "running"
    TERMINATED = "terminated"


class Session:
    """The current scope, its transaction stack and the run state."""

    def __init__(self) -> None:
        self.scope = Scope()
        self.stack = TransactionStack()
        self.state = SessionState.RUNNING

    @property
    def terminated(self) -> bool:
        return self.state is SessionState.TERMINATED


class DispatchResult(NamedTuple):
    """Text to report (without prefix) and whether the session has ended."""
    output: Optional[str] = None
    terminate: bool = False


def _signal_output(signal: TransactionSignal) -> DispatchResult:
    if signal is TransactionSignal.NO_TRANSACTION:
        return DispatchResult(NO_TRANSACTION)
    return DispatchResult()


def dispatch(command: Command, session: Session) -> DispatchResult:
    """
    Apply ``command`` to ``session``.

    Args:
        command: A parsed command
        session: The session to mutate

    Returns:
        The output line for the command, if any, and the terminal flag

    Raises:
        SessionTerminatedError: If the session already received END
    """
    if session.terminated:
        raise SessionTerminatedError("Session has ended; no further commands are accepted")

    scope = session.scope
    stack = session.stack

    if isinstance(command, Set):
        scope.set(command.key, command.value)
        return DispatchResult()

    if isinstance(command, Get):
        value = scope.get(command.key)
        return DispatchResult(NULL if value is None else str(value))

    if isinstance(command, Unset):
        scope.unset(command.key)
        return DispatchResult()

    if isinstance(command, NumEqualTo):
        return DispatchResult(str(scope.num_equal_to(command.value)))

    if isinstance(command, Begin):
        stack.begin(scope)
        return DispatchResult()

    if isinstance(command, Rollback):
        return _signal_output(stack.rollback(scope))

    if isinstance(command, Commit):
        return _signal_output(stack.commit())

    if isinstance(command, End):
        session.state = SessionState.TERMINATED
        return DispatchResult(terminate=True)

    raise TypeError(f"Unsupported command: {command!r}")
