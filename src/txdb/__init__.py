"""
Transactional Key-Value Store

An in-memory key-value store with nested BEGIN/ROLLBACK/COMMIT blocks, driven
by a line-oriented command protocol.
"""

from .scope import Scope
from .transaction import TransactionStack, TransactionSignal
from .commands import (
    Command,
    Set,
    Get,
    Unset,
    NumEqualTo,
    Begin,
    Rollback,
    Commit,
    End,
    parse_command,
)
from .dispatcher import Session, SessionState, DispatchResult, dispatch
from .interpreter import Interpreter, LineResult, format_output
from .exceptions import (
    TxdbError,
    CommandError,
    ArityError,
    InvalidValueError,
    UnknownCommandError,
    SessionTerminatedError,
    InputStreamError,
)

__version__ = "0.1.0"
__all__ = [
    "Scope",
    "TransactionStack",
    "TransactionSignal",
    "Command",
    "Set",
    "Get",
    "Unset",
    "NumEqualTo",
    "Begin",
    "Rollback",
    "Commit",
    "End",
    "parse_command",
    "Session",
    "SessionState",
    "DispatchResult",
    "dispatch",
    "Interpreter",
    "LineResult",
    "format_output",
    "TxdbError",
    "CommandError",
    "ArityError",
    "InvalidValueError",
    "UnknownCommandError",
    "SessionTerminatedError",
    "InputStreamError",
]
