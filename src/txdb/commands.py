"""
Command model and line parser.

Every valid input line becomes exactly one of the frozen dataclasses below.
"""

import re
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, List, Tuple, Union

from .exceptions import ArityError, InvalidValueError, UnknownCommandError

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Set:
    verb: ClassVar[str] = "SET"
    key: str
    value: int


@dataclass(frozen=True)
class Get:
    verb: ClassVar[str] = "GET"
    key: str


@dataclass(frozen=True)
class Unset:
    verb: ClassVar[str] = "UNSET"
    key: str


@dataclass(frozen=True)
class NumEqualTo:
    verb: ClassVar[str] = "NUMEQUALTO"
    value: int


@dataclass(frozen=True)
class Begin:
    verb: ClassVar[str] = "BEGIN"


@dataclass(frozen=True)
class Rollback:
    verb: ClassVar[str] = "ROLLBACK"


@dataclass(frozen=True)
class Commit:
    verb: ClassVar[str] = "COMMIT"


@dataclass(frozen=True)
class End:
    verb: ClassVar[str] = "END"


Command = Union[Set, Get, Unset, NumEqualTo, Begin, Rollback, Commit, End]


def tokenize(line: str) -> List[str]:
    """Split a line into whitespace-separated words."""
    return line.split()


def parse_int32(text: str, verb: str) -> int:
    """Parse a signed 32-bit integer argument for ``verb``."""
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidValueError(verb)

    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidValueError(verb)
    return value


def _parse_set(args: List[str]) -> Command:
    return Set(args[0], parse_int32(args[1], Set.verb))


def _parse_num_equal_to(args: List[str]) -> Command:
    return NumEqualTo(parse_int32(args[0], NumEqualTo.verb))


# verb -> (arity, builder)
_GRAMMAR: Dict[str, Tuple[int, Callable[[List[str]], Command]]] = {
    Set.verb: (2, _parse_set),
    Get.verb: (1, lambda args: Get(args[0])),
    Unset.verb: (1, lambda args: Unset(args[0])),
    NumEqualTo.verb: (1, _parse_num_equal_to),
    Begin.verb: (0, lambda args: Begin()),
    Rollback.verb: (0, lambda args: Rollback()),
    Commit.verb: (0, lambda args: Commit()),
    End.verb: (0, lambda args: End()),
}


def parse_words(words: List[str]) -> Command:
    """
    Build a command from an already tokenized line.

    Raises:
        UnknownCommandError: If the first word is not a known verb
        ArityError: If the verb gets the wrong number of arguments
        InvalidValueError: If an integer argument does not parse
    """
    if not words or words[0] not in _GRAMMAR:
        raise UnknownCommandError(words[0] if words else None)

    verb, args = words[0], words[1:]
    arity, build = _GRAMMAR[verb]
    if len(args) != arity:
        raise ArityError(verb)

    return build(args)


def parse_command(line: str) -> Command:
    """Parse one input line into a command."""
    return parse_words(tokenize(line))
