"""
Line protocol on top of the dispatcher.

Valid lines are echoed back verbatim before their output; invalid lines only
produce an error. Every generated line carries the ``> `` prefix.
"""

import logging
from typing import Callable, Iterable, List, NamedTuple, Union

from .commands import parse_command
from .dispatcher import Session, dispatch
from .exceptions import CommandError, InputStreamError, SessionTerminatedError

logger = logging.getLogger(__name__)

OUTPUT_PREFIX = "> "
INPUT_ENCODING = "utf-8"


def format_output(text: str) -> str:
    """Prefix a result or error line for output."""
    return f"{OUTPUT_PREFIX}{text}"


class LineResult(NamedTuple):
    """Lines to print for one input line and whether processing stops."""
    lines: List[str]
    terminated: bool = False


class Interpreter:
    """
    Runs input lines against a private session.

    Example usage:
        interpreter = Interpreter()
        interpreter.execute("SET a 10").lines    # ["SET a 10"]
        interpreter.execute("GET a").lines       # ["GET a", "> 10"]
        interpreter.execute("GET").lines         # ["> Incorrect number of arguments for GET command"]
    """

    def __init__(self) -> None:
        self.session = Session()

    @property
    def terminated(self) -> bool:
        return self.session.terminated

    def execute(self, line: str) -> LineResult:
        """
        Process a single input line.

        Raises:
            SessionTerminatedError: If END was already processed
        """
        if self.session.terminated:
            raise SessionTerminatedError("Session has ended; no further commands are accepted")

        line = line.rstrip("\r\n")
        if not line.strip():
            return LineResult([])

        try:
            command = parse_command(line)
        except CommandError as e:
            logger.debug("Rejected %r: %s", line, e.message)
            return LineResult([format_output(e.message)])

        result = dispatch(command, self.session)
        lines = [line]
        if result.output is not None:
            lines.append(format_output(result.output))
        return LineResult(lines, result.terminate)

    def run(self, lines: Iterable[Union[str, bytes]], write: Callable[[str], None]) -> int:
        """
        Read-dispatch-print loop.

        Stops at END without reading any further lines, or when ``lines`` is
        exhausted. Byte lines are decoded as UTF-8 one at a time, so every
        line before an undecodable one is still processed.

        Returns:
            The process exit code

        Raises:
            InputStreamError: If reading from ``lines`` fails
        """
        iterator = iter(lines)
        while True:
            try:
                line = next(iterator)
            except StopIteration:
                return 0
            except (OSError, UnicodeDecodeError) as e:
                raise InputStreamError(f"Read Error: {e}") from e

            if isinstance(line, bytes):
                try:
                    line = line.decode(INPUT_ENCODING)
                except UnicodeDecodeError as e:
                    raise InputStreamError(f"Read Error: {e}") from e

            result = self.execute(line)
            for output in result.lines:
                write(output)
            if result.terminated:
                logger.debug("END received, stopping")
                return 0
