"""A line-oriented console monitor and the command splitting of a simple shell."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Union

from .ctype import isspace
from .strings import strtok

Line = Union[str, bytes, bytearray]

MAX_LINE = 1024
SEPARATORS = b" \t\n"

READY_BANNER = "YALNIX READY\n"
HALT_HINT = "Type `halt' to halt Yalnix.\n"
PROMPT = ">>> "
HALTING = "Halting....\n"
MISSING_TERMINAL = "CONSOLE requires a terminal id.\n"


class ConsoleAction(enum.Enum):
    """What the console does with one input line."""

    IGNORE = enum.auto()
    HALT = enum.auto()
    UNRECOGNIZED = enum.auto()


def _raw(line: Line) -> bytes:
    return line.encode("latin-1") if isinstance(line, str) else bytes(line)


def _usable(raw: bytes) -> bytes | None:
    """The line up to its first NUL, or ``None`` if it is empty or too long."""
    if not raw or len(raw) >= MAX_LINE:
        return None
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def console_command(line: Line) -> tuple[ConsoleAction, str]:
    """Classify a console line by its first word.

    Returns the action and the word it was decided on (empty when ignored).
    """
    data = _usable(_raw(line))
    if data is None:
        return ConsoleAction.IGNORE, ""
    start = next((i for i, ch in enumerate(data) if not isspace(ch)), len(data))
    end = next(
        (i for i in range(start, len(data)) if isspace(data[i])), len(data)
    )
    word = data[start:end].decode("latin-1")
    if word == "halt":
        return ConsoleAction.HALT, word
    if not word:
        return ConsoleAction.IGNORE, ""
    return ConsoleAction.UNRECOGNIZED, word


def split_command(line: Line) -> list[str]:
    """Split a shell line on spaces, tabs and newlines.

    Empty lines and lines of ``MAX_LINE`` bytes or more give no words.
    """
    data = _usable(_raw(line))
    if data is None:
        return []
    return [token.decode("latin-1") for token in strtok(data, SEPARATORS)]


def run_console(lines: Iterable[Line], write: Callable[[str], object]) -> int | None:
    """Serve console lines until ``halt``.

    Returns 0 once halted, or ``None`` if the input ended first.
    """
    write(READY_BANNER)
    write(HALT_HINT)
    for line in lines:
        write(PROMPT)
        action, word = console_command(line)
        if action is ConsoleAction.HALT:
            write(HALTING)
            return 0
        if action is ConsoleAction.UNRECOGNIZED:
            write(f"`{word}': Command not recognized.\n")
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the console on standard input and output for the given terminal id."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write(MISSING_TERMINAL)
        return -1

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    status = run_console(sys.stdin, write)
    return 0 if status is None else status


if __name__ == "__main__":
    sys.exit(main())