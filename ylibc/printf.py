"""Formatted output with the conversions and flags of the ``printf`` family.

Integers follow a 32-bit target: ``int`` and ``long`` are 32 bits, ``long
long`` and ``intmax_t`` are 64 bits and pointers are 32 bits. Besides the usual
flags, ``'`` groups digits with ``_`` (every four hex digits, every three
otherwise). ``%n`` takes a callable that receives the number of characters
produced so far. Unknown conversions are copied to the output as they are.
"""

from __future__ import annotations

import enum
import operator
from collections.abc import Callable, Iterable
from typing import Any


class _Flag(enum.IntFlag):
    ZERO = 0x01
    MINUS = 0x02
    PLUS = 0x04
    TICK = 0x08
    SPACE = 0x10
    HASH = 0x20
    SIGNED = 0x40
    UPPER = 0x80


class _State(enum.Enum):
    NORMAL = enum.auto()
    FLAGS = enum.auto()
    WIDTH = enum.auto()
    PREC = enum.auto()
    MODIFIERS = enum.auto()


_RANK_CHAR = -2
_RANK_INT = 0
_RANK_LONGLONG = 2
_RANK_BITS = {-2: 8, -1: 16, 0: 32, 1: 32, 2: 64}
_POINTER_BITS = 32
_POINTER_DIGITS = (_POINTER_BITS + 3) // 4
_UINTMAX_BITS = 64
_UINTMAX_MASK = (1 << _UINTMAX_BITS) - 1

_FLAG_CHARS = {
    "-": _Flag.MINUS,
    "+": _Flag.PLUS,
    "'": _Flag.TICK,
    " ": _Flag.SPACE,
    "#": _Flag.HASH,
    "0": _Flag.ZERO,
}
_UNSIGNED_BASES = {"o": 8, "u": 10, "x": 16, "X": 16}
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _format_int(val: int, flags: _Flag, base: int, width: int, prec: int) -> str:
    digits = _UPPER_DIGITS if flags & _Flag.UPPER else _LOWER_DIGITS

    minus = False
    if flags & _Flag.SIGNED and val >> (_UINTMAX_BITS - 1):
        minus = True
        val = -val & _UINTMAX_MASK

    ndigits = 0
    remaining = val
    while remaining:
        remaining //= base
        ndigits += 1

    if flags & _Flag.HASH and base == 8 and prec < ndigits + 1:
        prec = ndigits + 1

    if ndigits < prec:
        ndigits = prec
    elif val == 0:
        ndigits = 1

    if flags & _Flag.TICK:
        tickskip = 4 if base == 16 else 3
    else:
        tickskip = ndigits
    ndigits += (ndigits - 1) // tickskip

    nchars = ndigits
    if minus or flags & (_Flag.PLUS | _Flag.SPACE):
        nchars += 1
    hex_prefix = bool(flags & _Flag.HASH) and base == 16
    if hex_prefix:
        nchars += 2

    parts: list[str] = []
    if not flags & (_Flag.MINUS | _Flag.ZERO) and width > nchars:
        parts.append(" " * (width - nchars))
        width = nchars

    if minus:
        parts.append("-")
    elif flags & _Flag.PLUS:
        parts.append("+")
    elif flags & _Flag.SPACE:
        parts.append(" ")

    if hex_prefix:
        parts.append("0X" if flags & _Flag.UPPER else "0x")

    if flags & (_Flag.MINUS | _Flag.ZERO) == _Flag.ZERO and width > ndigits:
        if width > nchars:
            parts.append("0" * (width - nchars))
            width = nchars

    body: list[str] = []
    before_tick = tickskip
    while ndigits > 0:
        if before_tick == 0:
            body.append("_")
            ndigits -= 1
            before_tick = tickskip - 1
        else:
            before_tick -= 1
        body.append(digits[val % base])
        val //= base
        ndigits -= 1
    parts.append("".join(reversed(body)))

    if flags & _Flag.MINUS and width > nchars:
        parts.append(" " * (width - nchars))

    return "".join(parts)


def _pad_string(text: str, flags: _Flag, width: int, prec: int) -> str:
    if prec != -1 and len(text) > prec:
        text = text[:prec]
    if width > len(text):
        if flags & _Flag.MINUS:
            return text + " " * (width - len(text))
        pad = "0" if flags & _Flag.ZERO else " "
        return pad * (width - len(text)) + text
    return text


def _char_arg(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c needs a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _string_arg(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if isinstance(arg, (bytes, bytearray)):
        arg = bytes(arg).decode("latin-1")
    if not isinstance(arg, str):
        raise TypeError(f"%s needs a string, got {type(arg).__name__}")
    return arg.split("\0", 1)[0]


class _Arguments:
    """Hands out the arguments of a format one by one."""

    def __init__(self, args: Iterable[Any]) -> None:
        self._pending = iter(args)

    def take(self) -> Any:
        try:
            return next(self._pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def take_int(self) -> int:
        return operator.index(self.take())


def _convert(
    ch: str,
    flags: _Flag,
    rank: int,
    width: int,
    prec: int,
    args: _Arguments,
    written: int,
) -> str:
    if ch in "pP":
        if ch == "P":
            flags |= _Flag.UPPER
        pointer = args.take()
        value = 0 if pointer is None else operator.index(pointer)
        return _format_int(
            value & ((1 << _POINTER_BITS) - 1),
            flags | _Flag.HASH,
            16,
            width,
            _POINTER_DIGITS,
        )

    if ch in "di":
        value = _wrap(args.take_int(), _RANK_BITS[rank], signed=True)
        return _format_int(
            value & _UINTMAX_MASK, flags | _Flag.SIGNED, 10, width, prec
        )

    base = _UNSIGNED_BASES.get(ch)
    if base is not None:
        if ch == "X":
            flags |= _Flag.UPPER
        value = _wrap(args.take_int(), _RANK_BITS[rank], signed=False)
        return _format_int(value, flags, base, width, prec)

    if ch == "c":
        return _pad_string(_char_arg(args.take()), flags, width, prec)

    if ch == "s":
        return _pad_string(_string_arg(args.take()), flags, width, prec)

    if ch == "n":
        sink: Callable[[int], Any] = args.take()
        sink(_wrap(written, _RANK_BITS[rank], signed=True))
        return ""

    return ch


def _render(fmt: str, args: Iterable[Any]) -> str:
    spec = fmt.split("\0", 1)[0]
    arguments = _Arguments(args)
    pieces: list[str] = []
    written = 0

    state = _State.NORMAL
    flags = _Flag(0)
    rank = _RANK_INT
    width = 0
    prec = -1

    index = 0
    while index < len(spec):
        ch = spec[index]
        index += 1

        if state is _State.NORMAL:
            if ch == "%":
                state = _State.FLAGS
                flags = _Flag(0)
                rank = _RANK_INT
                width = 0
                prec = -1
            else:
                pieces.append(ch)
                written += 1

        elif state is _State.FLAGS:
            flag = _FLAG_CHARS.get(ch)
            if flag is None:
                state = _State.WIDTH
                index -= 1
            else:
                flags |= flag

        elif state is _State.WIDTH:
            if _is_digit(ch):
                width = width * 10 + int(ch)
            elif ch == "*":
                width = arguments.take_int()
                if width < 0:
                    width = -width
                    flags |= _Flag.MINUS
            elif ch == ".":
                prec = 0
                state = _State.PREC
            else:
                state = _State.MODIFIERS
                index -= 1

        elif state is _State.PREC:
            if _is_digit(ch):
                prec = prec * 10 + int(ch)
            elif ch == "*":
                prec = arguments.take_int()
                if prec < 0:
                    prec = -1
            else:
                state = _State.MODIFIERS
                index -= 1

        elif ch == "h":
            rank -= 1
        elif ch == "l":
            rank += 1
        elif ch == "j":
            rank = _RANK_LONGLONG
        elif ch in "zt":
            rank = 1
        elif ch in "Lq":
            rank += 2
        else:
            state = _State.NORMAL
            rank = min(max(rank, _RANK_CHAR), _RANK_LONGLONG)
            text = _convert(ch, flags, rank, width, prec, arguments, written)
            pieces.append(text)
            written += len(text)

    return "".join(pieces)


def snprintf(n: int, fmt: str, *args: Any) -> tuple[str, int]:
    """Format into a buffer of ``n`` characters, terminator included.

    Returns the text that fits (at most ``n - 1`` characters) and the length
    the whole output would have had.
    """
    if n < 0:
        raise ValueError("buffer size must not be negative")
    full = _render(fmt, args)
    if len(full) < n:
        return full, len(full)
    return full[:max(n - 1, 0)], len(full)


def sprintf(fmt: str, *args: Any) -> str:
    """Return the whole formatted text."""
    return _render(fmt, args)