"""Formatted input with the conversions of the ``scanf`` family.

Integers are stored with the widths of a 32-bit target; signed conversions
(``%d``, ``%i``, ``%n``) give signed values, the others unsigned ones. Some
quirks of the conversions are kept as they are: ``%s`` does not skip leading
space, ``%*c`` consumes nothing, a ``-`` in a ``%[`` set adds the range from
``-`` itself, and the text after a ``%[`` set is read as further set members.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .ctype import isspace
from .strings import strntoumax

Data = Union[bytes, bytearray, memoryview, str]

_UNLIMITED = 0xFFFFFFFF

_RANK_CHAR = -2
_RANK_INT = 0
_RANK_LONGLONG = 2
_RANK_PTR = 99
_RANK_BITS = {-2: 8, -1: 16, 0: 32, 1: 32, 2: 64, _RANK_PTR: 32}

_PERCENT = ord("%")
_STAR = ord("*")
_CARET = ord("^")
_OPEN = ord("[")
_CLOSE = ord("]")
_DASH = ord("-")

# conversion -> (base, signed)
_INT_CONVERSIONS = {
    ord("p"): (0, False),
    ord("P"): (0, False),
    ord("i"): (0, True),
    ord("d"): (10, True),
    ord("o"): (8, False),
    ord("u"): (10, False),
    ord("x"): (16, False),
    ord("X"): (16, False),
}


class _Flag(enum.IntFlag):
    SPLAT = 0x01
    WIDTH = 0x04


class _State(enum.Enum):
    NORMAL = enum.auto()
    FLAGS = enum.auto()
    WIDTH = enum.auto()
    MODIFIERS = enum.auto()
    MATCH_INIT = enum.auto()
    MATCH = enum.auto()
    MATCH_RANGE = enum.auto()


class _Bail(enum.Enum):
    NONE = enum.auto()
    EOF = enum.auto()
    ERR = enum.auto()


@dataclass(frozen=True)
class ScanResult:
    """What :func:`sscanf` read.

    ``count`` is the number of successful conversions, or -1 when the input
    ran out before any; ``values`` holds every stored value in order, ``%n``
    results included; ``consumed`` is how many input characters were used.
    """

    count: int
    values: tuple[int | str, ...]
    consumed: int

    @property
    def eof(self) -> bool:
        return self.count == -1


def _cstring(data: Data) -> bytes:
    raw = data.encode("latin-1") if isinstance(data, str) else bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _is_digit(ch: int) -> bool:
    return 0x30 <= ch <= 0x39


def _store(value: int, rank: int, signed: bool) -> int:
    bits = _RANK_BITS[rank]
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


class _Scanner:
    """Input position and results of one scan."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0
        self.values: list[int | str] = []
        self.converted = 0
        self.bail = _Bail.NONE

    def peek(self) -> int:
        return self.data[self.pos] if self.pos < len(self.data) else 0

    def skip_space(self) -> None:
        while self.pos < len(self.data) and isspace(self.data[self.pos]):
            self.pos += 1

    def _text(self, start: int, end: int) -> str:
        return self.data[start:end].decode("latin-1")

    def convert(self, ch: int, flags: _Flag, rank: int, width: int) -> None:
        splat = bool(flags & _Flag.SPLAT)
        if ch in _INT_CONVERSIONS:
            base, signed = _INT_CONVERSIONS[ch]
            if ch in b"pP":
                rank = _RANK_PTR
            self.scan_int(base, signed, rank, width, splat)
        elif ch == ord("n"):
            if not splat:
                self.values.append(_store(self.pos, rank, signed=True))
        elif ch == ord("c"):
            self.scan_chars(width if flags & _Flag.WIDTH else 1, splat)
        elif ch == ord("s"):
            self.scan_word(width, splat)
        elif ch == _PERCENT:
            if self.peek() == _PERCENT:
                self.pos += 1
            else:
                self.bail = _Bail.ERR
        else:
            self.bail = _Bail.ERR

    def scan_int(
        self, base: int, signed: bool, rank: int, width: int, splat: bool
    ) -> None:
        self.skip_space()
        if not self.peek():
            self.bail = _Bail.EOF
            return
        value, used = strntoumax(self.data[self.pos:], base, width)
        if used == 0:
            self.bail = _Bail.ERR
            return
        self.pos += used
        if not splat:
            self.converted += 1
            self.values.append(_store(value, rank, signed))

    def scan_chars(self, width: int, splat: bool) -> None:
        available = len(self.data) - self.pos
        if splat:
            if width and not available:
                self.bail = _Bail.EOF
            return
        if available < width:
            self.pos = len(self.data)
            self.bail = _Bail.EOF
            return
        start = self.pos
        self.pos += width
        self.converted += 1
        self.values.append(self._text(start, self.pos))

    def scan_word(self, width: int, splat: bool) -> None:
        start = self.pos
        end = start
        while end - start < width and end < len(self.data) and not isspace(
            self.data[end]
        ):
            end += 1
        self.pos = end
        if not splat and end > start:
            self.converted += 1
            self.values.append(self._text(start, end))
        if end - start < width and end >= len(self.data):
            self.bail = _Bail.EOF

    def match(self, members: set[int], inverted: bool, width: int, collect: bool) -> None:
        start = self.pos
        hit_end = False
        if width:
            while True:
                ch = self.peek()
                if not ch:
                    hit_end = True
                    break
                if (ch in members) == inverted:
                    break
                self.pos += 1
        if self.pos != start and collect:
            self.converted += 1
            self.values.append(self._text(start, self.pos))
        else:
            self.bail = _Bail.ERR
        if hit_end:
            self.bail = _Bail.EOF


def sscanf(text: Data, fmt: Data) -> ScanResult:
    """Read values out of ``text`` as directed by ``fmt``."""
    scanner = _Scanner(_cstring(text))
    spec = _cstring(fmt)

    state = _State.NORMAL
    flags = _Flag(0)
    rank = _RANK_INT
    width = _UNLIMITED
    members: set[int] = set()
    inverted = False
    collect = False
    range_start = 0

    index = 0
    while index < len(spec) and scanner.bail is _Bail.NONE:
        ch = spec[index]
        index += 1

        if state is _State.NORMAL:
            if ch == _PERCENT:
                state = _State.FLAGS
                flags = _Flag(0)
                rank = _RANK_INT
                width = _UNLIMITED
            elif isspace(ch):
                scanner.skip_space()
            elif scanner.peek() == ch:
                scanner.pos += 1
            else:
                scanner.bail = _Bail.ERR

        elif state is _State.FLAGS:
            if ch == _STAR:
                flags |= _Flag.SPLAT
            elif _is_digit(ch):
                width = ch - 0x30
                state = _State.WIDTH
                flags |= _Flag.WIDTH
            else:
                state = _State.MODIFIERS
                index -= 1

        elif state is _State.WIDTH:
            if _is_digit(ch):
                width = (width * 10 + ch - 0x30) & _UNLIMITED
            else:
                state = _State.MODIFIERS
                index -= 1

        elif state is _State.MODIFIERS:
            if ch == ord("h"):
                rank -= 1
            elif ch == ord("l"):
                rank += 1
            elif ch in b"jLq":
                rank = _RANK_LONGLONG
            elif ch in b"zt":
                rank = 1
            else:
                state = _State.NORMAL
                rank = min(max(rank, _RANK_CHAR), _RANK_LONGLONG)
                if ch == _OPEN:
                    collect = not flags & _Flag.SPLAT
                    members = set()
                    inverted = False
                    state = _State.MATCH_INIT
                else:
                    scanner.convert(ch, flags, rank, width)

        elif state is _State.MATCH_INIT:
            if ch == _CARET:
                inverted = True
            else:
                members.add(ch)
                state = _State.MATCH

        elif state is _State.MATCH:
            if ch == _CLOSE:
                scanner.match(members, inverted, width, collect)
            elif ch == _DASH:
                range_start = ch
                state = _State.MATCH_RANGE
            else:
                members.add(ch)

        elif ch == _CLOSE:
            members.add(_DASH)
            scanner.match(members, inverted, width, collect)
        else:
            members.update(range(range_start, ch))
            state = _State.MATCH

    count = scanner.converted
    if scanner.bail is _Bail.EOF and not count:
        count = -1
    return ScanResult(count, tuple(scanner.values), scanner.pos)