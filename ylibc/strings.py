"""Byte-string and memory routines over ``bytes``.

C strings end at the first NUL byte or at the end of the data. Positions are
returned as indexes, with ``None`` where nothing is found. Text arguments are
taken as ISO 8859-1.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import Union

from .ctype import isspace

Data = Union[bytes, bytearray, memoryview, str]

_UINTMAX_MASK = (1 << 64) - 1
_INT_BITS = 32
_LONG_BITS = 32  # long is 32 bits on the target


def _bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


def _cstr(data: Data) -> bytes:
    raw = _bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _byte(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    return c & 0xFF


def _prefix(data: Data, n: int) -> bytes:
    raw = _bytes(data)
    if not 0 <= n <= len(raw):
        raise ValueError(f"length {n} outside buffer of {len(raw)} bytes")
    return raw[:n]


def _found(index: int) -> int | None:
    return None if index < 0 else index


def _signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def memccpy(src: Data, c: int | str, n: int) -> tuple[bytes, bool]:
    """Copy at most ``n`` bytes, stopping after the first ``c``.

    Returns the copied bytes and whether ``c`` was met.
    """
    data = _prefix(src, n)
    end = data.find(_byte(c))
    if end < 0:
        return data, False
    return data[:end + 1], True


def memchr(s: Data, c: int | str, n: int) -> int | None:
    """Index of the first ``c`` in the first ``n`` bytes."""
    return _found(_prefix(s, n).find(_byte(c)))


def memrchr(s: Data, c: int | str, n: int) -> int | None:
    """Index of the last ``c`` in the first ``n`` bytes."""
    return _found(_prefix(s, n).rfind(_byte(c)))


def memcmp(s1: Data, s2: Data, n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0."""
    pairs = zip(_prefix(s1, n), _prefix(s2, n))
    return next((a - b for a, b in pairs if a != b), 0)


def memmem(haystack: Data, needle: Data) -> int | None:
    """Index of the first occurrence of ``needle``; ``None`` if either is empty."""
    hay = _bytes(haystack)
    pattern = _bytes(needle)
    if not pattern or not hay or len(pattern) > len(hay):
        return None
    return _found(hay.find(pattern))


def memswap(m1: Data, m2: Data, n: int) -> tuple[bytes, bytes]:
    """Return both buffers with their first ``n`` bytes exchanged."""
    a = _bytes(m1)
    b = _bytes(m2)
    head_a = _prefix(a, n)
    head_b = _prefix(b, n)
    return head_b + a[n:], head_a + b[n:]


def strlen(s: Data) -> int:
    return len(_cstr(s))


def strnlen(s: Data, maxlen: int) -> int:
    if maxlen < 0:
        raise ValueError("maxlen must not be negative")
    return min(strlen(s), maxlen)


def _compare(a: bytes, b: bytes) -> int:
    for x, y in zip(a + b"\0", b + b"\0"):
        if x != y or not x:
            return x - y
    return 0


def strcmp(s1: Data, s2: Data) -> int:
    """Difference of the first unequal bytes of two C strings, or 0."""
    return _compare(_cstr(s1), _cstr(s2))


def strncmp(s1: Data, s2: Data, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` bytes."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(_cstr(s1)[:n], _cstr(s2)[:n])


def strncpy(src: Data, length: int) -> bytes:
    """Exactly ``length`` bytes: the string, truncated or padded with NULs."""
    if length < 0:
        raise ValueError("length must not be negative")
    return (_cstr(src) + bytes(length))[:length]


def strchr(s: Data, c: int | str) -> int | None:
    """Index of the first ``c``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _byte(c)
    if ch == 0:
        return len(text)
    return _found(text.find(ch))


def _span(s: Data, chars: Data, inside: bool) -> int:
    members = frozenset(_cstr(chars))
    run = itertools.takewhile(lambda ch: (ch in members) == inside, _cstr(s))
    return sum(1 for _ in run)


def strspn(s: Data, accept: Data) -> int:
    """Length of the leading run of bytes found in ``accept``."""
    return _span(s, accept, True)


def strcspn(s: Data, reject: Data) -> int:
    """Length of the leading run of bytes not found in ``reject``."""
    return _span(s, reject, False)


def strpbrk(s: Data, accept: Data) -> int | None:
    """Index of the first byte that is in ``accept``."""
    index = strcspn(s, accept)
    return index if index < strlen(s) else None


def strsep(s: Data | None, delim: Data) -> tuple[bytes | None, bytes | None]:
    """Split off the text before the first delimiter.

    Returns the token and the rest after the delimiter; the rest is ``None``
    when no delimiter was found, and both are ``None`` for a ``None`` input.
    """
    if s is None:
        return None, None
    text = _cstr(s)
    index = strpbrk(text, delim)
    if index is None:
        return text, None
    return text[:index], text[index + 1:]


def strtok(s: Data, delim: Data) -> Iterator[bytes]:
    """Yield the non-empty tokens of ``s`` separated by bytes of ``delim``."""
    rest: Data | None = s
    while rest is not None:
        token, rest = strsep(rest, delim)
        if token:
            yield token


def _digit_value(ch: int) -> int:
    if 0x30 <= ch <= 0x39:
        return ch - 0x30
    if 0x41 <= ch <= 0x5A:
        return ch - 0x41 + 10
    if 0x61 <= ch <= 0x7A:
        return ch - 0x61 + 10
    return -1


def strntoumax(s: Data, base: int, n: int | None = None) -> tuple[int, int]:
    """Parse an unsigned 64-bit number from at most ``n`` bytes of ``s``.

    Leading space and one sign are skipped; base 0 picks 16 for a ``0x``
    prefix, 8 for a leading zero and 10 otherwise. A minus sign negates
    modulo 2**64. Returns the value and the index where parsing stopped.
    """
    data = _cstr(s)
    if n is not None and n < 0:
        raise ValueError("n must not be negative")
    limit = len(data) if n is None else min(n, len(data))
    pos = 0
    while pos < limit and isspace(data[pos]):
        pos += 1

    minus = False
    if pos < limit and data[pos] in b"+-":
        minus = data[pos] == ord("-")
        pos += 1

    def hex_prefix() -> bool:
        return limit - pos >= 2 and data[pos] == ord("0") and data[pos + 1] in b"xX"

    if base == 0:
        if hex_prefix():
            pos += 2
            base = 16
        elif pos < limit and data[pos] == ord("0"):
            pos += 1
            base = 8
        else:
            base = 10
    elif base == 16 and hex_prefix():
        pos += 2

    value = 0
    while pos < limit:
        digit = _digit_value(data[pos])
        if not 0 <= digit < base:
            break
        value = (value * base + digit) & _UINTMAX_MASK
        pos += 1

    if minus:
        value = -value & _UINTMAX_MASK
    return value, pos


def atoi(s: Data) -> int:
    """Decimal value of ``s`` as a wrapped signed 32-bit int."""
    value, _ = strntoumax(s, 10)
    return _signed(value, _INT_BITS)


def atol(s: Data) -> int:
    """Decimal value of ``s`` as a wrapped signed long."""
    value, _ = strntoumax(s, 10)
    return _signed(value, _LONG_BITS)