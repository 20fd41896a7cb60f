"""Character classification for ISO 8859-1 with ``-1`` standing for EOF."""

from __future__ import annotations

import enum

EOF = -1


class CharClass(enum.IntFlag):
    """Classes a character can belong to."""

    CNTRL = 0x01
    SPACE = 0x02
    PRINT = 0x04
    PUNCT = 0x08
    DIGIT = 0x10
    XDIGIT = 0x20
    UPPER = 0x40
    LOWER = 0x80


def _build_table() -> tuple[CharClass, ...]:
    cc = CharClass
    table = [cc(0)] * 256

    def mark(lo: int, hi: int, flags: CharClass) -> None:
        table[lo:hi + 1] = [flags] * (hi - lo + 1)

    mark(0, 31, cc.CNTRL)
    mark(8, 13, cc.CNTRL | cc.SPACE)
    mark(32, 32, cc.PRINT | cc.SPACE)
    mark(33, 126, cc.PRINT | cc.PUNCT)
    mark(48, 57, cc.PRINT | cc.DIGIT | cc.XDIGIT)
    mark(65, 70, cc.PRINT | cc.UPPER | cc.XDIGIT)
    mark(71, 90, cc.PRINT | cc.UPPER)
    mark(97, 102, cc.PRINT | cc.LOWER | cc.XDIGIT)
    mark(103, 122, cc.PRINT | cc.LOWER)
    mark(127, 159, cc.CNTRL)
    mark(160, 160, cc.PRINT | cc.SPACE)
    mark(161, 191, cc.PRINT | cc.PUNCT)
    mark(192, 222, cc.PRINT | cc.UPPER)
    mark(223, 255, cc.PRINT | cc.LOWER)
    table[215] = cc.PRINT | cc.PUNCT
    table[247] = cc.PRINT | cc.PUNCT
    return tuple(table)


_TABLE = _build_table()


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if not EOF <= c <= 255:
        raise ValueError(f"character code out of range: {c}")
    return c


def char_class(c: int | str) -> CharClass:
    """Return the classes of ``c`` (an ISO 8859-1 code, a character, or EOF)."""
    code = _code(c)
    return CharClass(0) if code == EOF else _TABLE[code]


def _has(c: int | str, flags: CharClass) -> bool:
    return bool(char_class(c) & flags)


def isalnum(c: int | str) -> bool:
    return _has(c, CharClass.UPPER | CharClass.LOWER | CharClass.DIGIT)


def isalpha(c: int | str) -> bool:
    return _has(c, CharClass.UPPER | CharClass.LOWER)


def isascii(c: int | str) -> bool:
    return not (_code(c) & ~0x7F)


def isblank(c: int | str) -> bool:
    return _code(c) in (0x09, 0x20)


def iscntrl(c: int | str) -> bool:
    return _has(c, CharClass.CNTRL)


def isdigit(c: int | str) -> bool:
    return _has(c, CharClass.DIGIT)


def isgraph(c: int | str) -> bool:
    return _has(
        c, CharClass.UPPER | CharClass.LOWER | CharClass.DIGIT | CharClass.PUNCT
    )


def islower(c: int | str) -> bool:
    return _has(c, CharClass.LOWER)


def isprint(c: int | str) -> bool:
    return _has(c, CharClass.PRINT)


def ispunct(c: int | str) -> bool:
    return _has(c, CharClass.PUNCT)


def isspace(c: int | str) -> bool:
    return _has(c, CharClass.SPACE)


def isupper(c: int | str) -> bool:
    return _has(c, CharClass.UPPER)


def isxdigit(c: int | str) -> bool:
    return _has(c, CharClass.XDIGIT)


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def tolower(c: int | str) -> int | str:
    """Lower-case ``c``; returns a character for a character, a code for a code."""
    code = _code(c)
    return _same_kind(c, code | 0x20 if isupper(code) else code)


def toupper(c: int | str) -> int | str:
    """Upper-case ``c``; returns a character for a character, a code for a code."""
    code = _code(c)
    return _same_kind(c, code & ~0x20 if islower(code) else code)