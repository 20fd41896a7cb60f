"""The 48-bit linear congruential generator of the ``rand48`` family."""

from __future__ import annotations

from collections.abc import Sequence

_MULTIPLIER = 0x5DEECE66D
_INCREMENT = 0xB
_MASK64 = (1 << 64) - 1
_SEED_LOW = 0x330E

State = tuple[int, int, int]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def jrand48(xsubi: Sequence[int]) -> tuple[int, State]:
    """Advance the state ``xsubi`` (three 16-bit words, low word first).

    Returns the signed 32-bit result and the new state; ``xsubi`` is not changed.
    """
    words = tuple(xsubi)
    if len(words) != 3:
        raise ValueError("the state must have exactly three words")
    x = sum((word & 0xFFFF) << (16 * shift) for shift, word in enumerate(words))
    x = (_MULTIPLIER * x + _INCREMENT) & _MASK64
    state = (x & 0xFFFF, (x >> 16) & 0xFFFF, (x >> 32) & 0xFFFF)
    return _to_int32(x >> 16), state


class Rand48:
    """A generator with its own state; an unseeded one starts from all zeros."""

    __slots__ = ("state",)

    def __init__(self, seed: int | None = None) -> None:
        self.state: State = (0, 0, 0)
        if seed is not None:
            self.srand48(seed)

    def srand48(self, seedval: int) -> None:
        """Seed from the low 32 bits of ``seedval``."""
        self.state = (_SEED_LOW, seedval & 0xFFFF, (seedval & 0xFFFFFFFF) >> 16)

    def srand(self, seed: int) -> None:
        """Seed from an unsigned 32-bit value."""
        self.srand48(seed & 0xFFFFFFFF)

    def mrand48(self) -> int:
        """Return the next signed 32-bit value."""
        value, self.state = jrand48(self.state)
        return value

    def rand(self) -> int:
        """Return the magnitude of the next value, wrapping like 32-bit negation."""
        value = self.mrand48()
        return _to_int32(-value) if value < 0 else value