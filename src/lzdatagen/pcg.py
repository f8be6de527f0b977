"""
PCG32 uniform random source.

The generator only needs a stream of uniform 32-bit integers. It takes any
object with a `next_u32()` method, so tests can substitute a scripted source.


WHY PCG32?
----------
PCG32 is small, fast, and statistically sound for simulation work. It also
supports independent "streams": two generators with the same seed but
different stream selectors produce unrelated sequences.

Matching the pcg-basic seeding procedure means a given (seed, stream) pair
yields the same integer sequence as the C reference generator.


THE ALGORITHM (PCG-XSH-RR 64/32)
--------------------------------
State is a 64-bit LCG. Each step:

  1. Advance:  state = state * MULTIPLIER + inc   (mod 2^64)
  2. Output from the OLD state:
       xorshifted = ((old >> 18) ^ old) >> 27     (low 32 bits)
       rot        = old >> 59
       result     = rotate_right(xorshifted, rot)

The increment must be odd, so the stream selector is shifted left and has
its low bit forced on.

Reference: https://www.pcg-random.org/
"""

from __future__ import annotations

from typing import Final, Protocol

MULTIPLIER: Final = 6364136223846793005
"""LCG multiplier from the PCG reference implementation."""

MASK64: Final = (1 << 64) - 1
MASK32: Final = (1 << 32) - 1

TWO_POW_32: Final = float(1 << 32)
"""Divisor mapping a 32-bit integer onto [0, 1)."""


class RandomSource(Protocol):
    """
    Anything that yields independent uniform 32-bit integers.

    Seeding is left to the concrete generator (see `Pcg32.seed`). The
    generation functions only draw, so a source needs nothing else.
    """

    def next_u32(self) -> int:
        """Return the next uniform integer in [0, 2^32)."""
        ...


def rand_double(rng: RandomSource) -> float:
    """
    Draw a uniform double in [0, 1) from a 32-bit source.

    Only 32 bits of randomness are used, so the result lies on a grid of
    2^32 points. That is plenty for shaping byte and length distributions.
    """
    return rng.next_u32() / TWO_POW_32


class Pcg32:
    """PCG-XSH-RR generator with 64-bit state and selectable stream."""

    __slots__ = ("_state", "_inc")

    def __init__(self, seed: int, stream: int = 0) -> None:
        self._state = 0
        self._inc = 1
        self.seed(seed, stream)

    def seed(self, seed: int, stream: int = 0) -> None:
        """
        Reset the generator to the start of the (seed, stream) sequence.

        Both values are reduced modulo 2^64, so negative or oversized Python
        integers are accepted.
        """
        self._state = 0
        self._inc = ((stream << 1) | 1) & MASK64
        self.next_u32()
        self._state = (self._state + seed) & MASK64
        self.next_u32()

    def next_u32(self) -> int:
        """Advance the state and return the next 32-bit output."""
        old = self._state
        self._state = (old * MULTIPLIER + self._inc) & MASK64

        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << (-rot & 31))) & MASK32

    def next_double(self) -> float:
        """Return a uniform double in [0, 1)."""
        return self.next_u32() / TWO_POW_32

    def __repr__(self) -> str:
        return f"Pcg32(state=0x{self._state:016x}, inc=0x{self._inc:016x})"
