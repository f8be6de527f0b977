"""
Match length sampling.

Lengths are not drawn one at a time. Instead a whole batch is drawn into a
frequency table, and the assembler consumes the table from the longest length
down. Index `i` of the table stands for length `MIN_LEN + i`.

The index is drawn with the same power shape as literals::

    index = floor(NUM_LEN * u ** len_exp)

so a larger exponent favors short matches.
"""

from __future__ import annotations

from .constants import MIN_LEN, NUM_LEN
from .pcg import RandomSource, rand_double


def generate_lengths(rng: RandomSource, num: int, len_exp: float) -> list[int]:
    """
    Draw `num` lengths into a fresh frequency table.

    Args:
        rng: Uniform random source.
        num: Number of lengths to draw. The table sums to this.
        len_exp: Distribution exponent. Not validated.

    Returns:
        A list of NUM_LEN counts.
    """
    freq = [0] * NUM_LEN
    top = NUM_LEN - 1
    for _ in range(num):
        freq[min(int(NUM_LEN * rand_double(rng) ** len_exp), top)] += 1
    return freq


def length_for_index(index: int) -> int:
    """Map a frequency table index to the match length it stands for."""
    return MIN_LEN + index
