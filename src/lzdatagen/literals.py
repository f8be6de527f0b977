"""
Literal byte sampling.

Literals are the "fresh" bytes of the generated stream: the content a
compressor cannot find anywhere earlier and must emit verbatim.


POWER DISTRIBUTION
------------------
Each literal is drawn as::

    byte = floor(256 * u ** lit_exp)      u uniform in [0, 1)

With `lit_exp = 1.0` every byte value is equally likely. As the exponent
grows, probability mass piles up near 0, which makes the literals look more
like text and gives an entropy coder something to work with.


SAMPLE POOLS
------------
Bulk generation draws a pool of SAMPLE_SIZE bytes from the distribution once
per block, then picks literals uniformly from that pool. Picking from the
pool costs a single integer draw and no power function, and the pool still
follows the configured distribution.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import SAMPLE_SIZE
from .pcg import RandomSource, rand_double


def literals_from_distribution(rng: RandomSource, size: int, lit_exp: float) -> bytes:
    """
    Draw `size` literals from the power distribution.

    Args:
        rng: Uniform random source.
        size: Number of bytes to draw. Zero consumes no draws.
        lit_exp: Distribution exponent. Not validated.

    Returns:
        The drawn bytes.
    """
    # A zero exponent maps every draw onto 256, one past the top byte value.
    return bytes(min(int(256 * rand_double(rng) ** lit_exp), 255) for _ in range(size))


def literals_from_samples(rng: RandomSource, size: int, samples: Sequence[int]) -> bytes:
    """
    Pick `size` literals uniformly from a sample pool.

    Args:
        rng: Uniform random source.
        size: Number of bytes to pick.
        samples: Populated, non-empty pool of byte values.

    Returns:
        The picked bytes.
    """
    pool_size = len(samples)
    return bytes(samples[rng.next_u32() % pool_size] for _ in range(size))


def generate_literals(
    rng: RandomSource,
    size: int,
    lit_exp: float,
    samples: Sequence[int] | None = None,
) -> bytes:
    """Draw literals from `samples` when given, otherwise from the distribution."""
    if samples is not None:
        return literals_from_samples(rng, size, samples)
    return literals_from_distribution(rng, size, lit_exp)


def generate_sample_pool(rng: RandomSource, lit_exp: float, size: int = SAMPLE_SIZE) -> bytes:
    """Draw a fresh sample pool from the literal distribution."""
    return literals_from_distribution(rng, size, lit_exp)
