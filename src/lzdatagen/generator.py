"""
Compressible data generation.

This module assembles the output stream from literal runs and match runs.


WHAT THE STREAM LOOKS LIKE
--------------------------
An LZ77-style compressor turns repeated byte sequences into backreferences
("go back X bytes, copy Y bytes") and leaves the rest as literals. To give it
a controllable amount of work, we build the stream the other way round:

  - LITERAL RUN: fresh bytes drawn from the literal distribution.
  - MATCH RUN:   a verbatim copy of the match buffer, a single short block of
                 literals generated earlier.

Example (ratio high, so most runs are matches)::

    [lit: 9f 02 00 ..][match: 01 00 07 ..][lit: 03][match: 01 00 07 ..]

The one-byte literal between the two matches is a "breaker". Two matches
back to back would just look like one longer match to a compressor, which
would distort the length distribution.


CHOOSING RUN LENGTHS
--------------------
Lengths come from a frequency table of LEN_PER_CHUNK draws (see lengths.py).
A cursor walks the table from the longest length downward, consuming one
unit at a time. When the table is empty, both the table and the match buffer
are drawn afresh and the cursor restarts at the top.

The table starts out empty, so the first run always triggers a refill.


CHOOSING RUN KINDS
------------------
Each run is a literal run with probability 1/ratio, a match run otherwise.
So roughly 1/ratio of the output is fresh content:

  - ratio = 1:  everything is literals (incompressible).
  - ratio -> inf: almost everything is matches (highly compressible).

The ratio only biases this choice. It does not guarantee any measured ratio
for a particular compressor.


BULK MODE
---------
Large outputs are generated in BLOCK_SIZE blocks. Each block gets its own
sample pool, and literals within the block are picked from that pool. Working
memory stays constant and the literal population is re-randomized per block.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import NamedTuple

from .config import GenerationParameters
from .constants import BLOCK_SIZE, LEN_PER_CHUNK, MAX_LEN, NUM_LEN
from .lengths import generate_lengths, length_for_index
from .literals import generate_literals, generate_sample_pool
from .pcg import RandomSource, rand_double

logger = logging.getLogger(__name__)

Buffer = bytearray | memoryview
"""Writable byte buffers the generator can fill in place."""


class RunKind(Enum):
    """Kind of a run in the generated stream."""

    LITERAL = auto()
    """Freshly drawn bytes."""

    MATCH = auto()
    """Bytes copied from the match buffer."""


class Run(NamedTuple):
    """One contiguous run of the generated stream."""

    kind: RunKind
    data: bytes


class _ScanState(Enum):
    SCANNING = auto()
    EXHAUSTED = auto()


@dataclass
class _MatchSource:
    """
    Frequency table, cursor and match buffer for one generation call.

    Never shared between calls, so concurrent generations with separate
    random sources do not interfere.
    """

    rng: RandomSource
    len_exp: float
    lit_exp: float
    samples: Sequence[int] | None

    freq: list[int] = field(default_factory=lambda: [0] * NUM_LEN)
    """Remaining count per length index."""

    cursor: int = 0
    """Table index being consumed. Moves from NUM_LEN - 1 down to 0."""

    buffer: bytes = b""
    """Source of every match run until the next refill."""

    def next_length(self) -> int:
        """Consume and return the next length from the table."""
        state = _ScanState.SCANNING
        while True:
            if state is _ScanState.EXHAUSTED:
                # Match buffer first, then lengths. The draw order fixes the output.
                self.buffer = generate_literals(self.rng, MAX_LEN, self.lit_exp, self.samples)
                self.freq = generate_lengths(self.rng, LEN_PER_CHUNK, self.len_exp)
                self.cursor = NUM_LEN - 1
                state = _ScanState.SCANNING

            if self.freq[self.cursor] > 0:
                self.freq[self.cursor] -= 1
                return length_for_index(self.cursor)

            if self.cursor == 0:
                state = _ScanState.EXHAUSTED
            else:
                self.cursor -= 1


def iter_runs(
    rng: RandomSource,
    size: int,
    params: GenerationParameters,
    samples: Sequence[int] | None = None,
) -> Iterator[Run]:
    """
    Generate the run structure of a `size`-byte stream.

    Every run is non-empty and the run lengths add up to exactly `size`.
    Breakers between consecutive matches are yielded as one-byte literal runs.

    Args:
        rng: Uniform random source. Advanced by every draw.
        size: Total number of bytes to produce.
        params: Ratio and distribution exponents.
        samples: Sample pool to pick literals from, or None for distribution mode.

    Yields:
        Runs in stream order.
    """
    source = _MatchSource(rng, params.len_exp, params.lit_exp, samples)
    lit_exp = params.lit_exp

    # A zero ratio would divide by zero. Treat it as the limit: always literals.
    literal_probability = 1.0 / params.ratio if params.ratio else math.inf

    pos = 0
    last_was_match = False

    while pos < size:
        length = min(source.next_length(), size - pos)

        if rand_double(rng) < literal_probability:
            yield Run(RunKind.LITERAL, generate_literals(rng, length, lit_exp, samples))
            last_was_match = False
        else:
            if last_was_match:
                yield Run(RunKind.LITERAL, generate_literals(rng, 1, lit_exp, samples))
                pos += 1
                length = min(length, size - pos)

            # Every match copies from the start of the buffer. A breaker that
            # used up the last byte leaves nothing to copy.
            if length:
                yield Run(RunKind.MATCH, source.buffer[:length])
            last_was_match = True

        pos += length


def _assemble(
    rng: RandomSource,
    out: Buffer,
    size: int,
    params: GenerationParameters,
    samples: Sequence[int] | None,
) -> None:
    pos = 0
    for run in iter_runs(rng, size, params, samples):
        end = pos + len(run.data)
        out[pos:end] = run.data
        pos = end


def _check_buffer(out: Buffer, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if len(out) < size:
        raise ValueError(f"buffer too small: {len(out)} bytes for {size} requested")


def generate(
    rng: RandomSource,
    out: Buffer,
    size: int,
    ratio: float = 3.0,
    len_exp: float = 3.0,
    lit_exp: float = 3.0,
) -> None:
    """
    Fill `out[0:size]` with compressible data.

    Every literal is drawn straight from the distribution. Suited to modest
    sizes; see `generate_bulk` for large outputs.

    Args:
        rng: Uniform random source.
        out: Writable buffer with room for at least `size` bytes.
        size: Number of bytes to write.
        ratio: Compression ratio target. Values below 1.0 are accepted.
        len_exp: Match length distribution exponent.
        lit_exp: Literal distribution exponent.

    Raises:
        ValueError: If `size` is negative or `out` is too small.
    """
    _check_buffer(out, size)
    params = GenerationParameters(ratio=ratio, len_exp=len_exp, lit_exp=lit_exp)
    _assemble(rng, memoryview(out), size, params, None)


def generate_bulk(
    rng: RandomSource,
    out: Buffer,
    size: int,
    ratio: float = 3.0,
    len_exp: float = 3.0,
    lit_exp: float = 3.0,
) -> None:
    """
    Fill `out[0:size]` with compressible data, one block at a time.

    Same contract as `generate`. Each BLOCK_SIZE block draws its own sample
    pool and picks literals from it.
    """
    _check_buffer(out, size)
    params = GenerationParameters(ratio=ratio, len_exp=len_exp, lit_exp=lit_exp)
    view = memoryview(out)

    offs = 0
    while offs < size:
        num = min(size - offs, BLOCK_SIZE)
        samples = generate_sample_pool(rng, params.lit_exp)
        logger.debug("Generating block at offset %d (%d bytes)", offs, num)
        _assemble(rng, view[offs : offs + num], num, params, samples)
        offs += num


def generate_data(
    rng: RandomSource,
    size: int,
    params: GenerationParameters | None = None,
    bulk: bool = True,
) -> bytes:
    """
    Generate `size` bytes and return them.

    Args:
        rng: Uniform random source.
        size: Number of bytes to produce.
        params: Generation parameters. Defaults apply when omitted.
        bulk: Use the block-wise path (the default) or the direct path.
    """
    params = params or GenerationParameters()
    out = bytearray(size)
    fill = generate_bulk if bulk else generate
    fill(rng, out, size, params.ratio, params.len_exp, params.lit_exp)
    return bytes(out)


def iter_blocks(
    rng: RandomSource,
    size: int,
    params: GenerationParameters | None = None,
    block_size: int = BLOCK_SIZE,
) -> Iterator[bytes]:
    """
    Generate `size` bytes as a sequence of blocks.

    Each block is produced with `generate_bulk`. With the default block size
    the concatenated blocks equal a single `generate_bulk` call over `size`.

    Yields:
        Blocks of `block_size` bytes, the last one possibly shorter.
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")

    params = params or GenerationParameters()
    buffer = bytearray(block_size)

    offs = 0
    while offs < size:
        num = min(size - offs, block_size)
        generate_bulk(rng, buffer, num, params.ratio, params.len_exp, params.lit_exp)
        yield bytes(buffer[:num])
        offs += num
