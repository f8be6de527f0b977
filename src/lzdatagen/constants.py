"""
Constants for the LZ data generator.

The length limits follow zlib (deflate), so generated streams exercise the
same range of match lengths a deflate-style encoder can represent.
"""

from __future__ import annotations

from typing import Final

# ===========================================================================
# Match Lengths
# ===========================================================================

MIN_LEN: Final = 3
"""Shortest match length that can be emitted."""

MAX_LEN: Final = 258
"""Longest match length, and the size of the match buffer."""

NUM_LEN: Final = MAX_LEN - MIN_LEN + 1
"""Number of distinct length values (256). Size of the frequency table."""

LEN_PER_CHUNK: Final = 512
"""Number of lengths drawn every time the frequency table is refilled."""

# ===========================================================================
# Literal Sampling
# ===========================================================================

SAMPLE_SIZE: Final = 16384
"""Number of bytes in a sample pool. Must be a power of two."""

# ===========================================================================
# Bulk Generation
# ===========================================================================

BLOCK_SIZE: Final = 1024 * 1024
"""Bytes generated per block in bulk mode. One sample pool per block."""

# ===========================================================================
# Random Source
# ===========================================================================

DEFAULT_STREAM: Final = 0xC0FFEE
"""Stream selector the command-line tool seeds the generator with."""
