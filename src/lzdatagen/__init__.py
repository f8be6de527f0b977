"""LZ data generator.

Generates byte streams with a controllable amount of LZ-style redundancy,
for use as reproducible input to compression benchmarks and fuzzers.

Usage::

    from lzdatagen import GenerationParameters, Pcg32, generate_data

    rng = Pcg32(seed=42, stream=0xC0FFEE)
    data = generate_data(rng, 1 << 20, GenerationParameters(ratio=4.0))

Lower-level entry points fill a caller-owned buffer::

    buf = bytearray(4096)
    generate(rng, buf, len(buf), ratio=3.0, len_exp=3.0, lit_exp=3.0)
"""

from __future__ import annotations

from .config import GenerationParameters, GeneratorConfig
from .constants import BLOCK_SIZE, MAX_LEN, MIN_LEN, SAMPLE_SIZE
from .exceptions import ArgumentError, LzdgError, OutputError
from .generator import (
    Run,
    RunKind,
    generate,
    generate_bulk,
    generate_data,
    iter_blocks,
    iter_runs,
)
from .pcg import Pcg32, RandomSource

__version__ = "0.1.0"

__all__ = [
    # Generation
    "generate",
    "generate_bulk",
    "generate_data",
    "iter_blocks",
    "iter_runs",
    "Run",
    "RunKind",
    # Random source
    "Pcg32",
    "RandomSource",
    # Configuration
    "GenerationParameters",
    "GeneratorConfig",
    # Constants
    "BLOCK_SIZE",
    "MAX_LEN",
    "MIN_LEN",
    "SAMPLE_SIZE",
    # Exceptions
    "LzdgError",
    "ArgumentError",
    "OutputError",
]
