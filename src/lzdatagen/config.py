"""
Configuration for the LZ data generator.

Generation parameters are fixed for the whole of a generation request and
are never modified while it runs.

The environment variable `LZDG_SEED` supplies a seed for runs that do not
pass one explicitly. This makes scripted benchmark runs reproducible without
threading a flag through every invocation.
"""

from __future__ import annotations

import os
import time

from pydantic import Field

from .base import StrictBaseModel
from .constants import BLOCK_SIZE, DEFAULT_STREAM
from .exceptions import ArgumentError
from .parsing import parse_integer

SEED_ENV_VAR = "LZDG_SEED"
"""Environment variable holding the default seed."""


class GenerationParameters(StrictBaseModel):
    """
    Shape of the generated stream.

    No range checks are applied here. A ratio below 1.0 or an unusual
    exponent yields a degenerate but well-defined stream.
    """

    ratio: float = 3.0
    """Compression ratio target. About 1/ratio of the output is fresh literals."""

    len_exp: float = 3.0
    """Match length exponent. Larger values favor short matches."""

    lit_exp: float = 3.0
    """Literal exponent. Larger values favor small byte values."""


class GeneratorConfig(StrictBaseModel):
    """Everything a command-line run needs besides the output location."""

    size: int = Field(default=BLOCK_SIZE, gt=0)
    """Total number of bytes to produce."""

    seed: int = Field(ge=0, lt=1 << 64)
    """64-bit seed for the random source."""

    stream: int = Field(default=DEFAULT_STREAM, ge=0, lt=1 << 64)
    """Stream selector for the random source."""

    params: GenerationParameters = GenerationParameters()
    """Ratio and distribution exponents."""


def default_seed() -> int:
    """
    Pick the seed for runs that did not specify one.

    Reads `LZDG_SEED` when set. Otherwise derives a seed from the clock, so
    separate runs produce different data.

    Raises:
        ArgumentError: If `LZDG_SEED` is set but not a valid integer.
    """
    value = os.environ.get(SEED_ENV_VAR)
    if value is not None:
        try:
            return parse_integer(value)
        except ArgumentError as e:
            raise ArgumentError(f"invalid {SEED_ENV_VAR}: {e.message}") from e

    return time.time_ns() & ((1 << 64) - 1)
