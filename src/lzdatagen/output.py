"""
Writing generated data to a file or standard output.

Existing files are only replaced when the caller asks for it. Without
`force` the file is created exclusively, so an accidental rerun cannot
clobber earlier benchmark input.

A failed write leaves whatever was already written in place.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import BinaryIO

from .exceptions import OutputError

logger = logging.getLogger(__name__)

STDOUT_PATH = "-"
"""Output path meaning standard output."""


@contextmanager
def open_output(path: str, force: bool = False) -> Iterator[BinaryIO]:
    """
    Open `path` for binary writing.

    Args:
        path: File path, or "-" for standard output.
        force: Truncate an existing file instead of refusing to open it.

    Raises:
        OutputError: If the file exists (without `force`) or cannot be created.
    """
    if path == STDOUT_PATH:
        stream = sys.stdout.buffer
        yield stream
        try:
            stream.flush()
        except OSError as e:
            raise OutputError(f"write error ({e.strerror})", path) from e
        return

    mode = "wb" if force else "xb"
    try:
        fp = open(path, mode)
    except FileExistsError as e:
        raise OutputError("output file exists (use --force to overwrite)", path) from e
    except OSError as e:
        raise OutputError(f"unable to open output file ({e.strerror})", path) from e

    logger.debug("Opened %s (mode=%s)", path, mode)
    with fp:
        yield fp


def write_chunks(fp: BinaryIO, chunks: Iterable[bytes], path: str = STDOUT_PATH) -> int:
    """
    Write every chunk to `fp`.

    Returns:
        Total number of bytes written.

    Raises:
        OutputError: On a short write or an I/O error.
    """
    total = 0
    for chunk in chunks:
        try:
            written = fp.write(chunk)
        except OSError as e:
            raise OutputError(f"write error ({e.strerror})", path) from e

        # Unbuffered streams may accept fewer bytes than offered.
        if written is not None and written != len(chunk):
            raise OutputError(f"short write ({written} of {len(chunk)} bytes)", path)

        total += len(chunk)
    return total
