"""Tests for writing generated data."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from lzdatagen.exceptions import OutputError
from lzdatagen.output import open_output, write_chunks


class ShortWriter(io.RawIOBase):
    """Raw stream that accepts at most `limit` bytes per write."""

    def __init__(self, limit: int) -> None:
        """Initialize with the per-call write limit."""
        self.limit = limit

    def writable(self) -> bool:
        """The stream is writable."""
        return True

    def write(self, data) -> int:  # type: ignore[override]
        """Accept only the first `limit` bytes."""
        return min(len(data), self.limit)


class FailingWriter(io.RawIOBase):
    """Raw stream whose writes always fail."""

    def writable(self) -> bool:
        """The stream is writable."""
        return True

    def write(self, data) -> int:  # type: ignore[override]
        """Fail like a full disk."""
        raise OSError(28, "No space left on device")


class TestOpenOutput:
    """Opening files and standard output."""

    def test_creates_file(self, tmp_path: Path) -> None:
        """A new file is created and written."""
        path = tmp_path / "out.bin"
        with open_output(str(path)) as fp:
            fp.write(b"abc")
        assert path.read_bytes() == b"abc"

    def test_refuses_existing_file(self, tmp_path: Path) -> None:
        """Without force, an existing file is left alone."""
        path = tmp_path / "out.bin"
        path.write_bytes(b"keep")
        with pytest.raises(OutputError, match="exists"):
            with open_output(str(path)):
                pass
        assert path.read_bytes() == b"keep"

    def test_force_truncates(self, tmp_path: Path) -> None:
        """With force, an existing file is replaced."""
        path = tmp_path / "out.bin"
        path.write_bytes(b"old contents")
        with open_output(str(path), force=True) as fp:
            fp.write(b"new")
        assert path.read_bytes() == b"new"

    def test_missing_directory(self, tmp_path: Path) -> None:
        """An unreachable path reports the path."""
        path = tmp_path / "missing" / "out.bin"
        with pytest.raises(OutputError, match="unable to open") as exc_info:
            with open_output(str(path)):
                pass
        assert exc_info.value.path == str(path)

    def test_stdout(self, capsysbinary: pytest.CaptureFixture[bytes]) -> None:
        """Writing to "-" goes to standard output."""
        with open_output("-") as fp:
            fp.write(b"\x00\x01\x02")
        assert capsysbinary.readouterr().out == b"\x00\x01\x02"


class TestWriteChunks:
    """Writing a sequence of chunks."""

    def test_writes_all(self) -> None:
        """Every chunk lands in order and the total is returned."""
        buf = io.BytesIO()
        assert write_chunks(buf, [b"ab", b"", b"cde"]) == 5
        assert buf.getvalue() == b"abcde"

    def test_short_write(self) -> None:
        """A stream that takes fewer bytes than offered is an error."""
        with pytest.raises(OutputError, match="short write"):
            write_chunks(ShortWriter(2), [b"abcd"], "out.bin")

    def test_io_error(self) -> None:
        """OS errors become OutputError."""
        with pytest.raises(OutputError, match="No space left") as exc_info:
            write_chunks(FailingWriter(), [b"abcd"], "out.bin")
        assert exc_info.value.path == "out.bin"
