"""Exception hierarchy for the LZ data generator."""

from __future__ import annotations


class LzdgError(Exception):
    """
    Base exception for all errors raised by the generator tooling.

    The generation core itself never raises these. They come from the
    boundary: argument parsing and writing the output.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ArgumentError(LzdgError):
    """Raised when a command-line value is malformed or out of range."""


class OutputError(LzdgError):
    """
    Raised when the output cannot be opened or written.

    Attributes:
        path: The output path involved, or "-" for standard output.
    """

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")
