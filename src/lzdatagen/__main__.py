"""
lzdgen: generate compressible data for testing purposes.

Usage::

    lzdgen -s 64m -r 4.0 data.bin
    lzdgen -s 1g -S 0x1234 -f data.bin
    lzdgen -s 16k -l 1.0 - | xxd | head

Options:
    -f, --force            overwrite output file
    -l, --literal-exp EXP  literal distribution exponent [3.0]
    -m, --match-exp EXP    match length distribution exponent [3.0]
    -o, --output OUTFILE   write output to OUTFILE
    -r, --ratio RATIO      compression ratio target [3.0]
    -S, --seed SEED        use 64-bit SEED to seed PRNG
    -s, --size SIZE        size with opt. k/m/g/t suffix [1m]
    -V, --version          print version and exit
    -v, --verbose          verbose mode (repeat for debug output)

If OUTFILE is `-', write to standard output.
Without --seed, the seed is taken from LZDG_SEED or the clock.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn

from . import __version__
from .config import GenerationParameters, GeneratorConfig, default_seed
from .exceptions import ArgumentError, LzdgError
from .generator import iter_blocks
from .output import open_output, write_chunks
from .parsing import parse_float, parse_integer, parse_size
from .pcg import Pcg32

EXE_NAME = "lzdgen"

_HANDLER_NAME = EXE_NAME

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{levelname} {name}: {record.getMessage()}"


def setup_logging(verbosity: int = 0, no_color: bool = False) -> None:
    """
    Configure logging to standard error.

    Standard output may carry the generated data, so log records never go there.

    Args:
        verbosity: 0 shows warnings only, 1 adds info, 2 or more adds debug.
        no_color: Use plain formatting.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter("%(levelname)-8s %(name)s: %(message)s")
    else:
        formatter = ColoredFormatter()
    handler.setFormatter(formatter)

    # Replace a handler left over from an earlier call instead of stacking.
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.setLevel(level)
    root.addHandler(handler)


class _Parser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _Parser(
        prog=EXE_NAME,
        description="Generate compressible data for testing purposes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="If OUTFILE is `-', write to standard output.",
    )
    parser.add_argument("outfile", nargs="?", default=None, help="output file")
    parser.add_argument("-f", "--force", action="store_true", help="overwrite output file")
    parser.add_argument(
        "-l",
        "--literal-exp",
        metavar="EXP",
        default="3.0",
        help="literal distribution exponent [3.0]",
    )
    parser.add_argument(
        "-m",
        "--match-exp",
        metavar="EXP",
        default="3.0",
        help="match length distribution exponent [3.0]",
    )
    parser.add_argument("-o", "--output", metavar="OUTFILE", help="write output to OUTFILE")
    parser.add_argument(
        "-r",
        "--ratio",
        metavar="RATIO",
        default="3.0",
        help="compression ratio target [3.0]",
    )
    parser.add_argument("-S", "--seed", metavar="SEED", help="use 64-bit SEED to seed PRNG")
    parser.add_argument(
        "-s",
        "--size",
        metavar="SIZE",
        default="1m",
        help="size with opt. k/m/g/t suffix [1m]",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{EXE_NAME} {__version__}",
        help="print version and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="verbose mode",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="disable colored logging output",
    )
    return parser


def _parse_exponent(text: str, what: str) -> float:
    try:
        return parse_float(text)
    except ArgumentError as e:
        raise ArgumentError(f"{what} exponent must be a floating point value") from e


def config_from_args(args: argparse.Namespace) -> tuple[GeneratorConfig, str]:
    """
    Validate parsed arguments.

    Returns:
        The generator configuration and the output path.

    Raises:
        ArgumentError: On any invalid value.
    """
    if args.outfile is not None and args.output is not None:
        raise ArgumentError("too many arguments")
    outfile = args.output if args.output is not None else args.outfile
    if outfile is None:
        raise ArgumentError("too few arguments")

    lit_exp = _parse_exponent(args.literal_exp, "literal")
    len_exp = _parse_exponent(args.match_exp, "match")

    try:
        ratio = parse_float(args.ratio)
    except ArgumentError as e:
        raise ArgumentError("ratio must be a floating point value >= 1.0") from e
    if ratio < 1.0:
        raise ArgumentError("ratio must be a floating point value >= 1.0")

    if args.seed is not None:
        try:
            seed = parse_integer(args.seed)
        except ArgumentError as e:
            raise ArgumentError("seed value error") from e
    else:
        seed = default_seed()

    try:
        size = parse_size(args.size)
    except ArgumentError as e:
        raise ArgumentError("size must be a positive integer") from e
    if size == 0:
        raise ArgumentError("size must be a positive integer")

    config = GeneratorConfig(
        size=size,
        seed=seed,
        params=GenerationParameters(ratio=ratio, len_exp=len_exp, lit_exp=lit_exp),
    )
    return config, outfile


def run(config: GeneratorConfig, outfile: str, force: bool = False) -> int:
    """
    Generate `config.size` bytes into `outfile`.

    Returns:
        Number of bytes written.

    Raises:
        OutputError: If the output cannot be opened or written.
    """
    rng = Pcg32(config.seed, config.stream)
    logger.info("seed 0x%016X", config.seed)
    logger.info(
        "size=%d ratio=%g len_exp=%g lit_exp=%g",
        config.size,
        config.params.ratio,
        config.params.len_exp,
        config.params.lit_exp,
    )

    with open_output(outfile, force) as fp:
        written = write_chunks(fp, iter_blocks(rng, config.size, config.params), outfile)

    logger.info("wrote %d bytes to %s", written, outfile)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        setup_logging(args.verbose, args.no_color)
        config, outfile = config_from_args(args)
    except ArgumentError as e:
        print(f"{EXE_NAME}: {e.message}", file=sys.stderr)
        print(parser.format_usage(), end="", file=sys.stderr)
        return 1

    try:
        run(config, outfile, args.force)
    except LzdgError as e:
        print(f"{EXE_NAME}: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
