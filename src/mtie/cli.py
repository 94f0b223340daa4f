"""Command-line entry point for MTIE computation."""

from __future__ import annotations

import argparse
import sys
import tomllib
from typing import Sequence

from pydantic import ValidationError

from . import __version__
from .api import Algorithm, compute
from .config import MtieSettings
from .errors import SizeExceededError, TieInputError
from .logging_utils import configure_logging
from .tie_data import parse_tie_samples, read_tie_text, write_mtie

DESCRIPTION = """\
Calculates MTIE from a series of TIE input data.

The TIE input data is expected to be in text format, with one number per line.
Blank lines and lines starting with '#' or '//' are ignored.
It is assumed that the input data was sampled at a uniform rate.
The MTIE calculation is unaware of the sampling rate of the data,
or the units of the TIE measurement.

The MTIE is printed to standard output, with each line containing:
- an interval
- the MTIE for that interval"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mtie",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-i",
        "--input",
        help="File containing the TIE input data; standard input is read if omitted",
    )
    parser.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        default=Algorithm.AUTO.value,
        help="MTIE engine; 'auto' picks by input size (default: auto)",
    )
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("--log-level", help="Override the configured logging level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = MtieSettings.from_toml(args.config) if args.config else MtieSettings()
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError) as exc:
        print(f"Error: failed to load configuration: {exc}", file=sys.stderr)
        return 1
    if args.log_level:
        settings.logging.level = args.log_level
    configure_logging(settings.logging)

    try:
        text = read_tie_text(args.input)
    except TieInputError as exc:
        print(f"Error: failed to get TIE input data: {exc}", file=sys.stderr)
        return 1

    samples = parse_tie_samples(text)
    try:
        points = compute(samples, config=settings.engine, algorithm=args.algorithm)
    except SizeExceededError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    write_mtie(points)
    return 0


if __name__ == "__main__":
    sys.exit(main())
