"""Reading TIE input text and writing MTIE output."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, TextIO

import logging
import math
import sys

from .errors import TieInputError
from .metrics import MtiePoint

COMMENT_PREFIXES = ("#", "//")


def read_tie_text(path: str | Path | None = None) -> str:
    """Return the TIE text from ``path``, or all of stdin when no path is given."""

    if path is None:
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TieInputError(f"Could not read file '{path}': {exc}") from exc


def parse_tie_samples(text: str, logger: logging.Logger | None = None) -> list[float]:
    """Parse one TIE sample per line.

    Blank lines and lines starting with ``#`` or ``//`` are ignored. Lines that
    do not hold a finite number are skipped with a warning.
    """

    logger = logger or logging.getLogger(__name__)
    samples: list[float] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(COMMENT_PREFIXES):
            continue
        try:
            value = float(trimmed)
        except ValueError:
            value = math.nan
        if not math.isfinite(value):
            logger.warning(
                "Ignoring line %d '%s': it does not contain a valid number",
                line_number,
                line,
                extra={"line_number": line_number, "raw_line": line},
            )
            continue
        samples.append(value)
    return samples


def format_mtie(points: Iterable[MtiePoint]) -> Iterator[str]:
    for point in points:
        yield f"{point.interval} {point.value}"


def write_mtie(points: Iterable[MtiePoint], stream: TextIO | None = None) -> None:
    """Write one ``<interval> <mtie>`` line per point."""

    stream = stream or sys.stdout
    for line in format_mtie(points):
        stream.write(line + "\n")
