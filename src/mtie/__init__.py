"""Top-level package for MTIE (Maximum Time Interval Error) computation."""

__version__ = "0.1.0"

from .api import Algorithm, compute, select_algorithm
from .config import EngineConfig, LoggingConfig, MtieSettings
from .errors import MonotonicityError, MtieError, SizeExceededError, TieInputError
from .logging_utils import JsonFormatter, configure_logging
from .metrics import (
    COMPLETE_MAX_SAMPLES,
    MtiePoint,
    check_monotonic,
    compute_complete,
    compute_fast,
    max_pyramid_level,
)
from .tie_data import format_mtie, parse_tie_samples, read_tie_text, write_mtie

__all__ = [
    "__version__",
    "Algorithm",
    "compute",
    "select_algorithm",
    "EngineConfig",
    "LoggingConfig",
    "MtieSettings",
    "MonotonicityError",
    "MtieError",
    "SizeExceededError",
    "TieInputError",
    "JsonFormatter",
    "configure_logging",
    "COMPLETE_MAX_SAMPLES",
    "MtiePoint",
    "check_monotonic",
    "compute_complete",
    "compute_fast",
    "max_pyramid_level",
    "format_mtie",
    "parse_tie_samples",
    "read_tie_text",
    "write_mtie",
]
