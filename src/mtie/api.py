"""Public API facade for MTIE computation.

This module chooses between the exact and the fast engine based on the size
of the input, so callers can hand over a sample sequence and get back a
validated MTIE curve.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import logging

from .config import EngineConfig
from .metrics import COMPLETE_MAX_SAMPLES, MtiePoint, compute_complete, compute_fast

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    """MTIE engine choice."""

    AUTO = "auto"
    COMPLETE = "complete"
    FAST = "fast"


def select_algorithm(sample_count: int, threshold: int = COMPLETE_MAX_SAMPLES) -> Algorithm:
    """Pick the complete engine up to ``threshold`` samples, the fast one above."""

    if threshold < 0:
        raise ValueError("threshold must be non-negative")
    if sample_count <= threshold:
        return Algorithm.COMPLETE
    return Algorithm.FAST


def compute(
    samples: Sequence[float],
    config: EngineConfig | None = None,
    algorithm: Algorithm | str = Algorithm.AUTO,
) -> list[MtiePoint]:
    """Compute an MTIE curve, selecting an engine when ``algorithm`` is auto.

    Raises SizeExceededError when the complete engine is chosen for an input
    above its configured ceiling.
    """

    config = config or EngineConfig()
    algorithm = Algorithm(algorithm)
    sample_count = len(samples)
    if algorithm is Algorithm.AUTO:
        algorithm = select_algorithm(sample_count, threshold=config.selection_threshold)
    logger.debug(
        "mtie_algorithm_selected",
        extra={"algorithm": algorithm.value, "sample_count": sample_count},
    )

    if algorithm is Algorithm.COMPLETE:
        return compute_complete(samples, max_samples=config.complete_max_samples)
    return compute_fast(samples)
