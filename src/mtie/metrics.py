"""MTIE engines for evenly spaced TIE samples.

Two engines are provided. The complete engine is exact for every interval
from 1 to N-1 but costs O(n^2). The fast engine builds a min/max pyramid in
O(n log n) and only reports intervals one less than a power of two. Both are
pure functions of their input and validate that the resulting curve never
decreases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .errors import MonotonicityError, SizeExceededError

# Above this many samples the complete engine takes too long to be useful.
COMPLETE_MAX_SAMPLES = 100_000


@dataclass(frozen=True)
class MtiePoint:
    """MTIE observed over one interval (in sample spacings)."""

    interval: int
    value: float


def _as_array(samples: Sequence[float]) -> np.ndarray:
    return np.asarray(samples, dtype=np.float64)


def max_pyramid_level(sample_count: int) -> int:
    """Return floor(log2(sample_count)), or 0 when fewer than two samples."""

    if sample_count < 2:
        return 0
    return sample_count.bit_length() - 1


def compute_complete(samples: Sequence[float], max_samples: int = COMPLETE_MAX_SAMPLES) -> list[MtiePoint]:
    """Compute MTIE for every interval from 1 to N-1.

    For each interval the largest absolute difference between two samples that
    far apart is taken, then carried forward from the previous interval so the
    curve never decreases. Inputs above ``max_samples`` are rejected before any
    work is done.
    """

    if max_samples < 0:
        raise ValueError("max_samples must be non-negative")
    count = len(samples)
    if count > max_samples:
        raise SizeExceededError(ceiling=max_samples, actual=count)

    values = _as_array(samples)
    points: list[MtiePoint] = []
    maximum = 0.0
    for tau in range(1, count):
        difference = float(np.max(np.abs(values[tau:] - values[:-tau])))
        if difference > maximum:
            maximum = difference
        points.append(MtiePoint(interval=tau, value=maximum))

    check_monotonic(points)
    return points


def compute_fast(samples: Sequence[float]) -> list[MtiePoint]:
    """Compute MTIE at intervals 2**k - 1 using a min/max pyramid.

    Level k holds, for every window start i, the maximum and minimum of the
    2**k samples beginning at i. It is built from level k-1 by combining the
    windows starting at i and at i + 2**(k-1). Only the previous level is
    retained, so memory stays O(n).

    See "Fast Algorithms for TVAR and MTIE Computation in Characterization of
    Network Synchronization Performance" (Dobrogowski, Kasznia).
    """

    values = _as_array(samples)
    count = len(values)
    levels = max_pyramid_level(count)

    # Level 0: every sample is its own one-sample window.
    maxima = values
    minima = values
    points: list[MtiePoint] = []
    for level in range(1, levels + 1):
        half = 1 << (level - 1)
        window = half << 1
        starts = count - window + 1
        maxima = np.maximum(maxima[:starts], maxima[half : half + starts])
        minima = np.minimum(minima[:starts], minima[half : half + starts])
        points.append(MtiePoint(interval=window - 1, value=float(np.max(maxima - minima))))

    check_monotonic(points)
    return points


def check_monotonic(points: Sequence[MtiePoint]) -> None:
    """Raise MonotonicityError if any MTIE value is below its predecessor."""

    for index, (previous, following) in enumerate(zip(points, points[1:])):
        if following.value < previous.value:
            raise MonotonicityError(index=index, previous=previous, following=following)
