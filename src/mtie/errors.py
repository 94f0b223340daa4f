"""Exceptions raised by the MTIE toolkit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .metrics import MtiePoint


class MtieError(Exception):
    """Base class for MTIE failures."""


class TieInputError(MtieError):
    """TIE input data could not be acquired."""


class SizeExceededError(MtieError, ValueError):
    """Input is too large for the O(n^2) engine.

    Callers can recover by retrying with the fast engine.
    """

    def __init__(self, ceiling: int, actual: int) -> None:
        super().__init__(
            "Data set is too large for the complete MTIE algorithm, which is O(n^2). "
            f"It will not process more than {ceiling} samples; the input has {actual} samples."
        )
        self.ceiling = ceiling
        self.actual = actual


class MonotonicityError(MtieError, RuntimeError):
    """An MTIE curve decreased between two adjacent intervals.

    This is an internal defect in an engine, never a property of the input.
    """

    def __init__(self, index: int, previous: "MtiePoint", following: "MtiePoint") -> None:
        super().__init__(
            f"MTIE is not monotonically increasing! indices {index}-{index + 1} "
            f"(intervals {previous.interval} and {following.interval}) "
            f"contain {previous.value!r} and {following.value!r}."
        )
        self.index = index
        self.previous = previous
        self.following = following
