import pytest

from mtie.api import Algorithm, compute, select_algorithm
from mtie.config import EngineConfig
from mtie.errors import SizeExceededError


def test_select_algorithm_threshold() -> None:
    assert select_algorithm(100_000) is Algorithm.COMPLETE
    assert select_algorithm(100_001) is Algorithm.FAST
    assert select_algorithm(10, threshold=9) is Algorithm.FAST
    with pytest.raises(ValueError):
        select_algorithm(10, threshold=-1)


def test_compute_uses_complete_engine_for_small_inputs() -> None:
    points = compute([100.0, 100.0, 150.0, 150.0, 200.0])
    assert [point.interval for point in points] == [1, 2, 3, 4]


def test_compute_uses_fast_engine_above_threshold() -> None:
    points = compute([float(index) for index in range(100_001)])
    assert len(points) == 16
    assert points[-1].interval == 2**16 - 1
    assert points[-1].value == pytest.approx(2**16 - 1)


def test_compute_respects_configured_threshold() -> None:
    config = EngineConfig(selection_threshold=4)
    points = compute([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0], config=config)
    assert [(point.interval, point.value) for point in points] == [(1, 1.0), (3, 3.0), (7, 7.0)]


def test_compute_forced_algorithm() -> None:
    samples = [1.0, 2.0, 3.0, 4.0]
    assert len(compute(samples, algorithm="fast")) == 2
    assert len(compute(samples, algorithm=Algorithm.COMPLETE)) == 3


def test_compute_surfaces_size_exceeded() -> None:
    config = EngineConfig(complete_max_samples=3, selection_threshold=10)
    with pytest.raises(SizeExceededError):
        compute([0.0] * 5, config=config)


def test_compute_rejects_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        compute([0.0, 1.0], algorithm="bogus")
