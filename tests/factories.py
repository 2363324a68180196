"""Test factories and doubles.

Centralized helpers to avoid duplication across test modules.
Factories accept simplified parameters and return fully constructed
domain objects.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from generic.domain.model.allocation import Allocation
from generic.domain.model.benchmark import BenchmarkCase, BenchmarkResult
from generic.domain.model.slice import Slice


def is_even(n: int) -> bool:
    return n % 2 == 0


class RecordingPredicate:
    """Predicate double that records every element it is called with."""

    def __init__(self, predicate: Callable[[object], bool]) -> None:
        self._predicate = predicate
        self.calls: list[object] = []

    def __call__(self, element: object) -> bool:
        self.calls.append(element)
        return self._predicate(element)

    @property
    def call_count(self) -> int:
        return len(self.calls)


def make_recording_slice_class() -> type[Slice[object]]:
    """Create a Slice subclass that records every instance it constructs.

    Each call returns a fresh class with its own `created` list.
    """

    class RecordingSlice(Slice[object]):
        created: list[Slice[object]] = []

        def __init__(self, *args: object) -> None:
            super().__init__(*args)  # type: ignore[arg-type]
            type(self).created.append(self)

    RecordingSlice.created = []
    return RecordingSlice


class FakeClock:
    """Deterministic clock: advances by step seconds on every call."""

    def __init__(self, step: float = 0.5) -> None:
        self._ticks: Iterator[int] = iter(range(1_000_000))
        self._step = step

    def __call__(self) -> float:
        return next(self._ticks) * self._step


def make_benchmark_result(
    size: int = 10,
    allocation: Allocation = Allocation.PREALLOCATE,
    timings: tuple[float, ...] = (0.002, 0.001, 0.003),
    matches: int | None = None,
) -> BenchmarkResult:
    """Create a BenchmarkResult for tests.

    Args:
        size: Input length of the case
        allocation: Strategy of the case
        timings: Seconds per call, one per sample
        matches: Result length (default: half of size, as with is_even)

    Returns:
        BenchmarkResult instance
    """
    return BenchmarkResult(
        case=BenchmarkCase(size=size, allocation=allocation),
        timings=timings,
        matches=(size + 1) // 2 if matches is None else matches,
    )
