"""Benchmark value objects: measured case and its timings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from generic.domain.model.allocation import Allocation

SIZE_LABELS: Final = {10: "Small", 10_000: "Medium", 1_000_000: "Large"}


@dataclass(frozen=True, slots=True)
class BenchmarkCase:
    """One measured combination of input size and allocation strategy.

    Attributes:
        size: Input length (>= 0)
        allocation: Strategy under test
    """

    size: int
    allocation: Allocation

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")

    @property
    def name(self) -> str:
        """Stable case name, e.g. "Where/Small/Prealloc"."""
        size_label = SIZE_LABELS.get(self.size, str(self.size))
        return f"Where/{size_label}/{self.allocation.label}"


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """Timings of a single case.

    Attributes:
        case: What was measured
        timings: Seconds per where() call, one entry per sample (non-empty)
        matches: Length of the filtered result (0 <= matches <= case.size)
    """

    case: BenchmarkCase
    timings: tuple[float, ...]
    matches: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.timings:
            raise ValueError("timings must not be empty")
        for timing in self.timings:
            if timing < 0:
                raise ValueError(f"timings must be >= 0, got {timing}")
        if not 0 <= self.matches <= self.case.size:
            raise ValueError(f"matches must be in [0, {self.case.size}], got {self.matches}")

    @property
    def best(self) -> float:
        """Fastest sample in seconds."""
        return min(self.timings)

    @property
    def mean(self) -> float:
        """Average sample in seconds."""
        return sum(self.timings) / len(self.timings)
