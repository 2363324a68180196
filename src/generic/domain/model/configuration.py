"""Benchmark configuration.

Immutable, validated on construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from generic.domain.model.allocation import Allocation

DEFAULT_SIZES: tuple[int, ...] = (10, 10_000, 1_000_000)


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Configuration for the where() benchmark.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        sizes: Input lengths to measure. Each size yields one case per strategy.
        strategies: Allocation strategies to measure.
        repeat: Number of timing samples per case (best and mean are derived).
        number: where() calls per sample. Sample time is divided by number.
    """

    sizes: tuple[int, ...] = DEFAULT_SIZES
    strategies: tuple[Allocation, ...] = (Allocation.PREALLOCATE, Allocation.GROW)
    repeat: int = 5
    number: int = 10

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.sizes:
            raise ValueError("sizes must not be empty")
        for size in self.sizes:
            # bool is an int subclass
            if isinstance(size, bool) or not isinstance(size, int):
                raise TypeError(f"sizes must contain int, got {type(size).__name__}")
            if size < 0:
                raise ValueError(f"sizes must be >= 0, got {size}")

        if not self.strategies:
            raise ValueError("strategies must not be empty")
        for strategy in self.strategies:
            if not isinstance(strategy, Allocation):
                raise TypeError(f"strategies must contain Allocation, got {type(strategy).__name__}")

        if self.repeat < 1:
            raise ValueError(f"repeat must be >= 1, got {self.repeat}")
        if self.number < 1:
            raise ValueError(f"number must be >= 1, got {self.number}")
