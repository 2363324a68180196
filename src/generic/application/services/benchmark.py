"""Benchmark service: measures where() per size and allocation strategy."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from generic.domain.model.benchmark import BenchmarkCase, BenchmarkResult
from generic.domain.model.configuration import BenchmarkConfig
from generic.domain.where import where

if TYPE_CHECKING:
    from collections.abc import Callable

    from generic.domain.predicates.types import Predicate

logger = logging.getLogger(__name__)


def is_even(n: int) -> bool:
    """Default benchmark predicate: keeps half of range(size)."""
    return n % 2 == 0


class BenchmarkService:
    """Runs where() benchmarks.

    Data for each size is list(range(size)), built once per size and
    shared by all strategies. Cases are ordered by size, then strategy,
    as given in the config.
    """

    def __init__(
        self,
        predicate: Predicate[int] = is_even,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        """Initialize service.

        Args:
            predicate: Predicate passed to where() in every case.
            clock: Monotonic clock returning seconds.
        """
        self._predicate = predicate
        self._clock = clock

    def run(self, config: BenchmarkConfig | None = None) -> tuple[BenchmarkResult, ...]:
        """Measure every (size, strategy) case.

        Args:
            config: Benchmark configuration. Uses defaults if None.

        Returns:
            One result per case.
        """
        config = config or BenchmarkConfig()
        results: list[BenchmarkResult] = []

        for size in config.sizes:
            data = list(range(size))
            for allocation in config.strategies:
                result = self._measure(BenchmarkCase(size=size, allocation=allocation), data, config)
                logger.info(
                    "%s: best %.6fs, mean %.6fs, %d matches",
                    result.case.name,
                    result.best,
                    result.mean,
                    result.matches,
                )
                results.append(result)

        return tuple(results)

    def _measure(
        self,
        case: BenchmarkCase,
        data: list[int],
        config: BenchmarkConfig,
    ) -> BenchmarkResult:
        """Collect config.repeat samples of config.number calls each."""
        timings: list[float] = []
        matches = 0

        for _ in range(config.repeat):
            start = self._clock()
            for _ in range(config.number):
                matches = len(where(data, self._predicate, case.allocation))
            elapsed = self._clock() - start
            timings.append(elapsed / config.number)

        return BenchmarkResult(case=case, timings=tuple(timings), matches=matches)
