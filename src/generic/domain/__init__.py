"""generic domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, itertools, logging, collections.abc
"""

from generic.domain.model import (
    Allocation,
    BenchmarkCase,
    BenchmarkConfig,
    BenchmarkResult,
    Slice,
)
from generic.domain.predicates import Predicate, always, never
from generic.domain.where import where

__all__ = [
    # Filtering
    "where",
    "Slice",
    "Allocation",
    # Predicates
    "Predicate",
    "always",
    "never",
    # Benchmark
    "BenchmarkCase",
    "BenchmarkConfig",
    "BenchmarkResult",
]
