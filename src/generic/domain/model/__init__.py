"""Domain model: strategy enum, container, benchmark value objects."""

from generic.domain.model.allocation import Allocation
from generic.domain.model.benchmark import BenchmarkCase, BenchmarkResult
from generic.domain.model.configuration import BenchmarkConfig
from generic.domain.model.slice import Slice

__all__ = [
    "Allocation",
    "BenchmarkCase",
    "BenchmarkConfig",
    "BenchmarkResult",
    "Slice",
]
