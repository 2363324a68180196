"""Application services.

BenchmarkService measures where() for each allocation strategy.
"""

from generic.application.services.benchmark import BenchmarkService, is_even

__all__ = [
    "BenchmarkService",
    "is_even",
]
