"""Application layer.

- services: BenchmarkService (measures where() per strategy)
- reporters: Output formatting (Console, JSON)
"""

from generic.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
)
from generic.application.services import BenchmarkService, is_even

__all__ = [
    # Services
    "BenchmarkService",
    "is_even",
    # Reporters
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
