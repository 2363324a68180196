"""Base reporter class for benchmark output formatting.

Reporters write to a destination they own. ConsoleReporter returns a
string instead and does not inherit from BaseReporter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from generic.domain.model.benchmark import BenchmarkResult


class BaseReporter(ABC):
    """Base class for benchmark reporters.

    Concrete reporters must implement the report() method.

    Example:
        class MyReporter(BaseReporter):
            def report(self, results: Sequence[BenchmarkResult]) -> None:
                print(f"Cases: {len(results)}")
    """

    @abstractmethod
    def report(self, results: Sequence[BenchmarkResult]) -> None:
        """Report benchmark results.

        Implementation decides output format and destination.

        Args:
            results: Measured cases in run order
        """
