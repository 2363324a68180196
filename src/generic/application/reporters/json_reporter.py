"""JSON reporter for machine-readable output.

Stdlib-only reporter. Output format is compatible with
github-action-benchmark ("customSmallerIsBetter").
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from generic.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from generic.domain.model.benchmark import BenchmarkResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, results: Sequence[BenchmarkResult]) -> None:
        """Write results as a JSON array.

        Args:
            results: Measured cases in run order
        """
        data = [self._result_to_dict(r) for r in results]
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: BenchmarkResult) -> dict[str, object]:
        """Convert BenchmarkResult to JSON-serializable dict.

        value is the best sample: the least noisy estimate of cost.
        """
        return {
            "name": result.case.name,
            "unit": "seconds",
            "value": result.best,
            "extra": (
                f"size={result.case.size} allocation={result.case.allocation.name} "
                f"matches={result.matches} mean={result.mean:.9f} samples={len(result.timings)}"
            ),
        }
