"""Console reporter: benchmark results → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from generic.domain.model.benchmark import BenchmarkResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters (>= 40).
        title: Heading printed above the table.
    """

    width: int = 120
    title: str = "WHERE BENCHMARK"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


def format_duration(seconds: float) -> str:
    """Format seconds with the largest unit that keeps the value >= 1."""
    if seconds >= 1:
        return f"{seconds:.3f} s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f} ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.3f} µs"
    return f"{seconds * 1e9:.1f} ns"


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, results: Sequence[BenchmarkResult]) -> str:
        """Format benchmark results as a table.

        Args:
            results: Measured cases in run order.

        Returns:
            Formatted string with colors and table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        console.print()
        console.rule(f"[bold]{self._config.title}[/bold]")
        console.print()
        console.print(f"[bold]Cases:[/bold] {len(results)}")
        console.print()

        if results:
            console.print(self._build_table(results))
        else:
            console.print("[dim]No results[/dim]")

        return output.getvalue()

    def _build_table(self, results: Sequence[BenchmarkResult]) -> Table:
        """Build one row per result."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Case")
        table.add_column("Size", justify="right")
        table.add_column("Strategy")
        table.add_column("Matches", justify="right")
        table.add_column("Best", justify="right", style="green")
        table.add_column("Mean", justify="right")

        for result in results:
            table.add_row(
                result.case.name,
                f"{result.case.size:,}",
                result.case.allocation.name,
                f"{result.matches:,}",
                format_duration(result.best),
                format_duration(result.mean),
            )

        return table
