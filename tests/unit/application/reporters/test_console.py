"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- format_duration unit selection
- ConsoleReporter report() output
"""

import pytest

from generic.application.reporters._base import BaseReporter
from generic.application.reporters.console import ConsoleConfig, ConsoleReporter, format_duration
from generic.domain.model.allocation import Allocation
from tests.factories import make_benchmark_result


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.width == 120
        assert config.title == "WHERE BENCHMARK"

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=10)


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (2.5, "2.500 s"),
            (0.0015, "1.500 ms"),
            (0.0000025, "2.500 µs"),
            (0.0000000025, "2.5 ns"),
            (0.0, "0.0 ns"),
        ],
    )
    def test_units(self, seconds: float, expected: str) -> None:
        assert format_duration(seconds) == expected


class TestConsoleReporter:
    """Tests for ConsoleReporter.report()."""

    def test_report_contains_header(self) -> None:
        output = ConsoleReporter().report([make_benchmark_result()])

        assert "WHERE BENCHMARK" in output
        assert "Cases:" in output

    def test_report_contains_rows(self) -> None:
        results = [
            make_benchmark_result(size=10, allocation=Allocation.PREALLOCATE),
            make_benchmark_result(size=10, allocation=Allocation.GROW),
        ]

        output = ConsoleReporter().report(results)

        assert "Where/Small/Prealloc" in output
        assert "Where/Small/Grow" in output
        assert "PREALLOCATE" in output
        assert "GROW" in output
        assert "1.000 ms" in output  # best
        assert "2.000 ms" in output  # mean

    def test_report_empty(self) -> None:
        output = ConsoleReporter().report([])
        assert "No results" in output

    def test_custom_title(self) -> None:
        output = ConsoleReporter(ConsoleConfig(title="NIGHTLY")).report([])
        assert "NIGHTLY" in output

    def test_returns_string(self) -> None:
        assert isinstance(ConsoleReporter().report([make_benchmark_result()]), str)

    def test_not_a_base_reporter(self) -> None:
        """Returns str, so it stays outside the write-to-destination BaseReporter."""
        assert not isinstance(ConsoleReporter(), BaseReporter)
