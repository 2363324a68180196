#!/usr/bin/env python3
"""Benchmark script for where() allocation strategies.

Prints a rich table and writes results in JSON format compatible with
github-action-benchmark.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from generic.application.reporters import ConsoleReporter, JSONReporter
from generic.application.services import BenchmarkService
from generic.domain.model.configuration import DEFAULT_SIZES, BenchmarkConfig
from generic.logger import setup_logger


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run where() benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=list(DEFAULT_SIZES),
        help="Input lengths to measure",
    )
    parser.add_argument("--repeat", type=int, default=5, help="Samples per case")
    parser.add_argument("--number", type=int, default=10, help="Calls per sample")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    args = parser.parse_args()

    setup_logger(level=args.log_level)
    config = BenchmarkConfig(sizes=tuple(args.sizes), repeat=args.repeat, number=args.number)

    results = BenchmarkService().run(config)

    print(ConsoleReporter().report(results))
    with args.output.open("w", encoding="utf-8") as output:
        JSONReporter(output).report(results)
    print(f"Benchmark results written to {args.output}")


if __name__ == "__main__":
    main()
