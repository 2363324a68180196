"""Reporters for benchmark results.

ConsoleReporter renders a rich table; JSONReporter uses stdlib only.
"""

from generic.application.reporters._base import BaseReporter
from generic.application.reporters.console import ConsoleConfig, ConsoleReporter
from generic.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
]
