"""Terminal reporter streaming progress lines and the final summary."""
from __future__ import annotations

from typing import Callable, Optional

import click
from colorama import Fore, Style

from simpletester.core.models import TestCase
from simpletester.core.results import CaseResult, RunSummary

from .base import Reporter

LineSink = Callable[[str], None]

STATUS_COLORS = {
    "passed": Fore.GREEN,
    "failed": Fore.RED,
}


class TerminalReporter(Reporter):
    """Human-readable reporter writing one line per event to a sink."""

    def __init__(self, *, use_color: bool = True, sink: Optional[LineSink] = None) -> None:
        self._use_color = use_color
        self._sink: LineSink = sink or click.echo

    def on_test_start(self, index: int, case: TestCase) -> None:
        self._sink(f"{self._styled(f'Start test {index}', Fore.YELLOW)} {case.name}")

    def on_test_result(self, result: CaseResult) -> None:
        self._sink(f"{self._styled(f'Test {result.index}', Fore.YELLOW)} {self._status(result)}")

    def on_complete(self, summary: RunSummary) -> None:
        self._sink("Test results:")
        for result in summary.results:
            self._sink(f"{self._status(result)}: {result.case.name}")
        self._sink(f"Total {summary.passed}/{summary.total} tests passed.")

    def _status(self, result: CaseResult) -> str:
        return self._styled(result.status.upper(), STATUS_COLORS[result.status])

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"
