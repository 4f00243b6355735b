"""Reporter interface definitions."""
from __future__ import annotations

from typing import List, Sequence

from simpletester.core.models import TestCase
from simpletester.core.results import CaseResult, RunSummary


class Reporter:
    """Interface for output renderers."""

    def on_test_start(self, index: int, case: TestCase) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_test_result(self, result: CaseResult) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, summary: RunSummary) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager(Reporter):
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def on_test_start(self, index: int, case: TestCase) -> None:
        for reporter in self._reporters:
            reporter.on_test_start(index, case)

    def on_test_result(self, result: CaseResult) -> None:
        for reporter in self._reporters:
            reporter.on_test_result(result)

    def on_complete(self, summary: RunSummary) -> None:
        for reporter in self._reporters:
            reporter.on_complete(summary)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
