"""Result data structures produced by the test runner."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .models import TestCase


@dataclass(frozen=True)
class CaseResult:
    """Outcome of a single reported test."""

    index: int
    case: TestCase
    passed: bool

    @property
    def status(self) -> str:
        return "passed" if self.passed else "failed"


@dataclass(frozen=True)
class RunSummary:
    """Snapshot of a finished run, taken before the runner resets."""

    results: Tuple[CaseResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0
