"""Core data models describing registered tests and per-run state."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List

ReportCallback = Callable[[Any], None]
TestAction = Callable[[ReportCallback], None]


class RunnerState(Enum):
    """Lifecycle state of a :class:`~simpletester.core.runner.TestRunner`."""

    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class TestCase:
    """A named test whose action eventually invokes its report callback."""

    __test__ = False  # not a pytest class

    name: str
    action: TestAction


@dataclass
class RunState:
    """Queue of registered tests and the results reported so far."""

    queue: List[TestCase] = field(default_factory=list)
    results: Dict[int, bool] = field(default_factory=dict)

    def case_at(self, index: int) -> TestCase:
        return self.queue[index - 1]

    def is_complete(self) -> bool:
        return len(self.results) == len(self.queue)

    def reset(self) -> None:
        self.queue = []
        self.results = {}
