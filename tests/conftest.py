from __future__ import annotations

from typing import List

import pytest

from simpletester import bootstrap
from simpletester.core.runner import TestRunner
from simpletester.reporting import TerminalReporter
from simpletester.scheduling import ManualScheduler


@pytest.fixture(scope="session", autouse=True)
def setup_simpletester() -> None:
    """Bootstrap plugins once for the entire test session."""

    bootstrap()


@pytest.fixture
def lines() -> List[str]:
    return []


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def runner(scheduler: ManualScheduler, lines: List[str]) -> TestRunner:
    return TestRunner(scheduler=scheduler, reporter=TerminalReporter(use_color=False, sink=lines.append))
