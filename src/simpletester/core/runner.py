"""Test runner driving callback-reporting tests one at a time."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from simpletester.reporting.base import Reporter
from simpletester.reporting.terminal import TerminalReporter
from simpletester.scheduling import AsyncioScheduler, Scheduler

from .filters import compile_filter
from .models import ReportCallback, RunnerState, RunState, TestAction, TestCase
from .results import CaseResult, RunSummary

logger = logging.getLogger(__name__)

SummaryListener = Callable[[RunSummary], None]


class TestRunner:
    """Executes registered tests sequentially in registration order.

    Each test receives a report callback. The runner starts test ``i + 1``
    only after test ``i`` has reported, and always on a later turn obtained
    from the scheduler. Once every test has reported the summary is emitted
    and the queue is cleared, leaving the runner ready for another round.

    A test that never reports leaves the runner in ``RUNNING`` forever.
    Exceptions raised by an action, a reporter or the scheduler abandon the
    round: the queue is cleared, the runner returns to ``IDLE`` and the
    exception propagates to whoever invoked it.

    The default :class:`AsyncioScheduler` needs a running event loop by the
    time the first test reports. Hosts without one should pass a
    :class:`~simpletester.scheduling.ManualScheduler`.
    """

    __test__ = False  # not a pytest class

    def __init__(
        self,
        *,
        scheduler: Optional[Scheduler] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self._scheduler = scheduler or AsyncioScheduler()
        self._reporter = reporter or TerminalReporter()
        self._run = RunState()
        self._state = RunnerState.IDLE
        self._round = 0
        self._listeners: List[SummaryListener] = []

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def tests(self) -> Tuple[TestCase, ...]:
        return tuple(self._run.queue)

    @property
    def results(self) -> Dict[int, bool]:
        return dict(self._run.results)

    def register(self, name: str, action: TestAction) -> None:
        """Queue a test for the next run. Duplicate names are allowed."""

        self._run.queue.append(TestCase(name=name, action=action))

    def register_filtered(self, tests: Mapping[str, TestAction], filter: Optional[str] = None) -> int:
        """Register the entries of ``tests`` whose name matches ``filter``.

        Returns the number of tests registered.
        """

        matches = compile_filter(filter)
        count = 0
        for name, action in tests.items():
            if matches(name):
                self.register(name, action)
                count += 1
        logger.debug("registered %d of %d test(s) with filter %r", count, len(tests), filter)
        return count

    def add_listener(self, listener: SummaryListener) -> None:
        """Call ``listener`` with the summary at the end of every run."""

        self._listeners.append(listener)

    def remove_listener(self, listener: SummaryListener) -> None:
        self._listeners.remove(listener)

    def start(self) -> None:
        if self._state is RunnerState.RUNNING:
            logger.warning("start() ignored: a run is already in progress")
            return
        self._state = RunnerState.RUNNING
        self._round += 1
        if not self._run.queue:
            self._finalize()
            return
        self._execute(1)

    def _execute(self, index: int) -> None:
        round_id = self._round
        case = self._run.case_at(index)
        try:
            self._reporter.on_test_start(index, case)
            case.action(self._reporter_for(index))
        except Exception:
            self._abandon(round_id, f"test {index} ({case.name}) raised")
            raise

    def _resume(self, round_id: int, index: int) -> None:
        if round_id != self._round or self._state is not RunnerState.RUNNING:
            logger.debug("dropping continuation for test %d of an abandoned run", index)
            return
        self._execute(index)

    def _reporter_for(self, index: int) -> ReportCallback:
        round_id = self._round

        def report(outcome: Any = None) -> None:
            self._report(round_id, index, outcome)

        return report

    def _report(self, round_id: int, index: int, outcome: Any) -> None:
        if round_id != self._round or self._state is not RunnerState.RUNNING:
            logger.warning("ignoring report for test %d from a finished run", index)
            return
        if index in self._run.results:
            logger.warning(
                "ignoring repeated report for test %d (%s)", index, self._run.case_at(index).name
            )
            return
        passed = outcome is True
        case = self._run.case_at(index)
        self._reporter.on_test_result(CaseResult(index=index, case=case, passed=passed))
        self._run.results[index] = passed
        if self._run.is_complete():
            self._finalize()
            return
        next_index = index + 1
        try:
            self._scheduler.defer(lambda: self._resume(round_id, next_index))
        except Exception:
            self._abandon(round_id, f"could not schedule test {next_index}")
            raise

    def _abandon(self, round_id: int, reason: str) -> None:
        if round_id != self._round or self._state is not RunnerState.RUNNING:
            return
        logger.warning(
            "%s; abandoning the run after %d of %d test(s)",
            reason,
            len(self._run.results),
            len(self._run.queue),
        )
        self._run.reset()
        self._state = RunnerState.IDLE

    def _finalize(self) -> RunSummary:
        summary = RunSummary(
            results=tuple(
                CaseResult(index=index, case=case, passed=self._run.results.get(index, False))
                for index, case in enumerate(self._run.queue, start=1)
            )
        )
        try:
            self._reporter.on_complete(summary)
        finally:
            self._run.reset()
            self._state = RunnerState.IDLE
        for listener in list(self._listeners):
            listener(summary)
        return summary
