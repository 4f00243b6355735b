"""Executor wiring configuration, tests, reporters and a scheduler together."""
from __future__ import annotations

import asyncio
import logging
import sys
from typing import List, Mapping, Optional

import click
from colorama import init as colorama_init

from simpletester.config import RunConfig
from simpletester.core import RunSummary, TestAction, compile_filter
from simpletester.core.runner import TestRunner
from simpletester.reporting import JsonReporter, LineSink, Reporter, TerminalReporter
from simpletester.scheduling import AsyncioScheduler, Scheduler, scheduler_registry
from simpletester.utils.importing import import_tests

logger = logging.getLogger(__name__)


def run_session(config: RunConfig, *, list_only: bool = False, sink: Optional[LineSink] = None) -> int:
    """Run the configured tests; returns process exit code (0 success, 1 failures)."""

    echo = sink or click.echo
    if config.tests is None:
        raise ValueError("No tests given: pass a 'module:attr' path or set 'tests' in the config file")
    if config.base_dir is not None and str(config.base_dir) not in sys.path:
        sys.path.insert(0, str(config.base_dir))
    tests = import_tests(config.tests)
    matches = compile_filter(config.filter)
    selected = [name for name in tests if matches(name)]
    if list_only:
        for name in selected:
            echo(name)
        return 0
    if not selected:
        echo("No tests matched the provided filter.")
        return 1
    if config.color:
        colorama_init()
    scheduler = scheduler_registry.create(config.scheduler)
    runner = TestRunner(scheduler=scheduler, reporter=_build_reporter(config, sink))
    summary = execute(runner, tests, config.filter)
    if summary is None:
        echo(f"Run stalled: {len(runner.results)}/{len(runner.tests)} test(s) reported.")
        return 1
    return 0 if summary.ok else 1


def execute(
    runner: TestRunner, tests: Mapping[str, TestAction], filter: Optional[str] = None
) -> Optional[RunSummary]:
    """Register ``tests`` on ``runner`` and drive its scheduler until the run ends.

    Returns ``None`` when the scheduler ran dry before every test reported.
    """

    scheduler = runner.scheduler
    if isinstance(scheduler, AsyncioScheduler):
        return asyncio.run(_execute_async(runner, tests, filter))
    return _execute_drained(runner, scheduler, tests, filter)


async def _execute_async(
    runner: TestRunner, tests: Mapping[str, TestAction], filter: Optional[str]
) -> RunSummary:
    loop = asyncio.get_running_loop()
    done: asyncio.Future[RunSummary] = loop.create_future()

    def _on_complete(summary: RunSummary) -> None:
        if not done.done():
            done.set_result(summary)

    def _on_error(_: asyncio.AbstractEventLoop, context: dict) -> None:
        # actions started by the scheduler raise inside loop callbacks
        if not done.done():
            done.set_exception(context.get("exception") or RuntimeError(context["message"]))

    loop.set_exception_handler(_on_error)
    runner.add_listener(_on_complete)
    try:
        runner.register_filtered(tests, filter)
        runner.start()
        return await done
    finally:
        runner.remove_listener(_on_complete)


def _execute_drained(
    runner: TestRunner, scheduler: Scheduler, tests: Mapping[str, TestAction], filter: Optional[str]
) -> Optional[RunSummary]:
    run_until_idle = getattr(scheduler, "run_until_idle", None)
    if not callable(run_until_idle):
        raise TypeError(
            f"Scheduler {type(scheduler).__name__} cannot be driven from the command line; "
            "it needs a run_until_idle() method"
        )
    summaries: List[RunSummary] = []
    collect = summaries.append
    runner.add_listener(collect)
    try:
        runner.register_filtered(tests, filter)
        runner.start()
        turns = run_until_idle()
        logger.debug("scheduler went idle after %d turn(s)", turns)
    finally:
        runner.remove_listener(collect)
    return summaries[0] if summaries else None


def _build_reporter(config: RunConfig, sink: Optional[LineSink]) -> Reporter:
    if config.report == "json":
        return JsonReporter(config.report_path)
    return TerminalReporter(use_color=config.color, sink=sink)
