"""Scheduler plugin loaded with SIMPLETESTER_PLUGINS=plugin.

    $ SIMPLETESTER_PLUGINS=plugin PYTHONPATH=examples/plugin_scheduler \
        simpletester run simpletester.self_tests:SELF_TESTS --scheduler tracing
"""
import click

from simpletester import ManualScheduler, scheduler_registry


class TracingScheduler(ManualScheduler):
    """Manual scheduler that echoes every turn it runs."""

    name = "tracing"

    def run_pending(self) -> int:
        ran = super().run_pending()
        if ran:
            click.echo(f"-- turn ran {ran} continuation(s)")
        return ran


def register() -> None:
    if TracingScheduler.name not in scheduler_registry:
        scheduler_registry.register(TracingScheduler.name, TracingScheduler)
