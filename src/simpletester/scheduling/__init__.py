"""Scheduling port exports."""
from .asyncio_scheduler import AsyncioScheduler
from .base import Continuation, Scheduler, SchedulerRegistry, scheduler_registry
from .manual import ManualScheduler


def register_builtin_schedulers() -> None:
    for name, factory in (("manual", ManualScheduler), ("asyncio", AsyncioScheduler)):
        if name not in scheduler_registry:
            scheduler_registry.register(name, factory)


register_builtin_schedulers()

__all__ = [
    "AsyncioScheduler",
    "Continuation",
    "ManualScheduler",
    "Scheduler",
    "SchedulerRegistry",
    "scheduler_registry",
    "register_builtin_schedulers",
]
