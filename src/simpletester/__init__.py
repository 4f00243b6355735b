"""simpletester package initialization."""
from __future__ import annotations

import importlib
import logging
import os

from .commands import CommandRegistry, command_registry, create_test_command
from .core import CaseResult, RunnerState, RunSummary, TestCase
from .core.runner import TestRunner
from .scheduling import AsyncioScheduler, ManualScheduler, Scheduler, scheduler_registry
from .version import __version__

__all__ = [
    "__version__",
    "bootstrap",
    "AsyncioScheduler",
    "CaseResult",
    "CommandRegistry",
    "ManualScheduler",
    "RunSummary",
    "RunnerState",
    "Scheduler",
    "TestCase",
    "TestRunner",
    "command_registry",
    "create_test_command",
    "scheduler_registry",
]

logger = logging.getLogger(__name__)

_BOOTSTRAPPED = False


def bootstrap() -> None:
    """Initialize simpletester (idempotent)."""

    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return
    _load_plugins()
    _BOOTSTRAPPED = True


def _load_plugins() -> None:
    plugin_env = os.environ.get("SIMPLETESTER_PLUGINS")
    if not plugin_env:
        return
    for item in plugin_env.split(","):
        module_name = item.strip()
        if not module_name:
            continue
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if callable(register):
            logger.debug("registering plugin %s", module_name)
            register()
