"""Slash-style command surface binding test suites to a runner.

A command such as ``/simpletester-test`` is registered under a unique
namespace. Dispatching ``"/simpletester-test al"`` batch-registers the bound
tests whose names match ``al`` and starts the run.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from simpletester.core.models import TestAction
from simpletester.core.runner import TestRunner

logger = logging.getLogger(__name__)

CommandHandler = Callable[[str], None]


class CommandRegistry:
    """Maps command names to handlers, one command per namespace."""

    def __init__(self) -> None:
        self._commands: Dict[str, str] = {}
        self._handlers: Dict[str, CommandHandler] = {}

    def register(self, command: str, namespace: str, handler: CommandHandler) -> None:
        if not command.startswith("/"):
            raise ValueError(f"Command '{command}' must start with '/'")
        if namespace in self._handlers:
            raise ValueError(f"Namespace '{namespace}' already registered")
        if command in self._commands:
            raise ValueError(f"Command '{command}' already bound to namespace '{self._commands[command]}'")
        self._commands[command] = namespace
        self._handlers[namespace] = handler

    def dispatch(self, text: str) -> None:
        """Run the command at the start of ``text`` with the rest as its argument."""

        command, _, argument = text.strip().partition(" ")
        try:
            namespace = self._commands[command]
        except KeyError as exc:
            raise KeyError(f"Unknown command '{command}'") from exc
        logger.debug("dispatching %s (%s) with argument %r", command, namespace, argument)
        self._handlers[namespace](argument.strip())

    def unregister(self, namespace: str) -> None:
        self._handlers.pop(namespace)
        for command, owner in list(self._commands.items()):
            if owner == namespace:
                del self._commands[command]

    def commands(self) -> Iterable[Tuple[str, str]]:
        return tuple(self._commands.items())


command_registry = CommandRegistry()


def create_test_command(
    command: str,
    namespace: str,
    tests: Mapping[str, TestAction],
    *,
    runner: TestRunner,
    registry: Optional[CommandRegistry] = None,
) -> CommandHandler:
    """Bind ``command`` so that invoking it runs ``tests`` on ``runner``.

    The command argument, when present, filters the tests by name.
    """

    def handler(filter: str) -> None:
        runner.register_filtered(tests, filter or None)
        runner.start()

    (registry or command_registry).register(command, namespace, handler)
    return handler
