"""Scheduling port abstractions."""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable

Continuation = Callable[[], None]


class Scheduler:
    """Runs continuations on a later turn of the host's event loop.

    Implementations guarantee that every deferred continuation runs exactly
    once, never inline from :meth:`defer`, and in submission order.
    """

    name: str = ""

    def defer(self, continuation: Continuation) -> None:  # pragma: no cover - interface
        raise NotImplementedError


SchedulerFactory = Callable[..., Scheduler]


class SchedulerRegistry:
    """Registry of scheduler factories keyed by name."""

    def __init__(self) -> None:
        self._factories: Dict[str, SchedulerFactory] = {}

    def register(self, name: str, factory: SchedulerFactory) -> None:
        if name in self._factories:
            raise ValueError(f"Scheduler '{name}' already registered")
        self._factories[name] = factory

    def create(self, name: str, **kwargs: Any) -> Scheduler:
        try:
            factory = self._factories[name]
        except KeyError as exc:
            available = ", ".join(sorted(self._factories)) or "<none>"
            raise KeyError(f"No scheduler registered as {name!r} (available: {available})") from exc
        return factory(**kwargs)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def names(self) -> Iterable[str]:
        return tuple(self._factories.keys())


scheduler_registry = SchedulerRegistry()
