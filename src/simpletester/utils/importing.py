"""Utility helpers for dynamic imports."""
from __future__ import annotations

import importlib
from typing import Any, Mapping


def import_string(path: str) -> Any:
    """Return the attribute at the given dotted path.

    Supports ``module:attr`` or ``module.attr`` syntax.
    """

    if not path:
        raise ValueError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, sep, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"Invalid import path '{path}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise AttributeError(f"Module '{module_name}' has no attribute '{attr}'") from exc


def import_tests(path: str) -> Mapping[str, Any]:
    """Import a mapping of test name to action, calling it first if it is a factory."""

    target = import_string(path)
    if callable(target) and not isinstance(target, Mapping):
        target = target()
    if not isinstance(target, Mapping):
        raise TypeError(f"'{path}' must be a mapping of test name to action, got {type(target).__name__}")
    for name, action in target.items():
        if not isinstance(name, str):
            raise TypeError(f"Test names in '{path}' must be strings, got {name!r}")
        if not callable(action):
            raise TypeError(f"Test '{name}' in '{path}' is not callable")
    return target
