"""Name filtering used when batch-registering tests."""
from __future__ import annotations

import re
from typing import Callable, Optional


def compile_filter(pattern: Optional[str]) -> Callable[[str], bool]:
    """Return a predicate matching test names against ``pattern``.

    A missing or blank pattern matches every name. Otherwise the pattern is a
    regular expression searched anywhere in the name, so plain substrings work
    as well.
    """

    if pattern is None or not pattern.strip():
        return lambda name: True
    try:
        regex = re.compile(pattern.strip())
    except re.error as exc:
        raise ValueError(f"Invalid test filter '{pattern}': {exc}") from exc
    return lambda name: regex.search(name) is not None
