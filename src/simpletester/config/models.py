"""Data models for run configuration files."""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

REPORT_FORMATS = ("terminal", "json")


@dataclass(frozen=True)
class RunConfig:
    tests: Optional[str] = None
    filter: Optional[str] = None
    scheduler: str = "asyncio"
    color: bool = True
    report: str = "terminal"
    report_path: Optional[str] = None
    base_dir: Optional[Path] = None

    def merged(self, **overrides: Any) -> "RunConfig":
        """Return a copy with every non-``None`` override applied."""

        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)
