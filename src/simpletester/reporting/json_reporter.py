"""JSON reporter emitting structured run results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
import time
from typing import Any, Dict, Optional

import click
from jsonschema import validate

from simpletester.core.models import TestCase
from simpletester.core.results import CaseResult, RunSummary

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes results to a JSON file validated against the schema.

    Without a path the document is echoed to stdout instead.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None
        self._records: list[Dict[str, Any]] = []
        self._started: Dict[int, float] = {}
        self._run_start: Optional[float] = None

    def on_test_start(self, index: int, case: TestCase) -> None:
        now = time.perf_counter()
        if self._run_start is None:
            self._run_start = now
        self._started[index] = now

    def on_test_result(self, result: CaseResult) -> None:
        self._records.append(_case_to_dict(result, self._started.get(result.index)))

    def on_complete(self, summary: RunSummary) -> None:
        duration = time.perf_counter() - self._run_start if self._run_start is not None else 0.0
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "summary": {
                "total": summary.total,
                "passed": summary.passed,
                "failed": summary.failed,
                "duration_s": duration,
            },
            "cases": self._records,
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        self._records = []
        self._started = {}
        self._run_start = None
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def _case_to_dict(result: CaseResult, started: Optional[float]) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "index": result.index,
        "name": result.case.name,
        "status": result.status,
    }
    if started is not None:
        record["duration_ms"] = (time.perf_counter() - started) * 1000
    return record
