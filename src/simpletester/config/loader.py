"""YAML loader and validation for run configuration files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from .models import REPORT_FORMATS, RunConfig

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "simpletester run configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "tests": {"type": "string", "minLength": 1},
        "filter": {"type": ["string", "null"]},
        "scheduler": {"type": "string", "minLength": 1},
        "color": {"type": "boolean"},
        "report": {"type": "string", "enum": list(REPORT_FORMATS)},
        "report_path": {"type": ["string", "null"]},
    },
}

_validator = Draft7Validator(CONFIG_SCHEMA)


def load_config(path: str) -> RunConfig:
    """Load and validate a run configuration file."""

    config_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Config file must contain a mapping at the top level")
    return parse_config(raw, base_dir=config_path.parent)


def parse_config(raw: Mapping[str, Any], *, base_dir: Path | None = None) -> RunConfig:
    errors = sorted(_validator.iter_errors(dict(raw)), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Config schema validation failed: {messages}")
    report_path = raw.get("report_path")
    if report_path and base_dir is not None and not Path(report_path).is_absolute():
        report_path = str(base_dir / report_path)
    return RunConfig(
        tests=raw.get("tests"),
        filter=raw.get("filter"),
        scheduler=raw.get("scheduler", "asyncio"),
        color=raw.get("color", True),
        report=raw.get("report", "terminal"),
        report_path=report_path,
        base_dir=base_dir,
    )
