"""Reporting exports."""
from .base import ReportManager, Reporter
from .json_reporter import JsonReporter
from .terminal import LineSink, TerminalReporter

__all__ = [
    "ReportManager",
    "Reporter",
    "JsonReporter",
    "LineSink",
    "TerminalReporter",
]
