"""Core models and helpers exposed at the package level."""
from .filters import compile_filter
from .models import ReportCallback, RunnerState, RunState, TestAction, TestCase
from .results import CaseResult, RunSummary

__all__ = [
    "CaseResult",
    "ReportCallback",
    "RunState",
    "RunSummary",
    "RunnerState",
    "TestAction",
    "TestCase",
    "compile_filter",
]
