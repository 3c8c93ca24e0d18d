"""Timing harness for the puzzle solvers."""

from .registry import DAYS, DaySolver, available_days, get_day, read_input
from .report import RunResult, render_table
from .runner import BenchmarkReport, invoke_timed, run_all, run_day

__all__ = [
    'DAYS',
    'DaySolver',
    'available_days',
    'get_day',
    'read_input',
    'RunResult',
    'render_table',
    'BenchmarkReport',
    'invoke_timed',
    'run_all',
    'run_day',
]
