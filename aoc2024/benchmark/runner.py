"""
Benchmark runner.

Runs each registered puzzle part a number of times, keeps the median
duration and collects the results in a ``BenchmarkReport`` that the caller
owns and passes along; there is no module-level result state.
"""

import logging
import statistics
from typing import Callable, Iterable, List, Optional

from ..algorithms.shortest_path import SolverConfig
from ..shared.configuration.settings import BenchmarkSettings
from ..shared.utils.logging_utils import get_context_logger
from ..shared.utils.performance_utils import PerformanceTracker, timing_context
from .registry import DaySolver, get_day, available_days, read_input
from .report import RunResult, render_table

logger = logging.getLogger(__name__)


class BenchmarkReport:
    """Accumulates run results for one report."""

    def __init__(self):
        self.results: List[RunResult] = []
        self.tracker = PerformanceTracker()

    def add(self, result: RunResult):
        self.results.append(result)

    def __len__(self):
        return len(self.results)

    @property
    def total_duration(self) -> float:
        return sum(result.duration_s for result in self.results)

    def render(self, slow_threshold_us: int = 1000) -> str:
        if not self.results:
            return "No results"
        return render_table(self.results, slow_threshold_us)


def part_name(day: int, part: str) -> str:
    return f"Day {day:02d} - Part {part.upper()}"


def invoke_timed(name: str, invoker: Callable[[], object], num_runs: int,
                 tracker: Optional[PerformanceTracker] = None) -> RunResult:
    """Invoke ``invoker`` ``num_runs`` times and report the median duration."""
    if num_runs <= 0:
        raise ValueError(f"num_runs must be positive, got {num_runs}")

    durations = []
    peak_mb = 0.0
    solution = None

    for _ in range(num_runs):
        with timing_context(name, log_result=False) as metrics:
            solution = invoker()
        durations.append(metrics.execution_time)
        peak_mb = max(peak_mb, metrics.memory_peak_mb)
        if tracker is not None:
            tracker.record(name, metrics)

    return RunResult(
        name=name,
        solution=str(solution),
        duration_s=statistics.median(durations),
        memory_peak_mb=peak_mb,
    )


def run_day(day: DaySolver, text: str, report: BenchmarkReport, num_runs: int,
            config: Optional[SolverConfig] = None, parts: Optional[Iterable[str]] = None) -> List[RunResult]:
    """Time the requested parts of ``day`` and add them to ``report``."""
    available = day.parts()
    selected = list(parts) if parts is not None else list(available)
    results = []

    for part in selected:
        if part not in available:
            raise KeyError(f"Day {day.day} has no part '{part}'")
        log = get_context_logger(__name__, day=day.day, part=part)
        solver = available[part]

        result = invoke_timed(
            part_name(day.day, part),
            lambda: solver(text, config=config),
            num_runs,
            tracker=report.tracker,
        )
        log.info(f"{result.solution} in {result.duration_s * 1e6:.0f}us")
        report.add(result)
        results.append(result)

    return results


def run_all(settings: BenchmarkSettings, config: Optional[SolverConfig] = None,
            report: Optional[BenchmarkReport] = None) -> BenchmarkReport:
    """Run every selected day and return the filled report."""
    report = report if report is not None else BenchmarkReport()
    days = settings.days if settings.days is not None else available_days()

    for day_number in days:
        day = get_day(day_number)
        text = read_input(day, settings.input_dir)
        run_day(day, text, report, settings.num_runs, config=config)

    report.tracker.log_summary()
    return report
