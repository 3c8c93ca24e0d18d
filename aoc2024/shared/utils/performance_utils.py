"""Performance monitoring utilities."""
import time
import logging
import psutil
from contextlib import contextmanager
from typing import Generator, Dict, Any
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class PerformanceMetrics:
    """Container for performance metrics."""
    execution_time: float = 0.0
    memory_start_mb: float = 0.0
    memory_end_mb: float = 0.0
    memory_peak_mb: float = 0.0
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def memory_delta_mb(self) -> float:
        """Memory change during execution."""
        return self.memory_end_mb - self.memory_start_mb

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary."""
        return {
            'execution_time': self.execution_time,
            'memory_start_mb': self.memory_start_mb,
            'memory_end_mb': self.memory_end_mb,
            'memory_peak_mb': self.memory_peak_mb,
            'memory_delta_mb': self.memory_delta_mb,
            **self.additional_metrics
        }


def _rss_mb(process: psutil.Process) -> float:
    return process.memory_info().rss / 1024 / 1024


@contextmanager
def timing_context(name: str = "operation", log_result: bool = True) -> Generator[PerformanceMetrics, None, None]:
    """Context manager for timing operations.

    Args:
        name: Name of the operation being timed
        log_result: Whether to log the timing result

    Yields:
        PerformanceMetrics object that gets populated during execution
    """
    metrics = PerformanceMetrics()
    process = psutil.Process()

    try:
        metrics.memory_start_mb = _rss_mb(process)
        metrics.memory_peak_mb = metrics.memory_start_mb
    except psutil.Error:
        # Memory tracking is best effort
        pass

    start_time = time.perf_counter()
    try:
        yield metrics
    finally:
        metrics.execution_time = time.perf_counter() - start_time

        try:
            metrics.memory_end_mb = _rss_mb(process)
            metrics.memory_peak_mb = max(metrics.memory_peak_mb, metrics.memory_end_mb)
        except psutil.Error:
            pass

        if log_result:
            logger.info(f"{name} completed in {metrics.execution_time * 1e6:.0f}us")
            if metrics.memory_start_mb > 0:
                logger.debug(f"{name} memory: {metrics.memory_delta_mb:+.1f}MB "
                             f"(peak: {metrics.memory_peak_mb:.1f}MB)")


class PerformanceTracker:
    """Class for tracking performance across multiple operations."""

    def __init__(self):
        self.total_time: Dict[str, float] = {}
        self.peak_memory_mb: Dict[str, float] = {}
        self.operation_counts: Dict[str, int] = {}

    def record(self, name: str, metrics: PerformanceMetrics):
        """Fold one measurement into the running totals for ``name``."""
        self.total_time[name] = self.total_time.get(name, 0.0) + metrics.execution_time
        self.peak_memory_mb[name] = max(self.peak_memory_mb.get(name, 0.0), metrics.memory_peak_mb)
        self.operation_counts[name] = self.operation_counts.get(name, 0) + 1

    @contextmanager
    def track_operation(self, name: str, log_result: bool = False):
        """Track a named operation.

        Args:
            name: Operation name
            log_result: Whether to log individual results
        """
        with timing_context(name, log_result) as metrics:
            yield metrics
        self.record(name, metrics)

    def get_summary(self) -> Dict[str, Any]:
        """Get performance summary."""
        summary = {}

        for name, count in self.operation_counts.items():
            total = self.total_time[name]
            summary[name] = {
                'count': count,
                'avg_execution_time': total / count,
                'total_execution_time': total,
                'peak_memory_mb': self.peak_memory_mb[name],
            }

        return summary

    def log_summary(self):
        """Log performance summary."""
        logger.info("Performance Summary:")
        for name, stats in self.get_summary().items():
            logger.info(f"  {name}: "
                        f"count={stats['count']} "
                        f"avg_time={stats['avg_execution_time']:.6f}s "
                        f"total_time={stats['total_execution_time']:.6f}s "
                        f"peak_memory={stats['peak_memory_mb']:.1f}MB")

    def reset(self):
        """Reset all tracked metrics."""
        self.total_time.clear()
        self.peak_memory_mb.clear()
        self.operation_counts.clear()
