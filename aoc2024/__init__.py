"""aoc2024 - Grid search puzzle solvers built on a bounded-weight shortest-path engine."""

__version__ = "0.1.0"
__description__ = "Grid search puzzle solvers built on a bounded-weight shortest-path engine"

# Engine exports
from .algorithms.shortest_path import (
    UNREACHABLE,
    BucketDijkstra,
    BucketQueue,
    EncodingOverflow,
    GridStateEncoder,
    InvariantViolation,
    ShortestPathResult,
    SolverConfig,
    reconstruct,
    reconstruct_edges,
    solve,
)

# Configuration
from .shared.configuration.settings import ApplicationSettings, load_settings

# Harness
from .benchmark import DAYS, BenchmarkReport, get_day, run_all

__all__ = [
    # Version info
    "__version__", "__description__",

    # Engine
    "UNREACHABLE", "BucketDijkstra", "BucketQueue", "EncodingOverflow",
    "GridStateEncoder", "InvariantViolation", "ShortestPathResult",
    "SolverConfig", "reconstruct", "reconstruct_edges", "solve",

    # Configuration
    "ApplicationSettings", "load_settings",

    # Harness
    "DAYS", "BenchmarkReport", "get_day", "run_all",
]
