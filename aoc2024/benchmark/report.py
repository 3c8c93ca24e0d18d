"""Plain-text results table."""

from dataclasses import dataclass
from typing import List

SLOW_MARKER = "!"


@dataclass
class RunResult:
    """Median timing of one puzzle part."""
    name: str
    solution: str
    duration_s: float
    memory_peak_mb: float = 0.0


def _duration_us(result: RunResult) -> int:
    return int(round(result.duration_s * 1e6))


def render_table(results: List[RunResult], slow_threshold_us: int = 1000) -> str:
    """Render name / solution / duration rows followed by a total row.

    Rows slower than ``slow_threshold_us`` are flagged with ``!``.
    """
    total = RunResult(name="Total", solution="", duration_s=sum(r.duration_s for r in results))
    rows = list(results) + [total]

    width_name = max(len(r.name) for r in rows) + 1  # trailing ':'
    width_solution = max(len(r.solution) for r in rows)
    width_time = max(len(str(_duration_us(r))) for r in rows)

    lines = []
    for index, result in enumerate(rows):
        if index == len(rows) - 1:
            lines.append("=" * (width_name + width_solution + width_time + 9))

        duration_us = _duration_us(result)
        marker = SLOW_MARKER if duration_us > slow_threshold_us else ""
        lines.append(
            f"{result.name + ':':<{width_name}} "
            f"{result.solution:<{width_solution}}   "
            f"{duration_us:>{width_time}} us{marker:>2}"
        )

    return "\n".join(lines)
