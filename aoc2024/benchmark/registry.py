"""
Day registry.

Closed table from day number to the functions solving its two parts. The
runner and the CLI look days up here; nothing is discovered at runtime.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from ..puzzles import day_16, day_18, day_20

Answer = Union[int, str]
PartSolver = Callable[..., Answer]  # (text, config=None) -> answer


@dataclass(frozen=True)
class DaySolver:
    """Uniform entry point for one day's puzzle."""
    day: int
    title: str
    part_a: PartSolver
    part_b: Optional[PartSolver] = None

    @property
    def input_name(self) -> str:
        return f"day_{self.day:02d}.txt"

    def parts(self) -> Dict[str, PartSolver]:
        parts = {"a": self.part_a}
        if self.part_b is not None:
            parts["b"] = self.part_b
        return parts


DAYS: Dict[int, DaySolver] = {
    16: DaySolver(16, "Reindeer Maze", day_16.part_a, day_16.part_b),
    18: DaySolver(18, "RAM Run", day_18.part_a, day_18.part_b),
    20: DaySolver(20, "Race Condition", day_20.part_a, day_20.part_b),
}


def get_day(day: int) -> DaySolver:
    try:
        return DAYS[day]
    except KeyError:
        raise KeyError(f"Day {day} is not registered (available: {available_days()})") from None


def available_days() -> List[int]:
    return sorted(DAYS)


def read_input(day: DaySolver, input_dir: Union[str, Path]) -> str:
    """Read the puzzle input for ``day`` from ``input_dir``."""
    path = Path(input_dir) / day.input_name
    if not path.is_file():
        raise FileNotFoundError(f"Input for day {day.day} not found at {path}")
    return path.read_text(encoding="utf-8")
