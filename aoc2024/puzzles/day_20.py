"""
Day 20: Race Condition.

A single cheat lets the program pass through walls for up to N picoseconds.
Every cheat is identified by its start and end cell; it is worth counting
when the race through it is at least ``min_saving`` faster than the honest
shortest path.

Distances from the start and from the end come from two independent
engine runs. Cheats are then counted per offset with whole-grid numpy
arithmetic instead of enumerating paths.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from ..algorithms.shortest_path import (
    UNREACHABLE,
    FourNeighbourSuccessors,
    GridStateEncoder,
    SolverConfig,
    UNIT_STEP_WEIGHT,
    solve,
)
from .grid import Coord, Maze

logger = logging.getLogger(__name__)

MIN_TIME_SAVING = 100
SHORT_CHEAT = 2
LONG_CHEAT = 20

# Stand-in for unreachable cells; three of these still fit in an int64
_FAR = np.iinfo(np.int64).max // 4


def flood_fill(maze: Maze, origin: Coord, config: Optional[SolverConfig] = None) -> np.ndarray:
    """Distance from ``origin`` to every cell, ``UNREACHABLE`` for walls."""
    config = config or SolverConfig()
    encoder = GridStateEncoder(maze.rows, maze.cols, max_nodes=config.max_nodes)
    result = solve(
        [encoder.encode(*origin)],
        FourNeighbourSuccessors(maze.open_mask, encoder),
        encoder.size,
        UNIT_STEP_WEIGHT,
        config=config,
    )
    return result.distances.reshape(maze.rows, maze.cols)


def flood_fills(maze: Maze, config: Optional[SolverConfig] = None,
                max_workers: int = 2) -> Tuple[np.ndarray, np.ndarray]:
    """Distances from the start and from the end, computed concurrently."""
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        from_start = executor.submit(flood_fill, maze, maze.start, config)
        from_end = executor.submit(flood_fill, maze, maze.end, config)
        return from_start.result(), from_end.result()


def cheat_offsets(max_distance: int) -> List[Tuple[int, int, int]]:
    """All (d_row, d_col, manhattan) offsets with 0 < manhattan <= max_distance."""
    offsets = []
    for d_row in range(-max_distance, max_distance + 1):
        span = max_distance - abs(d_row)
        for d_col in range(-span, span + 1):
            distance = abs(d_row) + abs(d_col)
            if distance > 0:
                offsets.append((d_row, d_col, distance))
    offsets.sort(key=lambda item: (item[2], item[0], item[1]))
    return offsets


def count_cheats(maze: Maze, min_saving: int, max_cheat: int,
                 config: Optional[SolverConfig] = None, max_workers: int = 2) -> int:
    from_start, from_end = flood_fills(maze, config, max_workers)

    base = int(from_start[maze.end])
    if base == UNREACHABLE:
        raise ValueError("End tile is unreachable from the start tile")

    budget = base - min_saving
    if budget < 0:
        return 0

    dist_start = np.where(from_start == UNREACHABLE, _FAR, from_start)
    dist_end = np.where(from_end == UNREACHABLE, _FAR, from_end)
    rows, cols = maze.rows, maze.cols

    total = 0
    for d_row, d_col, distance in cheat_offsets(max_cheat):
        if abs(d_row) >= rows or abs(d_col) >= cols:
            continue
        # Cheat starts inside [r0, r1) x [c0, c1) and ends shifted by the offset
        r0, r1 = max(0, -d_row), rows - max(0, d_row)
        c0, c1 = max(0, -d_col), cols - max(0, d_col)
        start_part = dist_start[r0:r1, c0:c1]
        end_part = dist_end[r0 + d_row:r1 + d_row, c0 + d_col:c1 + d_col]
        total += int(np.count_nonzero(start_part + end_part + distance <= budget))

    logger.debug(f"base={base} max_cheat={max_cheat} min_saving={min_saving}: {total} cheats")
    return total


def solve_configurable(text: str, min_saving: int, max_cheat: int,
                       config: Optional[SolverConfig] = None) -> int:
    return count_cheats(Maze.parse(text), min_saving, max_cheat, config)


def part_a(text: str, config: Optional[SolverConfig] = None) -> int:
    return solve_configurable(text, MIN_TIME_SAVING, SHORT_CHEAT, config)


def part_b(text: str, config: Optional[SolverConfig] = None) -> int:
    return solve_configurable(text, MIN_TIME_SAVING, LONG_CHEAT, config)
