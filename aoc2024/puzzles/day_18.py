"""
Day 18: RAM Run.

Bytes fall onto a square memory grid one at a time and corrupt the cell they
land on. Part A asks for the shortest walk from the top-left to the
bottom-right corner after a fixed number of bytes; part B for the first
byte that cuts the exit off completely.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from ..algorithms.shortest_path import (
    FourNeighbourSuccessors,
    GridStateEncoder,
    SolverConfig,
    UNIT_STEP_WEIGHT,
    solve,
)

logger = logging.getLogger(__name__)

GRID_SIZE = 71
NUM_FALLEN = 1024

Point = Tuple[int, int]  # (x, y) as written in the input


def parse_bytes(text: str) -> List[Point]:
    points = []
    for line_no, line in enumerate(text.strip().splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            x_str, y_str = line.split(',')
            points.append((int(x_str), int(y_str)))
        except ValueError:
            raise ValueError(f"Line {line_no}: expected 'X,Y', got {line!r}") from None
    return points


def path_length(points: List[Point], size: int, num_fallen: int,
                config: Optional[SolverConfig] = None) -> Optional[int]:
    """Steps from (0, 0) to the far corner, or None when the exit is cut off."""
    config = config or SolverConfig()
    open_mask = np.ones((size, size), dtype=bool)
    for x, y in points[:num_fallen]:
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"Byte ({x}, {y}) outside the {size}x{size} memory space")
        open_mask[y, x] = False

    encoder = GridStateEncoder(size, size, max_nodes=config.max_nodes)
    source = encoder.encode(0, 0)
    exit_node = encoder.encode(size - 1, size - 1)
    if not open_mask[0, 0] or not open_mask[size - 1, size - 1]:
        return None

    result = solve(
        [source],
        FourNeighbourSuccessors(open_mask, encoder),
        encoder.size,
        UNIT_STEP_WEIGHT,
        is_target=lambda node: node == exit_node,
        config=config,
    )
    return result.target_distance


def first_blocking_byte(points: List[Point], size: int,
                        config: Optional[SolverConfig] = None) -> Optional[Point]:
    """Binary search for the first byte after which no path exists."""
    low, high = 0, len(points)
    # Invariant: with ``low`` bytes fallen a path exists, with ``high`` it may not
    if path_length(points, size, high, config) is not None:
        return None

    while high - low > 1:
        middle = (low + high) // 2
        reachable = path_length(points, size, middle, config) is not None
        logger.debug(f"{middle} bytes fallen: {'path' if reachable else 'blocked'}")
        if reachable:
            low = middle
        else:
            high = middle

    return points[high - 1]


def part_a_configurable(text: str, size: int, num_fallen: int,
                        config: Optional[SolverConfig] = None) -> int:
    steps = path_length(parse_bytes(text), size, num_fallen, config)
    if steps is None:
        raise ValueError(f"Exit unreachable after {num_fallen} bytes")
    return steps


def part_b_configurable(text: str, size: int, config: Optional[SolverConfig] = None) -> str:
    blocking = first_blocking_byte(parse_bytes(text), size, config)
    if blocking is None:
        raise ValueError("No byte ever blocks the exit")
    return f"{blocking[0]},{blocking[1]}"


def part_a(text: str, config: Optional[SolverConfig] = None) -> int:
    return part_a_configurable(text, GRID_SIZE, NUM_FALLEN, config)


def part_b(text: str, config: Optional[SolverConfig] = None) -> str:
    return part_b_configurable(text, GRID_SIZE, config)
