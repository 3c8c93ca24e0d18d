"""
Day 16: Reindeer Maze.

The reindeer starts on ``S`` facing east. Stepping forward costs 1 and
rotating 90 degrees in place costs 1000. Nodes are (cell, facing) pairs, so
the search runs over four copies of the maze.
"""

import logging
from typing import Iterator, Optional, Set

from ..algorithms.shortest_path import (
    GridStateEncoder,
    ShortestPathResult,
    SolverConfig,
    TURN_WEIGHT,
    UNIT_STEP_WEIGHT,
    reconstruct,
    solve,
)
from ..algorithms.shortest_path.successors import Edge
from .grid import Direction, Maze

logger = logging.getLogger(__name__)

MAX_WEIGHT = max(TURN_WEIGHT, UNIT_STEP_WEIGHT)


class ReindeerSuccessors:
    """Forward steps and in-place turns on a (cell, facing) encoded maze."""

    def __init__(self, maze: Maze, encoder: GridStateEncoder):
        self.encoder = encoder
        self.rows = maze.rows
        self.cols = maze.cols
        self._open = maze.open_mask.ravel().tolist()

    def __call__(self, node: int) -> Iterator[Edge]:
        row, col, state = self.encoder.decode(node)
        facing = Direction(state)

        d_row, d_col = facing.offset
        n_row = row + d_row
        n_col = col + d_col
        if 0 <= n_row < self.rows and 0 <= n_col < self.cols and self._open[n_row * self.cols + n_col]:
            yield self.encoder.encode(n_row, n_col, state), UNIT_STEP_WEIGHT

        for turn in facing.turns():
            yield self.encoder.encode(row, col, turn), TURN_WEIGHT


def find_cheapest_paths(maze: Maze, config: Optional[SolverConfig] = None):
    """Search from the start tile; targets are the end tile in any facing."""
    config = config or SolverConfig()
    encoder = GridStateEncoder(maze.rows, maze.cols, states=len(Direction), max_nodes=config.max_nodes)
    end_row, end_col = maze.end
    end_cell = end_row * maze.cols + end_col

    def is_end(node: int) -> bool:
        return node // encoder.states == end_cell

    source = encoder.encode(*maze.start, Direction.EAST)
    result = solve(
        [source],
        ReindeerSuccessors(maze, encoder),
        encoder.size,
        MAX_WEIGHT,
        is_target=is_end,
        config=config,
    )
    return encoder, result


def _require_path(result: ShortestPathResult) -> int:
    best = result.target_distance
    if best is None:
        raise ValueError("End tile is unreachable from the start tile")
    return best


def lowest_score(maze: Maze, config: Optional[SolverConfig] = None) -> int:
    _, result = find_cheapest_paths(maze, config)
    return _require_path(result)


def best_path_tiles(maze: Maze, config: Optional[SolverConfig] = None) -> Set[tuple]:
    """Every tile lying on at least one lowest-score path."""
    encoder, result = find_cheapest_paths(maze, config)
    _require_path(result)
    nodes = reconstruct(result.optimal_targets(), result)
    tiles = {encoder.cell(node) for node in nodes}
    logger.debug(f"{len(nodes)} optimal (tile, facing) states over {len(tiles)} tiles")
    return tiles


def part_a(text: str, config: Optional[SolverConfig] = None) -> int:
    return lowest_score(Maze.parse(text), config)


def part_b(text: str, config: Optional[SolverConfig] = None) -> int:
    return len(best_path_tiles(Maze.parse(text), config))
