"""
Text grids and compass directions shared by the maze puzzles.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import numpy as np

Coord = Tuple[int, int]  # (row, col)

WALL = '#'
START = 'S'
END = 'E'


class Direction(IntEnum):
    """Facing directions; the value doubles as the encoder state."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def offset(self) -> Coord:
        return _OFFSETS[self]

    def turns(self) -> Tuple["Direction", "Direction"]:
        """The two directions reached by a 90 degree turn."""
        return Direction((self + 1) % 4), Direction((self + 3) % 4)

    def reverse(self) -> "Direction":
        return Direction((self + 2) % 4)


_OFFSETS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


@dataclass
class Maze:
    """Rectangular character grid with a start and an end cell."""
    cells: np.ndarray
    start: Coord
    end: Coord

    @classmethod
    def parse(cls, text: str) -> "Maze":
        lines = [line for line in text.strip().splitlines() if line.strip()]
        if not lines:
            raise ValueError("Maze input is empty")

        width = len(lines[0])
        for row, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"Maze row {row} has width {len(line)}, expected {width}")

        cells = np.array([list(line) for line in lines], dtype='<U1')

        starts = np.argwhere(cells == START)
        ends = np.argwhere(cells == END)
        if len(starts) != 1 or len(ends) != 1:
            raise ValueError(
                f"Maze needs exactly one '{START}' and one '{END}', "
                f"found {len(starts)} and {len(ends)}"
            )

        return cls(
            cells=cells,
            start=tuple(int(v) for v in starts[0]),
            end=tuple(int(v) for v in ends[0]),
        )

    @property
    def rows(self) -> int:
        return self.cells.shape[0]

    @property
    def cols(self) -> int:
        return self.cells.shape[1]

    @property
    def open_mask(self) -> np.ndarray:
        """True for every cell that is not a wall."""
        return self.cells != WALL
