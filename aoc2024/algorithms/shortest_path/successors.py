"""
Successor generators.

A successor generator is any callable ``node -> iterable of (node, weight)``.
Generators are puzzle specific and capture the grid/obstacle data they need.
Weights must lie in ``[0, max_weight]``; the bucket queue relies on it.
"""

from typing import Callable, Iterable, Iterator, Tuple

import numpy as np

from .config import UNIT_STEP_WEIGHT
from .encoding import GridStateEncoder
from .errors import InvariantViolation

Edge = Tuple[int, int]  # (successor node, weight)
SuccessorGenerator = Callable[[int], Iterable[Edge]]

# Row/column offsets for North, East, South, West
NEIGHBOUR_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def checked_successors(successors: SuccessorGenerator, max_weight: int) -> SuccessorGenerator:
    """Wrap a generator so every produced weight is validated."""

    def generate(node: int) -> Iterator[Edge]:
        for neighbour, weight in successors(node):
            if weight < 0:
                raise InvariantViolation(
                    f"Negative weight {weight} on edge {node} -> {neighbour}"
                )
            if weight > max_weight:
                raise InvariantViolation(
                    f"Weight {weight} on edge {node} -> {neighbour} exceeds max_weight {max_weight}"
                )
            yield neighbour, weight

    return generate


class FourNeighbourSuccessors:
    """Unit-weight moves between open cells of a 2-D grid.

    Args:
        open_mask: Boolean array, True where a cell may be entered
        encoder: Encoder with one state per cell
        weight: Cost of one step
    """

    def __init__(self, open_mask: np.ndarray, encoder: GridStateEncoder, weight: int = UNIT_STEP_WEIGHT):
        if open_mask.shape != (encoder.rows, encoder.cols):
            raise ValueError(
                f"Mask shape {open_mask.shape} does not match encoder grid "
                f"{(encoder.rows, encoder.cols)}"
            )
        if encoder.states != 1:
            raise ValueError("FourNeighbourSuccessors needs an encoder with a single state per cell")
        self.open_mask = open_mask
        self.encoder = encoder
        self.weight = weight
        # Python lists index faster than numpy scalars in the hot loop
        self._open = open_mask.ravel().tolist()

    def __call__(self, node: int) -> Iterator[Edge]:
        cols = self.encoder.cols
        row, col = divmod(node, cols)
        for d_row, d_col in NEIGHBOUR_OFFSETS:
            n_row = row + d_row
            n_col = col + d_col
            if 0 <= n_row < self.encoder.rows and 0 <= n_col < cols:
                neighbour = n_row * cols + n_col
                if self._open[neighbour]:
                    yield neighbour, self.weight
