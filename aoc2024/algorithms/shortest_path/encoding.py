"""
State encoding for grid searches.

Maps a puzzle configuration (row, column and a small discrete state such as
a facing direction or a bitmask) onto a dense integer node id in
``[0, size)``. Node ids are laid out row-major with the state varying
fastest, so all states of one cell are adjacent in the distance table.
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple

from .config import MAX_NODES
from .errors import EncodingOverflow

logger = logging.getLogger(__name__)


class StateEncoder(ABC):
    """Bijection between puzzle configurations and node ids."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of node ids this encoder can hand out."""

    @abstractmethod
    def encode(self, *config) -> int:
        ...

    @abstractmethod
    def decode(self, node: int) -> Tuple:
        ...


class GridStateEncoder(StateEncoder):
    """Encode (row, col, state) triples for a rows x cols grid."""

    def __init__(self, rows: int, cols: int, states: int = 1, max_nodes: int = MAX_NODES):
        if rows <= 0 or cols <= 0 or states <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}x{states}")

        requested = rows * cols * states
        if requested > max_nodes:
            raise EncodingOverflow(
                f"State space {rows}x{cols}x{states} = {requested} exceeds node range {max_nodes}",
                requested=requested,
                capacity=max_nodes,
            )

        self.rows = rows
        self.cols = cols
        self.states = states
        self._size = requested
        logger.debug(f"GridStateEncoder allocated {requested} nodes ({rows}x{cols}x{states})")

    @classmethod
    def with_bitmask(cls, rows: int, cols: int, bits: int, max_nodes: int = MAX_NODES) -> "GridStateEncoder":
        """Encoder whose auxiliary state is a ``bits``-wide bitmask."""
        if bits < 0:
            raise ValueError(f"Bitmask width must be non-negative, got {bits}")
        return cls(rows, cols, 1 << bits, max_nodes=max_nodes)

    @property
    def size(self) -> int:
        return self._size

    def contains(self, row: int, col: int, state: int = 0) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols and 0 <= state < self.states

    def encode(self, row: int, col: int, state: int = 0) -> int:
        if not self.contains(row, col, state):
            raise EncodingOverflow(
                f"Configuration ({row}, {col}, {state}) outside "
                f"{self.rows}x{self.cols}x{self.states} range",
                capacity=self._size,
            )
        return (row * self.cols + col) * self.states + state

    def decode(self, node: int) -> Tuple[int, int, int]:
        if not 0 <= node < self._size:
            raise EncodingOverflow(f"Node {node} outside range [0, {self._size})", capacity=self._size)
        cell, state = divmod(node, self.states)
        row, col = divmod(cell, self.cols)
        return row, col, state

    def cell(self, node: int) -> Tuple[int, int]:
        """Decode only the grid position of a node."""
        row, col, _ = self.decode(node)
        return row, col

    def __repr__(self):
        return f"GridStateEncoder(rows={self.rows}, cols={self.cols}, states={self.states})"
