"""Search algorithms shared by the puzzle solvers."""

from .shortest_path import BucketDijkstra, GridStateEncoder, solve, reconstruct

__all__ = [
    'BucketDijkstra',
    'GridStateEncoder',
    'solve',
    'reconstruct',
]
