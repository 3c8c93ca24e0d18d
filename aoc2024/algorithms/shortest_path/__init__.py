"""
Shortest-Path Module - Bounded-Weight Grid Search Engine

Dijkstra over implicit "grid position x state" graphs with small
non-negative integer edge weights, ordered by a monotonic bucket queue
instead of a binary heap, with every optimal predecessor retained so that
all minimum-cost paths can be reconstructed.

Architecture:
=============

- config.py: Configuration constants and SolverConfig dataclass
- errors.py: EncodingOverflow and InvariantViolation
- encoding.py: StateEncoder contract and GridStateEncoder
- successors.py: Successor generator contract, weight checking, 4-neighbour grids
- bucket_queue.py: Ring-of-buckets priority queue with lazy deletion
- solver.py: Relaxation loop with multi-predecessor tie tracking
- reconstruct.py: Backward traversal over predecessor sets

Usage:
======

    from aoc2024.algorithms.shortest_path import GridStateEncoder, solve, reconstruct

    encoder = GridStateEncoder(rows, cols, states=4)
    result = solve([encoder.encode(r0, c0, 1)], successors, encoder.size,
                   max_weight=1000, is_target=is_end)
    best = result.target_distance            # None when unreachable
    cells = reconstruct(result.optimal_targets(), result)

Module Exports:
===============
"""

from .config import (
    MAX_NODES,
    UNREACHABLE,
    UNIT_STEP_WEIGHT,
    TURN_WEIGHT,
    SolverConfig,
)
from .errors import ShortestPathError, EncodingOverflow, InvariantViolation
from .encoding import StateEncoder, GridStateEncoder
from .successors import (
    Edge,
    SuccessorGenerator,
    NEIGHBOUR_OFFSETS,
    checked_successors,
    FourNeighbourSuccessors,
)
from .bucket_queue import BucketQueue
from .solver import BucketDijkstra, ShortestPathResult, SolverStats, solve
from .reconstruct import reconstruct, reconstruct_edges

__all__ = [
    # Configuration
    'MAX_NODES',
    'UNREACHABLE',
    'UNIT_STEP_WEIGHT',
    'TURN_WEIGHT',
    'SolverConfig',

    # Errors
    'ShortestPathError',
    'EncodingOverflow',
    'InvariantViolation',

    # Encoding and successors
    'StateEncoder',
    'GridStateEncoder',
    'Edge',
    'SuccessorGenerator',
    'NEIGHBOUR_OFFSETS',
    'checked_successors',
    'FourNeighbourSuccessors',

    # Engine
    'BucketQueue',
    'BucketDijkstra',
    'ShortestPathResult',
    'SolverStats',
    'solve',
    'reconstruct',
    'reconstruct_edges',
]
