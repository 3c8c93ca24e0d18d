"""
Minimum-cost set reconstruction.

Walks the predecessor sets backwards from one or more targets and collects
every node (or edge) that lies on some minimum-cost path from a source.
"""

import numbers
from collections import deque
from typing import Iterable, List, Set, Tuple, Union

from .errors import InvariantViolation
from .solver import ShortestPathResult

Targets = Union[int, Iterable[int]]


def _final_targets(targets: Targets, result: ShortestPathResult) -> List[int]:
    if isinstance(targets, numbers.Integral):
        targets = [targets]

    final = []
    for node in dict.fromkeys(int(node) for node in targets):
        if not result.reached(node):
            continue
        if not result.is_final(node):
            # Tentative distance, its predecessor set may not be optimal
            if result.debug_checks:
                raise InvariantViolation(
                    f"Cannot reconstruct from node {node}: distance {result.distance(node)} "
                    f"is tentative (search stopped early)"
                )
            continue
        final.append(node)
    return final


def reconstruct(targets: Targets, result: ShortestPathResult) -> Set[int]:
    """All nodes on some optimal path ending at any of ``targets``.

    Targets are taken at their own finalized distance; callers that want
    only the cheapest of several targets pass ``result.optimal_targets()``.
    Unreachable targets contribute nothing. Reached targets whose distance
    is still tentative raise ``InvariantViolation`` with debug checks on and
    are skipped otherwise.
    """
    start = _final_targets(targets, result)
    visited: Set[int] = set(start)
    to_visit = deque(start)
    predecessors = result.predecessors

    while to_visit:
        node = to_visit.popleft()
        for previous, _ in predecessors.get(node, ()):
            if previous not in visited:
                visited.add(previous)
                to_visit.append(previous)

    return visited


def reconstruct_edges(targets: Targets, result: ShortestPathResult) -> Set[Tuple[int, int, int]]:
    """All ``(predecessor, node, weight)`` edges on some optimal path to ``targets``."""
    start = _final_targets(targets, result)
    visited: Set[int] = set(start)
    to_visit = deque(start)
    edges: Set[Tuple[int, int, int]] = set()
    predecessors = result.predecessors

    while to_visit:
        node = to_visit.popleft()
        for previous, weight in predecessors.get(node, ()):
            edges.add((previous, node, weight))
            if previous not in visited:
                visited.add(previous)
                to_visit.append(previous)

    return edges
