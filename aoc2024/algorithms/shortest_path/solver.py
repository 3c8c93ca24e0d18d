"""
Bucket-queue Dijkstra with tie tracking.

Relaxation loop over an implicit graph: nodes are dense integer ids, edges
come from a successor generator with small non-negative integer weights.
Besides the distance table the solver keeps, for every node, the full set of
predecessor edges that achieve its best distance, so that every optimal path
(not just one) can be reconstructed afterwards.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

import numpy as np

from .bucket_queue import BucketQueue
from .config import DISTANCE_DTYPE, UNREACHABLE, SolverConfig
from .errors import InvariantViolation
from .successors import SuccessorGenerator, checked_successors

logger = logging.getLogger(__name__)

Predecessors = Dict[int, Set[Tuple[int, int]]]  # node -> {(predecessor, weight)}


@dataclass
class SolverStats:
    """Counters collected during one query."""
    pops: int = 0
    stale_pops: int = 0
    relaxations: int = 0
    improvements: int = 0
    ties: int = 0
    early_exit: bool = False

    def to_dict(self):
        return {
            'pops': self.pops,
            'stale_pops': self.stale_pops,
            'relaxations': self.relaxations,
            'improvements': self.improvements,
            'ties': self.ties,
            'early_exit': self.early_exit,
        }


@dataclass
class ShortestPathResult:
    """Distance table and predecessor sets produced by one query."""
    distances: np.ndarray
    predecessors: Predecessors
    finalized: np.ndarray
    sources: Tuple[int, ...]
    targets: List[int] = field(default_factory=list)
    stats: SolverStats = field(default_factory=SolverStats)
    trace: Optional[List[Tuple[int, int]]] = None  # (node, distance) in finalization order
    debug_checks: bool = True

    def distance(self, node: int) -> int:
        """Best known distance to ``node``; ``UNREACHABLE`` when there is none.

        Only final for nodes with ``finalized[node]`` set. After an early exit
        a reached but unfinalized node holds a tentative upper bound.
        """
        return int(self.distances[node])

    def reached(self, node: int) -> bool:
        return self.distances[node] != UNREACHABLE

    def is_final(self, node: int) -> bool:
        return bool(self.finalized[node])

    @property
    def target_distance(self) -> Optional[int]:
        """Smallest distance over finalized targets, None when unreachable."""
        if not self.targets:
            return None
        return min(self.distance(node) for node in self.targets)

    def optimal_targets(self) -> List[int]:
        """Finalized targets whose distance equals ``target_distance``."""
        best = self.target_distance
        if best is None:
            return []
        return [node for node in self.targets if self.distance(node) == best]

    def reconstruct(self, targets) -> Set[int]:
        from .reconstruct import reconstruct
        return reconstruct(targets, self)


class BucketDijkstra:
    """Single-query shortest-path solver over a dense node range.

    Args:
        successors: Generator of outgoing (node, weight) edges
        num_nodes: Size of the node range (``encoder.size``)
        max_weight: Upper bound on any edge weight
        config: Solver configuration
    """

    def __init__(
        self,
        successors: SuccessorGenerator,
        num_nodes: int,
        max_weight: int,
        config: Optional[SolverConfig] = None,
    ):
        self.config = config or SolverConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError("Invalid solver config: " + "; ".join(errors))
        if max_weight < 0:
            raise InvariantViolation(f"max_weight must be non-negative, got {max_weight}")

        self.num_nodes = num_nodes
        self.max_weight = max_weight
        if self.config.debug_checks:
            self.successors = checked_successors(successors, max_weight)
        else:
            self.successors = successors

    def solve(
        self,
        sources: Iterable[int],
        is_target: Optional[Callable[[int], bool]] = None,
    ) -> ShortestPathResult:
        """Run the relaxation loop from ``sources``.

        Without ``is_target`` the queue is drained and every reachable node
        is finalized. With a target predicate and ``early_exit`` enabled the
        search stops once every node at the first target's distance has been
        finalized, which keeps all predecessor sets up to that distance
        complete.
        """
        config = self.config
        num_nodes = self.num_nodes

        distances = np.full(num_nodes, UNREACHABLE, dtype=DISTANCE_DTYPE)
        finalized = np.zeros(num_nodes, dtype=bool)
        predecessors: Predecessors = {}
        stats = SolverStats()
        trace = [] if config.enable_instrumentation else None
        targets: List[int] = []

        # Plain lists in the hot loop, copied into the numpy tables at the end
        dist = [UNREACHABLE] * num_nodes
        done = [False] * num_nodes

        queue = BucketQueue(self.max_weight, debug_checks=config.debug_checks)

        source_nodes = tuple(dict.fromkeys(sources))
        for source in source_nodes:
            if not 0 <= source < num_nodes:
                raise InvariantViolation(f"Source node {source} outside range [0, {num_nodes})")
            dist[source] = 0
            queue.push(source, 0)

        stop_distance = None
        successors = self.successors

        while queue:
            node, priority = queue.pop_min()
            stats.pops += 1

            if stop_distance is not None and priority > stop_distance:
                stats.early_exit = True
                break

            if priority > dist[node] or done[node]:
                stats.stale_pops += 1
                continue

            done[node] = True
            if trace is not None:
                trace.append((node, priority))

            if is_target is not None and is_target(node):
                targets.append(node)
                if config.early_exit and stop_distance is None:
                    stop_distance = priority
                    logger.debug(f"Target {node} finalized at distance {priority}, draining level")

            for neighbour, weight in successors(node):
                stats.relaxations += 1
                candidate = priority + weight
                best = dist[neighbour]

                if candidate < best:
                    if done[neighbour]:
                        raise InvariantViolation(
                            f"Finalized node {neighbour} improved from {best} to {candidate}"
                        )
                    dist[neighbour] = candidate
                    predecessors[neighbour] = {(node, weight)}
                    queue.push(neighbour, candidate)
                    stats.improvements += 1
                elif candidate == best:
                    predecessors.setdefault(neighbour, set()).add((node, weight))
                    stats.ties += 1

        # Superseded entries are dropped inside the queue
        stats.stale_pops += queue.stale_skipped

        distances[:] = dist
        finalized[:] = done

        logger.debug(
            f"Solved from {len(source_nodes)} source(s): pops={stats.pops} "
            f"relaxations={stats.relaxations} ties={stats.ties} targets={len(targets)}"
        )

        return ShortestPathResult(
            distances=distances,
            predecessors=predecessors,
            finalized=finalized,
            sources=source_nodes,
            targets=targets,
            stats=stats,
            trace=trace,
            debug_checks=config.debug_checks,
        )


def solve(
    sources: Iterable[int],
    successors: SuccessorGenerator,
    num_nodes: int,
    max_weight: int,
    is_target: Optional[Callable[[int], bool]] = None,
    config: Optional[SolverConfig] = None,
) -> ShortestPathResult:
    """Convenience wrapper: build a ``BucketDijkstra`` and run one query."""
    solver = BucketDijkstra(successors, num_nodes, max_weight, config=config)
    return solver.solve(sources, is_target=is_target)
