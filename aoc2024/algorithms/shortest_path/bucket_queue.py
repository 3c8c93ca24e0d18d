"""
Monotonic bucket priority queue.

A ring of ``max_weight + 1`` FIFO buckets indexed by ``priority % ring_size``.
Valid for Dijkstra-style use where every pushed priority lies in
``[cursor, cursor + max_weight]``: inside that window each bucket holds at
most one distinct priority, so scanning forward from the cursor finds the
minimum after at most ``ring_size`` steps.

Improving a queued node's priority leaves the old entry in place; it is
recognised as stale and skipped when popped.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from .errors import InvariantViolation

logger = logging.getLogger(__name__)


class BucketQueue:
    """Min-priority queue for small bounded integer priorities."""

    def __init__(self, max_weight: int, debug_checks: bool = True):
        if max_weight < 0:
            raise InvariantViolation(f"max_weight must be non-negative, got {max_weight}")

        self.max_weight = max_weight
        self.ring_size = max_weight + 1
        self.debug_checks = debug_checks

        self._buckets: List[Deque[Tuple[int, int]]] = [deque() for _ in range(self.ring_size)]
        self._queued: Dict[int, int] = {}  # node -> live priority
        self._cursor = 0
        self.stale_skipped = 0

    @property
    def cursor(self) -> int:
        """Priority of the bucket currently being drained. Never decreases."""
        return self._cursor

    def __len__(self) -> int:
        return len(self._queued)

    def __bool__(self) -> bool:
        return bool(self._queued)

    def __contains__(self, node: int) -> bool:
        return node in self._queued

    def priority(self, node: int) -> Optional[int]:
        """Live priority of ``node``, or None when it is not queued."""
        return self._queued.get(node)

    def push(self, node: int, priority: int) -> bool:
        """Insert ``node`` or lower its priority.

        Returns:
            True if the entry was queued, False if the node was already queued
            at an equal or better priority.
        """
        if self.debug_checks and not self._cursor <= priority <= self._cursor + self.max_weight:
            raise InvariantViolation(
                f"Priority {priority} for node {node} outside window "
                f"[{self._cursor}, {self._cursor + self.max_weight}]"
            )

        current = self._queued.get(node)
        if current is not None and current <= priority:
            return False

        self._queued[node] = priority
        self._buckets[priority % self.ring_size].append((node, priority))
        return True

    def pop_min(self) -> Optional[Tuple[int, int]]:
        """Remove and return ``(node, priority)`` with the smallest priority.

        Entries of equal priority come out in insertion order. Returns None
        when no live entries remain.
        """
        if not self._queued:
            return None

        scanned = 0
        while True:
            bucket = self._buckets[self._cursor % self.ring_size]
            while bucket:
                node, priority = bucket.popleft()
                if self._queued.get(node) != priority:
                    self.stale_skipped += 1
                    continue
                del self._queued[node]
                return node, priority

            self._cursor += 1
            scanned += 1
            if self.debug_checks and scanned > self.ring_size:
                raise InvariantViolation(
                    f"Scanned {scanned} empty buckets with {len(self._queued)} live entries"
                )

    def clear(self):
        for bucket in self._buckets:
            bucket.clear()
        self._queued.clear()
        self._cursor = 0
        self.stale_skipped = 0

    def __repr__(self):
        return (f"BucketQueue(max_weight={self.max_weight}, live={len(self._queued)}, "
                f"cursor={self._cursor})")
