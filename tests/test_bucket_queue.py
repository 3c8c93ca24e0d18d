"""
Tests for the monotonic bucket queue.
"""

import pytest

from aoc2024.algorithms.shortest_path import BucketQueue, InvariantViolation


def drain(queue):
    popped = []
    while True:
        item = queue.pop_min()
        if item is None:
            return popped
        popped.append(item)


def test_pops_in_priority_order():
    queue = BucketQueue(max_weight=3)
    queue.push(10, 2)
    queue.push(11, 0)
    queue.push(12, 3)
    queue.push(13, 1)

    assert drain(queue) == [(11, 0), (13, 1), (10, 2), (12, 3)]


def test_equal_priorities_are_fifo():
    queue = BucketQueue(max_weight=0)
    for node in (5, 3, 9, 1):
        queue.push(node, 0)

    assert [node for node, _ in drain(queue)] == [5, 3, 9, 1]


def test_improved_entry_leaves_stale_copy_behind():
    queue = BucketQueue(max_weight=5)
    queue.push(1, 5)
    assert queue.push(1, 3) is True
    queue.push(2, 5)

    assert len(queue) == 2
    assert queue.priority(1) == 3
    assert queue.pop_min() == (1, 3)
    assert queue.pop_min() == (2, 5)
    assert queue.stale_skipped == 1
    assert queue.pop_min() is None


def test_worse_priority_is_ignored():
    queue = BucketQueue(max_weight=4)
    queue.push(7, 2)

    assert queue.push(7, 4) is False
    assert queue.push(7, 2) is False
    assert drain(queue) == [(7, 2)]


def test_cursor_wraps_around_ring():
    queue = BucketQueue(max_weight=2)
    queue.push(0, 0)
    assert queue.pop_min() == (0, 0)

    queue.push(1, 2)
    assert queue.pop_min() == (1, 2)

    queue.push(2, 4)
    queue.push(3, 3)
    assert queue.pop_min() == (3, 3)
    assert queue.pop_min() == (2, 4)
    assert queue.cursor == 4


def test_cursor_never_decreases():
    queue = BucketQueue(max_weight=3)
    queue.push(0, 0)
    seen = []
    node = 1
    while queue:
        _, priority = queue.pop_min()
        seen.append(queue.cursor)
        if priority < 20:
            queue.push(node, priority + 3)
            queue.push(node + 1, priority + 1)
            node += 2

    assert seen == sorted(seen)


def test_node_can_be_queued_again_after_pop():
    queue = BucketQueue(max_weight=2)
    queue.push(4, 0)
    assert queue.pop_min() == (4, 0)
    assert 4 not in queue

    queue.push(4, 1)
    assert 4 in queue
    assert queue.pop_min() == (4, 1)


def test_empty_queue():
    queue = BucketQueue(max_weight=1)

    assert not queue
    assert len(queue) == 0
    assert queue.pop_min() is None


def test_push_below_cursor_is_rejected():
    queue = BucketQueue(max_weight=2)
    queue.push(0, 0)
    queue.pop_min()
    queue.push(1, 2)
    queue.pop_min()

    with pytest.raises(InvariantViolation):
        queue.push(2, 1)


def test_push_beyond_window_is_rejected():
    queue = BucketQueue(max_weight=2)

    with pytest.raises(InvariantViolation):
        queue.push(0, 3)


def test_negative_max_weight_is_rejected():
    with pytest.raises(InvariantViolation):
        BucketQueue(max_weight=-1)


def test_clear_resets_state():
    queue = BucketQueue(max_weight=2)
    queue.push(0, 1)
    queue.push(1, 2)
    queue.pop_min()
    queue.clear()

    assert len(queue) == 0
    assert queue.cursor == 0
    queue.push(3, 0)
    assert queue.pop_min() == (3, 0)
