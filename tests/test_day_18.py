"""Tests for the falling-bytes grid."""

import pytest

from aoc2024.puzzles import day_18
from conftest import read_resource


def test_part_a_example():
    assert day_18.part_a_configurable(read_resource("example_18.txt"), 7, 12) == 22


def test_part_b_example():
    assert day_18.part_b_configurable(read_resource("example_18.txt"), 7) == "6,1"


def test_empty_grid_is_manhattan_distance():
    assert day_18.path_length([], 5, 0) == 8


def test_blocked_exit_has_no_path():
    points = [(4, 4)]

    assert day_18.path_length(points, 5, 1) is None
    with pytest.raises(ValueError):
        day_18.part_a_configurable("4,4\n", 5, 1)


def test_wall_across_grid_blocks_on_last_byte():
    points = [(0, 1), (1, 1), (2, 1)]

    assert day_18.first_blocking_byte(points, 3) == (2, 1)


def test_no_blocking_byte():
    with pytest.raises(ValueError):
        day_18.part_b_configurable("1,1\n", 3)


def test_parse_bytes():
    assert day_18.parse_bytes("5,4\n\n4,2\n") == [(5, 4), (4, 2)]

    with pytest.raises(ValueError):
        day_18.parse_bytes("5;4\n")


def test_byte_outside_grid_is_rejected():
    with pytest.raises(ValueError):
        day_18.path_length([(9, 0)], 5, 1)
