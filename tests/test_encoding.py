"""Tests for grid state encoding."""

import pytest

from aoc2024.algorithms.shortest_path import EncodingOverflow, GridStateEncoder


def test_encode_decode_round_trip_is_dense():
    encoder = GridStateEncoder(3, 5, states=4)
    nodes = []
    for row in range(3):
        for col in range(5):
            for state in range(4):
                node = encoder.encode(row, col, state)
                assert encoder.decode(node) == (row, col, state)
                nodes.append(node)

    assert sorted(nodes) == list(range(encoder.size))
    assert encoder.size == 60


def test_states_of_a_cell_are_adjacent():
    encoder = GridStateEncoder(4, 4, states=4)
    base = encoder.encode(2, 3, 0)

    assert [encoder.encode(2, 3, s) for s in range(4)] == [base, base + 1, base + 2, base + 3]
    assert encoder.cell(base + 2) == (2, 3)


def test_state_space_larger_than_range_overflows():
    with pytest.raises(EncodingOverflow) as excinfo:
        GridStateEncoder(10, 10, states=4, max_nodes=399)

    assert excinfo.value.requested == 400
    assert excinfo.value.capacity == 399
    assert GridStateEncoder(10, 10, states=4, max_nodes=400).size == 400


@pytest.mark.parametrize("config", [(-1, 0, 0), (0, 5, 0), (3, 0, 0), (0, 0, 2)])
def test_configuration_outside_grid_overflows(config):
    encoder = GridStateEncoder(3, 5, states=2)

    with pytest.raises(EncodingOverflow):
        encoder.encode(*config)


def test_decode_outside_range_overflows():
    encoder = GridStateEncoder(2, 2)

    with pytest.raises(EncodingOverflow):
        encoder.decode(4)
    with pytest.raises(EncodingOverflow):
        encoder.decode(-1)


def test_bitmask_encoder():
    encoder = GridStateEncoder.with_bitmask(3, 3, bits=3)

    assert encoder.states == 8
    assert encoder.decode(encoder.encode(1, 2, 0b101)) == (1, 2, 0b101)


def test_non_positive_dimensions_are_rejected():
    with pytest.raises(ValueError):
        GridStateEncoder(0, 4)
