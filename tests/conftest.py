"""Shared fixtures for the test suite."""

from pathlib import Path

import pytest

RESOURCES = Path(__file__).parent / "resources"


def read_resource(name: str) -> str:
    return (RESOURCES / name).read_text(encoding="utf-8")


@pytest.fixture
def resource():
    """Return a loader for files under tests/resources."""
    return read_resource


def graph_successors(edges):
    """Successor generator over an explicit ``[(from, to, weight)]`` edge list."""
    adjacency = {}
    for source, target, weight in edges:
        adjacency.setdefault(source, []).append((target, weight))

    def successors(node):
        return iter(adjacency.get(node, ()))

    return successors
