"""Puzzle solvers built on the shortest-path engine.

Each day module exposes ``part_a(text)`` and ``part_b(text)``.
"""

from . import day_16, day_18, day_20
from .grid import Direction, Maze

__all__ = ['day_16', 'day_18', 'day_20', 'Direction', 'Maze']
