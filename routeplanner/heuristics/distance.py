"""
Distance functions for A* heuristics.

Neither is guaranteed admissible: edge weights need not match geometric
distance, and weighted roads cost more than one per step.
"""

from __future__ import annotations

import math

from routeplanner.graph.types import Cell, Node


def euclidean_distance(a: Node, b: Node) -> float:
    """Straight-line distance between two node positions."""
    return math.hypot(b.x - a.x, b.y - a.y)


def manhattan_distance(a: Cell, b: Cell) -> int:
    """Number of 4-directional steps between two cells, ignoring weights."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
