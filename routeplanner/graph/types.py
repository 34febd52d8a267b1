"""
Value types shared by the graph model and the search algorithms.
"""

from __future__ import annotations

import math
import numbers
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from routeplanner.config import NODE_ID_PREFIX

# Grid cell address: (row, col)
Cell = tuple[int, int]


class GraphMode(Enum):
    """Which representation a GraphModel currently holds."""

    FREE_FORM = "free-form"
    GRID = "grid"


@dataclass
class Node:
    """
    A point in free-form mode.

    Attributes:
        id: Unique identifier (e.g. "node-3f9a1c2b7")
        x: Horizontal canvas position
        y: Vertical canvas position
        label: Display label assigned by creation order
    """

    id: str
    x: float
    y: float
    label: str


@dataclass
class Edge:
    """
    One directed entry of an undirected weighted edge.

    Attributes:
        source: Node id the entry starts from
        target: Node id the entry points to
        weight: Positive traversal cost
    """

    source: str
    target: str
    weight: float


class GridNeighbor(NamedTuple):
    """An orthogonal, passable neighbour of a grid cell."""

    row: int
    col: int
    weight: int


def generate_id(prefix: str = NODE_ID_PREFIX) -> str:
    """Generate a random identifier like 'node-3f9a1c2b7'."""
    return f"{prefix}-{uuid.uuid4().hex[:9]}"


def cell_key(row: int, col: int) -> str:
    """Format a cell address as the UI's "row,col" key."""
    return f"{row},{col}"


def parse_cell_key(value: str | Cell) -> Cell | None:
    """
    Parse a "row,col" key (or pass through a (row, col) pair).

    Returns None if the value is not a pair of integers.
    """
    if isinstance(value, tuple):
        if len(value) == 2 and all(_is_index(v) for v in value):
            return int(value[0]), int(value[1])
        return None

    if not isinstance(value, str):
        return None

    parts = value.split(",")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def coerce_weight(value: object, default: float | None = None) -> float | None:
    """
    Convert user input to a positive finite weight.

    Returns `default` when the value is missing, non-numeric, non-positive
    or infinite.
    """
    try:
        weight = float(value)
    except (TypeError, ValueError):
        return default

    if not math.isfinite(weight) or weight <= 0:
        return default
    return weight


def _is_index(value: object) -> bool:
    """Integral values, numpy integers included, but not bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
