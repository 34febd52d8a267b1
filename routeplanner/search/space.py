"""
Search spaces: the view of a GraphModel that the algorithms run over.

A search space lists the nodes an algorithm tracks and answers neighbour
and heuristic queries, so one algorithm body serves both graph modes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Hashable

import numpy as np

from routeplanner.config import CELL_OBSTACLE, CELL_ROAD
from routeplanner.graph.model import GraphModel
from routeplanner.graph.types import Cell, GraphMode, parse_cell_key
from routeplanner.heuristics import euclidean_distance, manhattan_distance

logger = logging.getLogger(__name__)


@dataclass
class SearchSpace:
    """
    Nodes, weighted adjacency and goal heuristic for one search.

    Attributes:
        nodes: Every identifier the search tracks, in iteration order
        neighbors: Maps an identifier to its (neighbour, weight) pairs
        heuristic: Estimated remaining cost from an identifier to the goal
    """

    nodes: list[Hashable]
    neighbors: Callable[[Hashable], list[tuple[Hashable, float]]]
    heuristic: Callable[[Hashable], float]


def resolve_endpoints(
    model: GraphModel, start: object, end: object
) -> tuple[Hashable, Hashable] | None:
    """
    Validate and normalize search endpoints for the model's mode.

    Free-form endpoints must be existing node ids. Grid endpoints may be
    (row, col) pairs or "row,col" keys and must be in bounds. The start must
    not be an obstacle; an obstacle end is searched for and never reached.

    Returns:
        (start, end) in engine form, or None if either is invalid
    """
    if model.mode is GraphMode.GRID:
        cells = []
        for label, value in (("Start", start), ("End", end)):
            cell = parse_cell_key(value)
            if cell is None or not model.in_bounds(*cell):
                logger.warning(f"{label} cell {value!r} is not on the grid")
                return None
            if label == "Start" and model.get_cell_type(*cell) == CELL_OBSTACLE:
                logger.warning(f"{label} cell {value!r} is an obstacle")
                return None
            cells.append(cell)
        return cells[0], cells[1]

    for label, value in (("Start", start), ("End", end)):
        if not isinstance(value, str) or not model.has_node(value):
            logger.warning(f"{label} node {value!r} not in graph")
            return None
    return start, end


def graph_space(model: GraphModel, end: str) -> SearchSpace:
    """Search space over free-form nodes, with a Euclidean heuristic."""
    goal = model.get_node(end)

    def neighbors(node_id: str) -> list[tuple[str, float]]:
        result = []
        for neighbor in model.get_neighbors(node_id):
            edge = model.get_edge(node_id, neighbor)
            result.append((neighbor, edge.weight if edge else float("inf")))
        return result

    def heuristic(node_id: str) -> float:
        return euclidean_distance(model.get_node(node_id), goal)

    return SearchSpace(
        nodes=[node.id for node in model.nodes],
        neighbors=neighbors,
        heuristic=heuristic,
    )


def grid_space(model: GraphModel, start: Cell, end: Cell) -> SearchSpace:
    """
    Search space over grid cells, with a Manhattan heuristic.

    Tracks road cells (code >= 1) plus the start and end cells whatever
    their code. Empty cells elsewhere are not entered.
    """
    tracked = model.grid >= CELL_ROAD
    tracked[start] = True
    tracked[end] = True
    cells = [(int(r), int(c)) for r, c in np.argwhere(tracked)]
    members = set(cells)

    def neighbors(cell: Cell) -> list[tuple[Cell, float]]:
        return [
            ((n.row, n.col), n.weight)
            for n in model.get_grid_neighbors(*cell)
            if (n.row, n.col) in members
        ]

    def heuristic(cell: Cell) -> float:
        return manhattan_distance(cell, end)

    return SearchSpace(nodes=cells, neighbors=neighbors, heuristic=heuristic)
