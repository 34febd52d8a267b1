"""
A* search with a linear-scan open set.

Uses Euclidean distance on free-form graphs and Manhattan distance on grids
(supplied by the search space). Neither heuristic is guaranteed admissible
for arbitrary weights, so A* may occasionally return a longer route than
Dijkstra on graphs whose edge weights undercut the geometry.
"""

from __future__ import annotations

import logging
import math
from typing import Hashable

from routeplanner.search.base import PathFinder, reconstruct_path
from routeplanner.search.result import PathResult
from routeplanner.search.space import SearchSpace

logger = logging.getLogger(__name__)


class AStarPathFinder(PathFinder):
    """
    Best-first search on f = g + h.

    Returns as soon as the end node is selected from the open set. The
    visited trace lists closed nodes in the order they were closed.
    """

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A* search (distance so far + heuristic estimate to goal)"

    def _search(self, space: SearchSpace, start: Hashable, end: Hashable) -> PathResult:
        g_score = {node: math.inf for node in space.nodes}
        f_score = {node: math.inf for node in space.nodes}
        previous: dict[Hashable, Hashable | None] = {node: None for node in space.nodes}

        g_score[start] = 0.0
        f_score[start] = space.heuristic(start)

        # Insertion-ordered: ties go to the earliest opened node
        open_set = {start: None}
        closed: list[Hashable] = []
        closed_set: set[Hashable] = set()

        while open_set:
            current = None
            min_f = math.inf
            for node in open_set:
                if f_score[node] < min_f:
                    min_f = f_score[node]
                    current = node

            if current is None:
                break

            if current == end:
                return PathResult(
                    path=reconstruct_path(previous, end),
                    distance=g_score[end],
                    visited=closed,
                    algorithm=self.name,
                )

            del open_set[current]
            closed.append(current)
            closed_set.add(current)

            for neighbor, weight in space.neighbors(current):
                if neighbor in closed_set:
                    continue

                tentative = g_score[current] + weight
                if tentative < g_score[neighbor]:
                    previous[neighbor] = current
                    g_score[neighbor] = tentative
                    f_score[neighbor] = tentative + space.heuristic(neighbor)
                    open_set.setdefault(neighbor, None)

        logger.debug(f"astar: open set exhausted after closing {len(closed)} nodes")
        return PathResult.no_path(self.name, closed)
