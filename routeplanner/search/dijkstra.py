"""
Dijkstra's algorithm with a linear-scan minimum selection.

The scan is O(V) per step, which is fine for demo-sized graphs and keeps the
tie-break simple: among equal distances the node that comes first in the
search space's iteration order is settled first.
"""

from __future__ import annotations

import math
from typing import Hashable

from routeplanner.search.base import PathFinder, reconstruct_path
from routeplanner.search.result import PathResult
from routeplanner.search.space import SearchSpace


class DijkstraPathFinder(PathFinder):
    """
    Classic label-setting shortest path.

    Settles nodes in order of tentative distance until the end node is
    selected or no reachable node remains. The visited trace lists settled
    nodes in settlement order (the end node itself is never settled).
    """

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Dijkstra's algorithm (uniform-cost, explores by distance)"

    def _search(self, space: SearchSpace, start: Hashable, end: Hashable) -> PathResult:
        distances = {node: math.inf for node in space.nodes}
        distances[start] = 0.0
        previous: dict[Hashable, Hashable | None] = {node: None for node in space.nodes}

        # dict keeps insertion order, so the scan below is deterministic
        unvisited = dict.fromkeys(space.nodes)
        visited: list[Hashable] = []
        settled: set[Hashable] = set()

        while unvisited:
            current = None
            min_distance = math.inf
            for node in unvisited:
                if distances[node] < min_distance:
                    min_distance = distances[node]
                    current = node

            if current is None or current == end:
                break

            del unvisited[current]
            visited.append(current)
            settled.add(current)

            for neighbor, weight in space.neighbors(current):
                if neighbor in settled:
                    continue
                candidate = distances[current] + weight
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    previous[neighbor] = current

        path = reconstruct_path(previous, end)
        if len(path) <= 1:
            return PathResult.no_path(self.name, visited)

        return PathResult(
            path=path,
            distance=distances[end],
            visited=visited,
            algorithm=self.name,
        )
