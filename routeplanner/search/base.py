"""
PathFinder base class for shortest-path algorithms.

All algorithms implement _search() over a SearchSpace; find_path() handles
endpoint validation and picks the free-form or grid variant.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Hashable

from routeplanner.graph.model import GraphModel
from routeplanner.graph.types import GraphMode
from routeplanner.search.result import PathResult
from routeplanner.search.space import (
    SearchSpace,
    graph_space,
    grid_space,
    resolve_endpoints,
)

logger = logging.getLogger(__name__)


class PathFinder(ABC):
    """
    Abstract base class for shortest-path algorithms.

    Searches read the model and never mutate it. Invalid endpoints and
    unreachable goals both produce a no-path result rather than an error.
    A start equal to the end yields the single-element path [start] with
    distance 0 and an empty visited trace.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the algorithm (e.g., 'dijkstra', 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the algorithm."""
        ...

    def find_path(self, model: GraphModel, start: object, end: object) -> PathResult:
        """
        Find the shortest path between two endpoints.

        Args:
            model: Graph model to search
            start: Node id, or (row, col) / "row,col" in grid mode
            end: Node id, or (row, col) / "row,col" in grid mode

        Returns:
            PathResult with path, distance and visited trace
        """
        endpoints = resolve_endpoints(model, start, end)
        if endpoints is None:
            return PathResult.no_path(self.name)
        start, end = endpoints

        if start == end:
            return PathResult(path=[start], distance=0.0, visited=[], algorithm=self.name)

        if model.mode is GraphMode.GRID:
            space = grid_space(model, start, end)
        else:
            space = graph_space(model, end)

        result = self._search(space, start, end)
        logger.debug(
            f"{self.name}: {start!r} -> {end!r} distance={result.distance} "
            f"path_len={len(result.path)} visited={len(result.visited)}"
        )
        return result

    @abstractmethod
    def _search(self, space: SearchSpace, start: Hashable, end: Hashable) -> PathResult:
        """
        Run the algorithm on a prepared search space.

        Endpoints are already validated and distinct.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


def reconstruct_path(previous: dict[Hashable, Hashable | None], end: Hashable) -> list[Hashable]:
    """Walk predecessor links back from end; returns the path start-first."""
    path = []
    node = end
    while node is not None:
        path.append(node)
        node = previous.get(node)
    return list(reversed(path))
