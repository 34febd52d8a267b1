"""
Path result dataclass returned by every search.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Hashable

from routeplanner.graph.types import cell_key


@dataclass
class PathResult:
    """
    Outcome of one search.

    Attributes:
        path: Identifiers from start to end (node ids or (row, col) cells);
            empty when no path was found
        distance: Sum of traversed weights, math.inf when no path was found
        visited: Identifiers in the order the search settled/closed them,
            for progressive animation
        algorithm: Name of the algorithm that produced the result
    """

    path: list[Hashable] = field(default_factory=list)
    distance: float = math.inf
    visited: list[Hashable] = field(default_factory=list)
    algorithm: str = ""

    @classmethod
    def no_path(cls, algorithm: str, visited: list[Hashable] | None = None) -> PathResult:
        """Result for an unreachable or invalid endpoint pair."""
        return cls(path=[], distance=math.inf, visited=list(visited or []), algorithm=algorithm)

    @property
    def found(self) -> bool:
        """Whether a path exists."""
        return len(self.path) > 0

    @property
    def hops(self) -> int | None:
        """Number of edges/steps on the path, or None if not found."""
        if not self.found:
            return None
        return len(self.path) - 1

    def summary(self) -> str:
        """One-line description for the analysis display."""
        if not self.found:
            return "No path found between selected nodes"
        return (
            f"Route found! Total cost: {self.distance:.2f} "
            f"({self.hops} steps, {len(self.visited)} visited)"
        )

    def to_dict(self) -> dict:
        """
        Plain-data form for the UI.

        Grid cells are rendered as "row,col" keys; node ids pass through.
        """
        return {
            "path": [_format(i) for i in self.path],
            "distance": self.distance,
            "visited": [_format(i) for i in self.visited],
            "algorithm": self.algorithm,
        }


def _format(identifier: Hashable) -> Hashable:
    if isinstance(identifier, tuple):
        return cell_key(*identifier)
    return identifier
