"""
Search module.

Provides shortest-path algorithms over a GraphModel:
- DijkstraPathFinder: Uniform-cost search
- AStarPathFinder: Heuristic-guided search
- PathResult: Path, distance and visited trace

Usage:
    from routeplanner.search import find_route

    result = find_route(model, "dijkstra", start_id, end_id)
    result = find_route(grid_model, "astar", "0,0", "2,2")
"""

from routeplanner.graph.model import GraphModel
from routeplanner.search.astar import AStarPathFinder
from routeplanner.search.base import PathFinder, reconstruct_path
from routeplanner.search.dijkstra import DijkstraPathFinder
from routeplanner.search.result import PathResult
from routeplanner.search.space import SearchSpace

__all__ = [
    "PathFinder",
    "PathResult",
    "SearchSpace",
    "DijkstraPathFinder",
    "AStarPathFinder",
    "ALGORITHMS",
    "astar",
    "dijkstra",
    "find_route",
    "get_pathfinder",
    "reconstruct_path",
]

ALGORITHMS: dict[str, type[PathFinder]] = {
    "dijkstra": DijkstraPathFinder,
    "astar": AStarPathFinder,
}


def get_pathfinder(name: str) -> PathFinder:
    """
    Get a path finder by name.

    Args:
        name: Algorithm identifier (dijkstra, astar)

    Returns:
        Instantiated path finder

    Raises:
        ValueError: If algorithm name is unknown
    """
    if name not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    return ALGORITHMS[name]()


def find_route(model: GraphModel, algorithm: str, start: object, end: object) -> PathResult:
    """Run the named algorithm between two endpoints of the model."""
    return get_pathfinder(algorithm).find_path(model, start, end)


def dijkstra(model: GraphModel, start: object, end: object) -> PathResult:
    return DijkstraPathFinder().find_path(model, start, end)


def astar(model: GraphModel, start: object, end: object) -> PathResult:
    return AStarPathFinder().find_path(model, start, end)
