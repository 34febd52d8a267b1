"""
Route session: endpoint selection and pathfinding runs on one model.

Tracks what the control panel needs between clicks: the model being
edited, the chosen algorithm, the selected start/end and the last result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable

from routeplanner.config import DEFAULT_ALGORITHM
from routeplanner.graph.model import GraphModel
from routeplanner.search import PathResult, get_pathfinder

logger = logging.getLogger(__name__)


@dataclass
class RouteSession:
    """
    Mutable state of an interactive route-planning session.

    Attributes:
        model: Graph or grid being edited
        algorithm: Algorithm name used by run() ("dijkstra" or "astar")
        selected: Selected endpoints, start first (at most two)
        last_result: Result of the most recent run, if any
    """

    model: GraphModel = field(default_factory=GraphModel)
    algorithm: str = DEFAULT_ALGORITHM
    selected: list[Hashable] = field(default_factory=list)
    last_result: PathResult | None = None

    def __post_init__(self) -> None:
        # Fail fast on a bad algorithm name
        get_pathfinder(self.algorithm)

    @property
    def is_ready(self) -> bool:
        """Whether both endpoints are selected."""
        return len(self.selected) == 2

    def select(self, endpoint: Hashable) -> list[Hashable]:
        """
        Toggle an endpoint in the selection.

        Selecting an already-selected endpoint removes it; otherwise it is
        appended and only the first two selections are kept.
        """
        if endpoint in self.selected:
            self.selected = [e for e in self.selected if e != endpoint]
        else:
            self.selected = (self.selected + [endpoint])[:2]
        return list(self.selected)

    def clear_selection(self) -> None:
        self.selected = []

    def set_algorithm(self, name: str) -> None:
        get_pathfinder(name)
        self.algorithm = name

    def reset(self) -> None:
        """Empty the model (keeping its mode and grid size) and forget results."""
        self.model.reset()
        self.selected = []
        self.last_result = None

    def switch_mode(self, grid: bool) -> None:
        """Switch between grid and free-form mode. No-op if already there."""
        if grid == self.model.is_grid_mode:
            return

        if grid:
            self.model.init_grid(self.model.grid_size, self.model.cell_size)
            logger.info("Switched to grid mode")
        else:
            self.model.use_free_form()
            logger.info("Switched to graph mode")

        self.selected = []
        self.last_result = None

    def set_grid_size(self, size: int) -> None:
        """Resize the grid; the previous grid contents are discarded."""
        self.model.init_grid(size, self.model.cell_size)
        self.selected = []
        self.last_result = None
        logger.info(f"Grid size set to {size}x{size}")

    def run(self) -> PathResult:
        """
        Run the chosen algorithm between the selected endpoints.

        On success the path and visited trace are pushed into the model's
        highlight state.

        Raises:
            ValueError: If start and end are not both selected
        """
        if not self.is_ready:
            raise ValueError("Select a start and end point first")

        start, end = self.selected
        result = get_pathfinder(self.algorithm).find_path(self.model, start, end)
        self.last_result = result

        if result.found:
            self.model.set_visited_cells(result.visited)
            self.model.set_final_path(result.path)
            logger.info(result.summary())
        else:
            self.model.clear_path_highlighting()
            logger.info(f"No path found from {start!r} to {end!r}")

        return result
