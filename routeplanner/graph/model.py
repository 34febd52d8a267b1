"""
GraphModel: the editable graph (free-form nodes and edges) or cell grid.

Usage:
    from routeplanner.graph import GraphModel

    model = GraphModel()
    a = model.add_node(0, 0)
    b = model.add_node(10, 0)
    model.add_edge(a, b, 4)

    model.init_grid(15, 30)
    model.set_cell_type(0, 0, 1)
    model.get_grid_neighbors(0, 0)
"""

from __future__ import annotations

import copy
import logging
import math
import numbers

import numpy as np

from routeplanner.config import (
    CELL_EMPTY,
    CELL_OBSTACLE,
    CELL_ROAD,
    DEFAULT_CELL_SIZE,
    DEFAULT_EDGE_WEIGHT,
    DEFAULT_GRID_SIZE,
    NODE_LABELS,
)
from routeplanner.graph.types import (
    Cell,
    Edge,
    GraphMode,
    GridNeighbor,
    Node,
    cell_key,
    generate_id,
)

logger = logging.getLogger(__name__)

# Up, down, left, right
GRID_DIRECTIONS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class GraphModel:
    """
    Holds either a free-form weighted graph or a square grid of cells.

    The two representations are mutually exclusive: `init_grid` discards
    nodes and edges, `use_free_form` discards the grid. Mutations happen in
    place; callers that need snapshots take them with `clone()`.

    Attributes:
        mode: GraphMode.FREE_FORM or GraphMode.GRID
        grid_size: Number of rows (and columns) of the grid
        cell_size: Pixels per grid cell
        final_path: Last path pushed for highlighting
        visited_cells: Last visited trace pushed for highlighting
        is_path_highlighted: Whether final_path should be drawn
    """

    def __init__(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        cell_size: float = DEFAULT_CELL_SIZE,
    ) -> None:
        self.mode = GraphMode.FREE_FORM
        self._nodes: dict[str, Node] = {}
        self._edges: dict[tuple[str, str], Edge] = {}
        self._node_counter = 0

        self.grid_size = grid_size
        self.cell_size = cell_size
        self._grid = np.zeros((grid_size, grid_size), dtype=np.int64)

        self.final_path: list = []
        self.visited_cells: list = []
        self.is_path_highlighted = False

    @property
    def is_grid_mode(self) -> bool:
        return self.mode is GraphMode.GRID

    # =========================================================================
    # Free-form Nodes
    # =========================================================================

    @property
    def nodes(self) -> list[Node]:
        """All nodes in creation order."""
        return list(self._nodes.values())

    def node_count(self) -> int:
        return len(self._nodes)

    def get_node(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def add_node(self, x: float, y: float) -> str:
        """Add a node at (x, y) and return its new id."""
        label = NODE_LABELS[self._node_counter % len(NODE_LABELS)]

        node_id = generate_id()
        while node_id in self._nodes:
            node_id = generate_id()

        self._nodes[node_id] = Node(id=node_id, x=float(x), y=float(y), label=label)
        self._node_counter += 1

        logger.debug(f"Added node {label} ({node_id}) at ({x}, {y})")
        return node_id

    def remove_node(self, node_id: str) -> None:
        """Remove a node and every edge touching it. No-op if absent."""
        if node_id not in self._nodes:
            return

        for key in [k for k in self._edges if node_id in k]:
            del self._edges[key]

        del self._nodes[node_id]
        logger.debug(f"Removed node {node_id}")

    # =========================================================================
    # Free-form Edges
    # =========================================================================

    @property
    def edges(self) -> list[Edge]:
        """Unique undirected edges (forward entries only), in creation order."""
        seen: set[frozenset[str]] = set()
        unique = []
        for (source, target), edge in self._edges.items():
            pair = frozenset((source, target))
            if pair in seen:
                continue
            seen.add(pair)
            unique.append(edge)
        return unique

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return len(self._edges) // 2

    def add_edge(
        self,
        source: str,
        target: str,
        weight: float = DEFAULT_EDGE_WEIGHT,
    ) -> Edge | None:
        """
        Connect two nodes with an undirected weighted edge.

        Returns:
            The forward Edge, or None if an endpoint is missing, the nodes
            are already connected, the endpoints are the same node, or the
            weight is not a finite positive number.
        """
        if source not in self._nodes or target not in self._nodes:
            logger.warning(f"Cannot add edge {source}-{target}: unknown node")
            return None

        if source == target:
            logger.warning(f"Cannot add self-loop on {source}")
            return None

        if (source, target) in self._edges or (target, source) in self._edges:
            logger.warning(f"Edge {source}-{target} already exists")
            return None

        if not _is_valid_weight(weight):
            logger.warning(f"Rejected weight {weight!r} for edge {source}-{target}")
            return None

        edge = Edge(source=source, target=target, weight=weight)
        self._edges[(source, target)] = edge
        self._edges[(target, source)] = Edge(source=target, target=source, weight=weight)

        logger.debug(f"Added edge {source}-{target} (weight {weight})")
        return edge

    def update_edge_weight(self, source: str, target: str, weight: float) -> None:
        """Set the weight of both directed entries. No-op if not connected."""
        if not _is_valid_weight(weight):
            logger.warning(f"Rejected weight {weight!r} for edge {source}-{target}")
            return

        for key in ((source, target), (target, source)):
            if key in self._edges:
                self._edges[key].weight = weight

    def remove_edge(self, source: str, target: str) -> None:
        """Delete both directed entries if present."""
        self._edges.pop((source, target), None)
        self._edges.pop((target, source), None)

    def get_edge(self, source: str, target: str) -> Edge | None:
        return self._edges.get((source, target))

    def get_neighbors(self, node_id: str) -> list[str]:
        """All nodes one hop away from node_id."""
        return [target for (source, target) in self._edges if source == node_id]

    # =========================================================================
    # Grid
    # =========================================================================

    def init_grid(self, grid_size: int, cell_size: float) -> None:
        """
        Switch to grid mode with an all-empty grid_size x grid_size grid.

        Discards nodes, edges, any previous grid and path highlighting.
        """
        if grid_size <= 0:
            raise ValueError(f"Grid size must be positive, got {grid_size}")

        self.mode = GraphMode.GRID
        self.grid_size = grid_size
        self.cell_size = cell_size
        self._grid = np.full((grid_size, grid_size), CELL_EMPTY, dtype=np.int64)

        self._nodes = {}
        self._edges = {}
        self._node_counter = 0

        self.clear_path_highlighting()
        logger.debug(f"Initialized {grid_size}x{grid_size} grid (cell size {cell_size})")

    def use_free_form(self) -> None:
        """Switch to free-form mode, discarding the grid and highlighting."""
        self.mode = GraphMode.FREE_FORM
        self._grid = np.full((self.grid_size, self.grid_size), CELL_EMPTY, dtype=np.int64)
        self._nodes = {}
        self._edges = {}
        self._node_counter = 0
        self.clear_path_highlighting()

    def reset(self) -> None:
        """Empty the model, staying in the current mode."""
        if self.is_grid_mode:
            self.init_grid(self.grid_size, self.cell_size)
        else:
            self.use_free_form()

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cell codes."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.grid_size and 0 <= col < self.grid_size

    def set_cell_type(self, row: int, col: int, code: int) -> bool:
        """
        Set a cell code.

        Returns False (and changes nothing) if the cell is out of bounds or
        the code is not an integer.
        """
        if not self.in_bounds(row, col):
            return False
        if isinstance(code, bool) or not isinstance(code, numbers.Integral):
            logger.warning(f"Rejected cell code {code!r} at ({row}, {col})")
            return False
        self._grid[row, col] = code
        return True

    def get_cell_type(self, row: int, col: int) -> int | None:
        """Get a cell code, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return int(self._grid[row, col])

    def get_grid_neighbors(self, row: int, col: int) -> list[GridNeighbor]:
        """
        In-bounds, non-obstacle orthogonal neighbours of (row, col).

        The weight is the neighbour's code, with empty cells costing 1.
        """
        neighbors = []
        for dr, dc in GRID_DIRECTIONS:
            r, c = row + dr, col + dc
            if not self.in_bounds(r, c):
                continue
            code = int(self._grid[r, c])
            if code == CELL_OBSTACLE:
                continue
            neighbors.append(GridNeighbor(r, c, max(code, CELL_ROAD)))
        return neighbors

    def road_cells(self) -> list[Cell]:
        """All cells with a road code (>= 1), row-major."""
        return [(int(r), int(c)) for r, c in np.argwhere(self._grid >= CELL_ROAD)]

    def grid_to_coord(self, row: int, col: int) -> tuple[float, float]:
        """Canvas position of the centre of a cell."""
        return (
            col * self.cell_size + self.cell_size / 2,
            row * self.cell_size + self.cell_size / 2,
        )

    def coord_to_grid(self, x: float, y: float) -> Cell:
        """Cell containing the canvas position (x, y)."""
        return math.floor(y / self.cell_size), math.floor(x / self.cell_size)

    # =========================================================================
    # Path Highlighting
    # =========================================================================

    def set_final_path(self, path: list) -> None:
        self.final_path = list(path)
        self.is_path_highlighted = True

    def set_visited_cells(self, visited: list) -> None:
        self.visited_cells = list(visited)

    def clear_path_highlighting(self) -> None:
        self.final_path = []
        self.visited_cells = []
        self.is_path_highlighted = False

    def is_in_final_path(self, row: int, col: int) -> bool:
        return self.is_path_highlighted and (row, col) in self.final_path

    def is_visited_cell(self, row: int, col: int) -> bool:
        return (row, col) in self.visited_cells

    # =========================================================================
    # Snapshots
    # =========================================================================

    def clone(self) -> GraphModel:
        """Deep copy, for callers that re-render on identity change."""
        return copy.deepcopy(self)

    def to_render_format(self) -> dict:
        """Plain-data snapshot for the renderer."""
        highlight = {
            "finalPath": [_format_id(i) for i in self.final_path],
            "visitedCells": [_format_id(i) for i in self.visited_cells],
            "isPathHighlighted": self.is_path_highlighted,
        }

        if self.is_grid_mode:
            return {
                "grid": self._grid.tolist(),
                "gridSize": self.grid_size,
                "cellSize": self.cell_size,
                **highlight,
            }

        return {
            "nodes": [
                {"id": n.id, "x": n.x, "y": n.y, "label": n.label}
                for n in self._nodes.values()
            ],
            "edges": [
                {"from": e.source, "to": e.target, "weight": e.weight}
                for e in self._edges.values()
            ],
            **highlight,
        }

    def __repr__(self) -> str:
        if self.is_grid_mode:
            return f"GraphModel(grid={self.grid_size}x{self.grid_size})"
        return f"GraphModel(nodes={self.node_count()}, edges={self.edge_count()})"


def _is_valid_weight(weight: object) -> bool:
    """Finite, positive, numeric (bools excluded)."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float, np.number)):
        return False
    return math.isfinite(weight) and weight > 0


def _format_id(identifier: str | Cell) -> str:
    """Node ids pass through; (row, col) cells become "row,col" keys."""
    if isinstance(identifier, tuple):
        return cell_key(*identifier)
    return identifier
