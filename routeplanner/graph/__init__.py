"""
Graph model module.

Provides the editable graph used by the search algorithms:
- GraphModel: Free-form nodes/edges or a grid of cells
- Node, Edge, GridNeighbor: Value types
- cell_key / parse_cell_key: "row,col" boundary conversions

Usage:
    from routeplanner.graph import GraphModel

    model = GraphModel()
    a = model.add_node(0, 0)
    b = model.add_node(10, 0)
    model.add_edge(a, b, 3)
"""

from routeplanner.graph.model import GraphModel
from routeplanner.graph.types import (
    Cell,
    Edge,
    GraphMode,
    GridNeighbor,
    Node,
    cell_key,
    coerce_weight,
    generate_id,
    parse_cell_key,
)

__all__ = [
    "GraphModel",
    "GraphMode",
    "Cell",
    "Node",
    "Edge",
    "GridNeighbor",
    "cell_key",
    "coerce_weight",
    "generate_id",
    "parse_cell_key",
]
