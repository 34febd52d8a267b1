"""
Unit tests for GraphModel: free-form nodes/edges, grid cells and snapshots.
"""

import numpy as np
import pytest

from routeplanner.graph import (
    GraphMode,
    GraphModel,
    GridNeighbor,
    cell_key,
    coerce_weight,
    parse_cell_key,
)


class TestNodes:
    """Test node creation and removal."""

    def test_add_node_returns_unique_ids(self):
        """Each added node should get a fresh id."""
        model = GraphModel()
        ids = {model.add_node(i, i) for i in range(50)}
        assert len(ids) == 50
        assert model.node_count() == 50

    def test_add_node_stores_position_and_label(self):
        """Node should keep its position and get labels A, B, C in order."""
        model = GraphModel()
        a = model.add_node(1.5, 2.5)
        b = model.add_node(3, 4)
        assert model.get_node(a).x == 1.5
        assert model.get_node(a).y == 2.5
        assert model.get_node(a).label == "A"
        assert model.get_node(b).label == "B"

    def test_node_id_prefix(self):
        """Generated ids should use the node- prefix."""
        model = GraphModel()
        assert model.add_node(0, 0).startswith("node-")

    def test_labels_wrap_after_z(self):
        """The 27th node reuses label A."""
        model = GraphModel()
        ids = [model.add_node(0, 0) for _ in range(27)]
        assert model.get_node(ids[25]).label == "Z"
        assert model.get_node(ids[26]).label == "A"

    def test_remove_node_cascades_edges(self, triangle):
        """Removing a node should remove every edge touching it."""
        model, ids = triangle
        model.remove_node(ids["B"])
        assert not model.has_node(ids["B"])
        assert model.get_edge(ids["A"], ids["B"]) is None
        assert model.get_edge(ids["C"], ids["B"]) is None
        assert model.edge_count() == 1
        assert model.get_neighbors(ids["A"]) == [ids["C"]]

    def test_remove_missing_node_is_noop(self, triangle):
        """Removing an unknown node should change nothing."""
        model, _ = triangle
        model.remove_node("node-missing")
        assert model.node_count() == 3
        assert model.edge_count() == 3


class TestAddEdge:
    """Test edge creation rules."""

    def test_add_edge_stores_both_directions(self):
        """Both directed entries should exist with the same weight."""
        model = GraphModel()
        a, b = model.add_node(0, 0), model.add_node(1, 0)
        edge = model.add_edge(a, b, 4)
        assert edge is not None
        assert edge.source == a and edge.target == b
        assert model.get_edge(a, b).weight == 4
        assert model.get_edge(b, a).weight == 4

    def test_duplicate_edge_rejected(self, triangle):
        """Adding A-B again (either direction) returns None, count unchanged."""
        model, ids = triangle
        assert model.add_edge(ids["A"], ids["B"], 7) is None
        assert model.add_edge(ids["B"], ids["A"], 7) is None
        assert model.edge_count() == 3
        assert model.get_edge(ids["A"], ids["B"]).weight == 1

    def test_missing_endpoint_rejected(self):
        """Edges to unknown nodes should be rejected."""
        model = GraphModel()
        a = model.add_node(0, 0)
        assert model.add_edge(a, "node-missing", 1) is None
        assert model.edge_count() == 0

    def test_self_loop_rejected(self):
        """A node cannot be connected to itself."""
        model = GraphModel()
        a = model.add_node(0, 0)
        assert model.add_edge(a, a, 1) is None

    @pytest.mark.parametrize("weight", [0, -3, float("inf"), float("nan"), "5", True])
    def test_invalid_weight_rejected(self, weight):
        """Weights must be finite positive numbers."""
        model = GraphModel()
        a, b = model.add_node(0, 0), model.add_node(1, 0)
        assert model.add_edge(a, b, weight) is None
        assert model.edge_count() == 0

    def test_default_weight(self):
        """Weight defaults to 1."""
        model = GraphModel()
        a, b = model.add_node(0, 0), model.add_node(1, 0)
        assert model.add_edge(a, b).weight == 1


class TestEdgeUpdates:
    """Test weight updates, removal and neighbour queries."""

    def test_update_edge_weight_both_directions(self, triangle):
        """Updating from either side changes both entries."""
        model, ids = triangle
        model.update_edge_weight(ids["B"], ids["A"], 9)
        assert model.get_edge(ids["A"], ids["B"]).weight == 9
        assert model.get_edge(ids["B"], ids["A"]).weight == 9

    def test_update_missing_edge_is_noop(self):
        """Updating a non-existent edge should not create it."""
        model = GraphModel()
        a, b = model.add_node(0, 0), model.add_node(1, 0)
        model.update_edge_weight(a, b, 3)
        assert model.get_edge(a, b) is None

    @pytest.mark.parametrize("weight", [0, -3, float("inf"), float("nan"), "5", True])
    def test_update_rejects_invalid_weight(self, triangle, weight):
        """Invalid weights leave both directions unchanged."""
        model, ids = triangle
        model.update_edge_weight(ids["A"], ids["B"], weight)
        assert model.get_edge(ids["A"], ids["B"]).weight == 1
        assert model.get_edge(ids["B"], ids["A"]).weight == 1

    def test_remove_edge(self, triangle):
        """Removing an edge deletes both entries."""
        model, ids = triangle
        model.remove_edge(ids["C"], ids["A"])
        assert model.get_edge(ids["A"], ids["C"]) is None
        assert model.get_edge(ids["C"], ids["A"]) is None
        assert model.edge_count() == 2

    def test_get_neighbors(self, triangle):
        """Neighbours include every undirected neighbour."""
        model, ids = triangle
        assert set(model.get_neighbors(ids["A"])) == {ids["B"], ids["C"]}
        assert set(model.get_neighbors(ids["B"])) == {ids["A"], ids["C"]}

    def test_edges_lists_each_pair_once(self, triangle):
        """The edges property should list one entry per undirected edge."""
        model, _ = triangle
        assert len(model.edges) == 3


class TestGrid:
    """Test grid initialization, cells and neighbours."""

    def test_init_grid_discards_free_form(self, triangle):
        """Switching to grid mode clears nodes and edges."""
        model, _ = triangle
        model.init_grid(4, 20)
        assert model.mode is GraphMode.GRID
        assert model.node_count() == 0
        assert model.edge_count() == 0
        assert model.grid.shape == (4, 4)
        assert np.all(model.grid == 0)

    def test_init_grid_clears_highlighting(self, road_grid):
        """Re-initializing the grid clears path highlighting."""
        road_grid.set_final_path([(0, 0), (0, 1)])
        road_grid.set_visited_cells([(0, 0)])
        road_grid.init_grid(3, 30)
        assert road_grid.final_path == []
        assert road_grid.visited_cells == []
        assert road_grid.is_path_highlighted is False

    def test_init_grid_rejects_non_positive_size(self):
        """Grid size must be positive."""
        with pytest.raises(ValueError):
            GraphModel().init_grid(0, 30)

    def test_use_free_form_discards_grid(self, road_grid):
        """Switching back to free-form empties the grid."""
        road_grid.use_free_form()
        assert road_grid.mode is GraphMode.FREE_FORM
        assert road_grid.road_cells() == []

    def test_set_and_get_cell_type(self):
        """In-bounds cells can be set and read back."""
        model = GraphModel()
        model.init_grid(3, 30)
        assert model.set_cell_type(2, 1, 5) is True
        assert model.get_cell_type(2, 1) == 5

    @pytest.mark.parametrize("code", [2.7, 1.0, "1", None, True])
    def test_non_integer_code_rejected(self, code):
        """Non-integer codes are rejected instead of being truncated."""
        model = GraphModel()
        model.init_grid(3, 30)
        assert model.set_cell_type(0, 0, code) is False
        assert model.get_cell_type(0, 0) == 0

    def test_numpy_integer_code_accepted(self):
        """Numpy integer codes are valid."""
        model = GraphModel()
        model.init_grid(3, 30)
        assert model.set_cell_type(0, 0, np.int64(4)) is True
        assert model.get_cell_type(0, 0) == 4

    def test_out_of_bounds_cell(self):
        """Out-of-bounds access fails without side effects."""
        model = GraphModel()
        model.init_grid(3, 30)
        assert model.set_cell_type(3, 0, 1) is False
        assert model.set_cell_type(-1, 0, 1) is False
        assert model.get_cell_type(0, 3) is None
        assert np.all(model.grid == 0)

    def test_grid_view_is_read_only(self, road_grid):
        """The grid property cannot be used to bypass set_cell_type."""
        with pytest.raises(ValueError):
            road_grid.grid[0, 0] = 7

    def test_grid_neighbors_exclude_obstacles(self, road_grid):
        """The centre obstacle never appears as a neighbour."""
        neighbors = road_grid.get_grid_neighbors(0, 1)
        assert (1, 1) not in [(n.row, n.col) for n in neighbors]
        assert set(neighbors) == {GridNeighbor(0, 0, 1), GridNeighbor(0, 2, 1)}

    def test_grid_neighbors_are_orthogonal_and_in_bounds(self):
        """Corner cells have two neighbours, no diagonals."""
        model = GraphModel()
        model.init_grid(3, 30)
        cells = {(n.row, n.col) for n in model.get_grid_neighbors(0, 0)}
        assert cells == {(1, 0), (0, 1)}

    def test_grid_neighbor_weights(self):
        """Empty cells weigh 1, weighted roads weigh their code."""
        model = GraphModel()
        model.init_grid(3, 30)
        model.set_cell_type(0, 1, 4)
        weights = {(n.row, n.col): n.weight for n in model.get_grid_neighbors(0, 0)}
        assert weights == {(0, 1): 4, (1, 0): 1}

    def test_road_cells(self):
        """Road cells are those with code >= 1."""
        model = GraphModel()
        model.init_grid(3, 30)
        model.set_cell_type(0, 2, 1)
        model.set_cell_type(2, 0, 3)
        model.set_cell_type(1, 1, -1)
        assert model.road_cells() == [(0, 2), (2, 0)]

    def test_coordinate_conversion(self):
        """Cells map to their centre; positions map back to their cell."""
        model = GraphModel()
        model.init_grid(10, 30)
        assert model.grid_to_coord(2, 3) == (105, 75)
        assert model.coord_to_grid(105, 75) == (2, 3)
        assert model.coord_to_grid(0, 29.9) == (0, 0)
        assert model.coord_to_grid(30, 0) == (0, 1)


class TestSnapshots:
    """Test cloning, highlighting and render snapshots."""

    def test_clone_is_independent(self, triangle):
        """Mutating a clone leaves the original untouched."""
        model, ids = triangle
        copy = model.clone()
        copy.remove_node(ids["A"])
        assert model.has_node(ids["A"])
        assert copy.node_count() == 2

    def test_highlight_queries(self, road_grid):
        """Highlight state answers per-cell queries."""
        road_grid.set_final_path([(0, 0), (0, 1)])
        road_grid.set_visited_cells([(0, 0)])
        assert road_grid.is_in_final_path(0, 1)
        assert not road_grid.is_in_final_path(2, 2)
        assert road_grid.is_visited_cell(0, 0)
        road_grid.clear_path_highlighting()
        assert not road_grid.is_in_final_path(0, 1)

    def test_render_format_grid(self, road_grid):
        """Grid snapshots hold plain lists and cell keys."""
        road_grid.set_final_path([(0, 0), (0, 1)])
        snapshot = road_grid.to_render_format()
        assert snapshot["gridSize"] == 3
        assert snapshot["grid"][1][1] == -1
        assert snapshot["finalPath"] == ["0,0", "0,1"]
        assert snapshot["isPathHighlighted"] is True

    def test_render_format_free_form(self, triangle):
        """Free-form snapshots list nodes and both edge directions."""
        model, _ = triangle
        snapshot = model.to_render_format()
        assert [n["label"] for n in snapshot["nodes"]] == ["A", "B", "C"]
        assert len(snapshot["edges"]) == 6


class TestBoundaryHelpers:
    """Test cell key and weight helpers."""

    def test_cell_key_round_trip(self):
        """cell_key and parse_cell_key agree."""
        assert cell_key(3, 7) == "3,7"
        assert parse_cell_key("3,7") == (3, 7)
        assert parse_cell_key((3, 7)) == (3, 7)

    def test_parse_cell_key_numpy_integers(self):
        """Numpy integer pairs normalize to plain ints."""
        cell = parse_cell_key((np.int64(3), np.int32(7)))
        assert cell == (3, 7)
        assert all(type(v) is int for v in cell)

    @pytest.mark.parametrize("value", ["3", "a,b", "1,2,3", None, (1,), (1.5, 2), (True, 0)])
    def test_parse_cell_key_invalid(self, value):
        """Malformed keys parse to None."""
        assert parse_cell_key(value) is None

    def test_coerce_weight(self):
        """User input is converted to a positive float or the default."""
        assert coerce_weight("4") == 4.0
        assert coerce_weight("abc", 1) == 1
        assert coerce_weight(0, 1) == 1
        assert coerce_weight(-2) is None
        assert coerce_weight(None, 1) == 1
