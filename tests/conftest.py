"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from routeplanner.graph import GraphModel


@pytest.fixture
def triangle() -> tuple[GraphModel, dict[str, str]]:
    """
    A(0,0), B(10,0), C(10,10) with A-B 1, B-C 1, A-C 5.

    Returns the model and a label -> node id mapping.
    """
    model = GraphModel()
    ids = {
        "A": model.add_node(0, 0),
        "B": model.add_node(10, 0),
        "C": model.add_node(10, 10),
    }
    model.add_edge(ids["A"], ids["B"], 1)
    model.add_edge(ids["B"], ids["C"], 1)
    model.add_edge(ids["A"], ids["C"], 5)
    return model, ids


@pytest.fixture
def road_grid() -> GraphModel:
    """3x3 all-road grid with an obstacle in the centre."""
    model = GraphModel()
    model.init_grid(3, 30)
    for row in range(3):
        for col in range(3):
            model.set_cell_type(row, col, 1)
    model.set_cell_type(1, 1, -1)
    return model


@pytest.fixture
def walled_grid() -> GraphModel:
    """5x5 all-road grid split by an obstacle wall down column 2."""
    model = GraphModel()
    model.init_grid(5, 30)
    for row in range(5):
        for col in range(5):
            model.set_cell_type(row, col, -1 if col == 2 else 1)
    return model
