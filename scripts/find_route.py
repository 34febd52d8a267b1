#!/usr/bin/env python3
"""
Route Planner CLI - run one algorithm on a demo graph or a random grid.

Usage:
    python scripts/find_route.py
    python scripts/find_route.py --algorithm dijkstra
    python scripts/find_route.py --grid --size 12 --seed 7
    python scripts/find_route.py --grid --size 20 --obstacles 0.3 --traffic 0.1

Modes:
    graph - Small free-form demo graph (A..F), route from A to F
    grid  - Random grid of roads, obstacles and traffic, corner to corner
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from routeplanner.config import (  # noqa: E402 - must be after sys.path modification
    DEFAULT_ALGORITHM,
    DEFAULT_CELL_SIZE,
    DEFAULT_GRID_SIZE,
    LOG_LEVEL,
    MAX_TRAFFIC_WEIGHT,
)
from routeplanner.graph import GraphModel, cell_key  # noqa: E402
from routeplanner.planner import RouteSession  # noqa: E402
from routeplanner.search import ALGORITHMS  # noqa: E402

# (x, y) positions and weighted edges of the demo graph
DEMO_NODES = [(50, 50), (200, 40), (120, 160), (300, 150), (220, 280), (380, 300)]
DEMO_EDGES = [(0, 1, 7), (0, 2, 9), (1, 2, 10), (1, 3, 15), (2, 3, 11), (2, 4, 2), (3, 5, 6), (4, 5, 9)]


def build_demo_graph(session: RouteSession) -> None:
    """Populate the session with the demo graph and select A -> F."""
    ids = [session.model.add_node(x, y) for x, y in DEMO_NODES]
    for a, b, weight in DEMO_EDGES:
        session.model.add_edge(ids[a], ids[b], weight)
    session.select(ids[0])
    session.select(ids[-1])


def build_random_grid(
    session: RouteSession,
    size: int,
    obstacles: float,
    traffic: float,
    seed: int | None,
) -> None:
    """Fill a size x size grid with roads, obstacles and traffic; select corners."""
    rng = np.random.default_rng(seed)
    session.set_grid_size(size)

    draws = rng.random((size, size))
    weights = rng.integers(2, MAX_TRAFFIC_WEIGHT + 1, size=(size, size))
    for (row, col), draw in np.ndenumerate(draws):
        if draw < obstacles:
            code = -1
        elif draw < obstacles + traffic:
            code = int(weights[row, col])
        else:
            code = 1
        session.model.set_cell_type(row, col, code)

    end = size - 1
    session.model.set_cell_type(0, 0, 1)
    session.model.set_cell_type(end, end, 1)
    session.select(cell_key(0, 0))
    session.select(cell_key(end, end))


def render_grid(model: GraphModel) -> str:
    """ASCII view: # obstacle, . road, digit traffic, * path, o visited."""
    lines = []
    for row in range(model.grid_size):
        chars = []
        for col in range(model.grid_size):
            code = model.get_cell_type(row, col)
            if model.is_in_final_path(row, col):
                chars.append("*")
            elif code == -1:
                chars.append("#")
            elif model.is_visited_cell(row, col):
                chars.append("o")
            elif code > 1:
                chars.append(str(min(code, 9)))
            elif code == 1:
                chars.append(".")
            else:
                chars.append(" ")
        lines.append(" ".join(chars))
    return "\n".join(lines)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a route with Dijkstra or A*",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--algorithm",
        choices=list(ALGORITHMS.keys()),
        default=DEFAULT_ALGORITHM,
        help=f"Search algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument("--grid", action="store_true", help="Use a random grid instead of the demo graph")
    parser.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size (default: %(default)s)")
    parser.add_argument("--obstacles", type=float, default=0.25, help="Obstacle probability per cell")
    parser.add_argument("--traffic", type=float, default=0.15, help="Traffic probability per cell")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    session = RouteSession(model=GraphModel(cell_size=DEFAULT_CELL_SIZE), algorithm=args.algorithm)

    if args.grid:
        build_random_grid(session, args.size, args.obstacles, args.traffic, args.seed)
    else:
        build_demo_graph(session)

    result = session.run()

    print(f"\nAlgorithm: {args.algorithm}")
    print(result.summary())

    if session.model.is_grid_mode:
        print()
        print(render_grid(session.model))
    elif result.found:
        labels = [session.model.get_node(node_id).label for node_id in result.path]
        print(f"Path: {' -> '.join(labels)}")

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
