#!/usr/bin/env python3
"""
Compare Dijkstra and A* on random grids.

Reports whether both algorithms agree on the distance and how many cells
each one visited before finishing.

Usage:
    python scripts/compare_algorithms.py
    python scripts/compare_algorithms.py --trials 50 --size 25
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

logging.basicConfig(level=logging.WARNING)  # Quiet mode

from routeplanner.graph import GraphModel  # noqa: E402
from routeplanner.search import ALGORITHMS, get_pathfinder  # noqa: E402


def random_grid(rng: np.random.Generator, size: int, obstacles: float) -> GraphModel:
    """Random grid with open corners; traffic weights 2-5 on some roads."""
    model = GraphModel()
    model.init_grid(size, 30)

    codes = np.where(rng.random((size, size)) < obstacles, -1, 1)
    traffic = rng.random((size, size)) < 0.1
    codes = np.where(traffic & (codes == 1), rng.integers(2, 6, size=(size, size)), codes)
    codes[0, 0] = codes[-1, -1] = 1

    for (row, col), code in np.ndenumerate(codes):
        model.set_cell_type(row, col, int(code))
    return model


def run_comparison(trials: int, size: int, obstacles: float, seed: int) -> None:
    print("=" * 70)
    print("Route Planner - Algorithm Comparison")
    print("=" * 70)
    print(f"\n{trials} random {size}x{size} grids, obstacle rate {obstacles:.0%}\n")

    rng = np.random.default_rng(seed)
    finders = {name: get_pathfinder(name) for name in ALGORITHMS}
    stats = {name: {"visited": [], "time_ms": 0.0} for name in finders}
    solvable = 0
    disagreements = 0

    for i in range(1, trials + 1):
        model = random_grid(rng, size, obstacles)
        results = {}

        for name, finder in finders.items():
            start_time = time.perf_counter()
            results[name] = finder.find_path(model, (0, 0), (size - 1, size - 1))
            stats[name]["time_ms"] += (time.perf_counter() - start_time) * 1000
            stats[name]["visited"].append(len(results[name].visited))

        distances = {r.distance for r in results.values()}
        if len(distances) > 1:
            disagreements += 1
        if results["dijkstra"].found:
            solvable += 1

        line = "  ".join(
            f"{name}: {r.distance:>6.1f} ({len(r.visited):4} visited)" for name, r in results.items()
        )
        print(f"  [{i:3}/{trials}] {line}")

    # Summary
    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(f"  Solvable grids       : {solvable}/{trials}")
    print(f"  Distance disagreement: {disagreements}")

    for name, s in stats.items():
        avg_visited = sum(s["visited"]) / len(s["visited"]) if s["visited"] else 0
        print(f"  {name:10} : avg {avg_visited:7.1f} visited, {s['time_ms']:8.1f} ms total")


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare Dijkstra and A* on random grids")
    parser.add_argument("--trials", type=int, default=20, help="Number of grids")
    parser.add_argument("--size", type=int, default=15, help="Grid size")
    parser.add_argument("--obstacles", type=float, default=0.25, help="Obstacle probability")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    run_comparison(args.trials, args.size, args.obstacles, args.seed)


if __name__ == "__main__":
    main()
