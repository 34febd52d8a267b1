"""
Route Planner.

A pathfinding engine for interactive route-planning demos: build a weighted
graph or a grid of roads and obstacles, then compare Dijkstra and A*.
"""

__version__ = "0.1.0"
