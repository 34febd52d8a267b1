"""
Heuristics module.

Distance estimates used to guide A*:
- euclidean_distance: Straight-line distance between two nodes
- manhattan_distance: Row + column offset between two grid cells
"""

from routeplanner.heuristics.distance import euclidean_distance, manhattan_distance

__all__ = ["euclidean_distance", "manhattan_distance"]
