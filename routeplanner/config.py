"""
Configuration constants for the Route Planner project.

All defaults and tunable parameters are defined here.
Runtime settings are read from environment variables.
"""

import os

# =============================================================================
# Grid Configuration
# =============================================================================

# Default number of rows/columns in a fresh grid
DEFAULT_GRID_SIZE = 15

# Default cell edge length in pixels
DEFAULT_CELL_SIZE = 30

# Cell codes (codes above ROAD are weighted roads, the code is the cost)
CELL_OBSTACLE = -1
CELL_EMPTY = 0
CELL_ROAD = 1

# Upper bound the UI offers for traffic weights
MAX_TRAFFIC_WEIGHT = 10

# =============================================================================
# Free-form Graph Configuration
# =============================================================================

# Node labels cycle through this alphabet (not unique past 26 nodes)
NODE_LABELS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Prefix for generated node ids
NODE_ID_PREFIX = "node"

# Weight used when an edge is added without one
DEFAULT_EDGE_WEIGHT = 1.0

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used by a new route session
DEFAULT_ALGORITHM = "astar"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
