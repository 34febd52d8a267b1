"""
Route planning session module.

Provides RouteSession, which tracks endpoint selection and runs the
chosen algorithm on the session's model.
"""

from routeplanner.planner.session import RouteSession

__all__ = ["RouteSession"]
