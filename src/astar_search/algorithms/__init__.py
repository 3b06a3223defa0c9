"""Search algorithms."""
from .astar import AStar, State

__all__ = ["AStar", "State"]
