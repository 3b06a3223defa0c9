"""Example domains implementing the Node contract."""
from .grid import Grid2D, GridNode
from .square_puzzle import SquarePuzzle

__all__ = ["Grid2D", "GridNode", "SquarePuzzle"]
